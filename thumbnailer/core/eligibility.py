"""Decide whether a source file should have a thumbnail generated."""

import logging
from collections.abc import Iterable
from pathlib import Path

from thumbnailer.core.consts import MAXIMUM_FILE_SIZE
from thumbnailer.core.extension import ConvertibleExtension, UnsupportedExtensionError
from thumbnailer.core.shapes import Eligibility

logger = logging.getLogger(__name__)


def extension_of(path: str | Path) -> str:
    """Return the file suffix without its leading dot ("" if there is none)."""
    return Path(path).suffix[1:]


def check_file(
    path: str | Path,
    heif: bool | None = None,
    skip_extensions: Iterable[ConvertibleExtension] = (),
) -> Eligibility:
    """Check a file's extension and size against the thumbnail rules.

    Raises:
        FileNotFoundError: If the path does not exist
        ValueError: If the path is not a regular file
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")

    size = file_path.stat().st_size

    try:
        extension = ConvertibleExtension.parse(extension_of(file_path), heif=heif)
    except UnsupportedExtensionError:
        logger.debug(f"Unsupported extension, skipping: {file_path}")
        return Eligibility(path=str(file_path), size=size, reason="unsupported_extension")

    result = Eligibility(
        path=str(file_path),
        size=size,
        extension=extension,
        category=extension.category,
    )

    if extension in set(skip_extensions):
        logger.info(f"Extension '{extension}' is configured to be skipped: {file_path}")
        result.reason = "skipped"
    elif size > MAXIMUM_FILE_SIZE:
        logger.info(
            f"File exceeds {MAXIMUM_FILE_SIZE} bytes ({size} bytes): {file_path}"
        )
        result.reason = "too_large"

    return result
