"""Loader for reading thumbnailer configuration from YAML."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from thumbnailer.core.features import HEIF_ENV_VAR, heif_enabled
from thumbnailer.core.shapes import FeatureConfig, ThumbnailerConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when a config file is malformed."""

    pass


def load_config(
    file_path: str | Path | None = None, heif: bool | None = None
) -> ThumbnailerConfig:
    """Load configuration from a YAML file, applying environment overrides.

    Args:
        file_path: Path to the YAML file. When omitted only defaults and the
                   environment are used.
        heif: Explicit extended-format flag; wins over the file and environment.
    """
    data: dict[str, Any] = {}

    if file_path is not None:
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r") as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(
                f"Invalid config in {file_path}: expected a mapping, "
                f"got {type(loaded).__name__}"
            )
        data = loaded

    features = data.get("features") or {}
    if not isinstance(features, dict):
        raise ConfigError(
            f"Invalid config: 'features' must be a mapping, "
            f"got {type(features).__name__}"
        )
    features = dict(features)

    if heif is not None:
        features["heif"] = heif
    elif os.environ.get(HEIF_ENV_VAR, "").strip():
        features["heif"] = heif_enabled()
        logger.info(f"{HEIF_ENV_VAR} overrides features.heif -> {features['heif']}")
    data = {**data, "features": features}

    # Skip extensions are validated against the resolved flag
    resolved = FeatureConfig.model_validate(features).heif
    return ThumbnailerConfig.model_validate(data, context={"heif": resolved})
