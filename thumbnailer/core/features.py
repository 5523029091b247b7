"""Runtime capability flags."""

import logging
import os

from pydantic import TypeAdapter

logger = logging.getLogger(__name__)

HEIF_ENV_VAR = "THUMBNAILER_HEIF"

_bool_adapter = TypeAdapter(bool)


def parse_flag(value: str | bool) -> bool:
    """Parse a flag the way pydantic parses booleans ("1", "yes", "on", ...)."""
    return _bool_adapter.validate_python(value)


def heif_enabled(override: bool | None = None) -> bool:
    """Resolve whether the extended raster (HEIF/AVIF) group is available.

    An explicit override wins. Otherwise the THUMBNAILER_HEIF environment
    variable is consulted; unset or empty means disabled.
    """
    if override is not None:
        return override

    raw = os.environ.get(HEIF_ENV_VAR, "").strip()
    if not raw:
        return False

    enabled = parse_flag(raw)
    logger.debug(f"{HEIF_ENV_VAR}={raw!r} resolved to {enabled}")
    return enabled
