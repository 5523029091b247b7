from pathlib import Path
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field

from thumbnailer.core.extension import (
    ConvertibleExtension,
    ExtensionCategory,
    ExtensionStr,
)


def _validate_path_format(v: str) -> str:
    if not v.strip():
        raise ValueError("Path cannot be empty")
    try:
        Path(v)
    except Exception as e:
        raise ValueError(f"Invalid path format: {v}") from e
    return v


PathStr = Annotated[str, AfterValidator(_validate_path_format)]

IneligibleReason = Literal["unsupported_extension", "skipped", "too_large"]


class FeatureConfig(BaseModel):
    heif: bool = False


class LoggingConfig(BaseModel):
    enabled: bool = True
    directory: PathStr = ".thumbnailer/logs"


class ThumbnailerConfig(BaseModel):
    features: FeatureConfig = Field(default_factory=FeatureConfig)
    skip_extensions: list[ExtensionStr] = Field(
        default_factory=list,
        description="Convertible extensions that should never be thumbnailed",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Eligibility(BaseModel):
    """Outcome of checking a single file against the thumbnail rules."""

    path: str
    size: int = Field(..., ge=0, description="File size in bytes")
    # Plain enum: a dumped record validates regardless of the heif flag
    extension: ConvertibleExtension | None = None
    category: ExtensionCategory | None = None
    reason: IneligibleReason | None = None

    @property
    def eligible(self) -> bool:
        return self.reason is None
