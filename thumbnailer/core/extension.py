"""Typed file extensions that the thumbnail pipeline knows how to convert."""

from enum import Enum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, ValidationInfo

from thumbnailer.core.consts import (
    GENERIC_EXTENSIONS,
    HEIF_EXTENSIONS,
    PDF_EXTENSIONS,
    SVG_EXTENSIONS,
)
from thumbnailer.core.features import heif_enabled


class UnsupportedExtensionError(ValueError):
    """Raised when text does not name a convertible extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unsupported extension: {extension!r}")


class ExtensionCategory(str, Enum):
    """Which conversion strategy handles an extension."""

    GENERIC = "generic"
    VECTOR = "vector"
    DOCUMENT = "document"
    EXTENDED = "extended"

    def __str__(self) -> str:
        return self.value


_CATEGORY_GROUPS: dict[ExtensionCategory, tuple[str, ...]] = {
    ExtensionCategory.GENERIC: GENERIC_EXTENSIONS,
    ExtensionCategory.VECTOR: SVG_EXTENSIONS,
    ExtensionCategory.DOCUMENT: PDF_EXTENSIONS,
    ExtensionCategory.EXTENDED: HEIF_EXTENSIONS,
}


def extensions_for(category: ExtensionCategory, heif: bool | None = None) -> tuple[str, ...]:
    """Return the extension group for a category (empty if it is gated off)."""
    if category is ExtensionCategory.EXTENDED and not heif_enabled(heif):
        return ()
    return _CATEGORY_GROUPS[category]


class ConvertibleExtension(str, Enum):
    """Every extension that can be converted into a thumbnail.

    The value is the canonical lowercase spelling and is also the wire form.
    """

    BMP = "bmp"
    DIB = "dib"
    FF = "ff"
    GIF = "gif"
    ICO = "ico"
    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"
    PNM = "pnm"
    QOI = "qoi"
    TGA = "tga"
    ICB = "icb"
    VDA = "vda"
    VST = "vst"
    TIFF = "tiff"
    TIF = "tif"
    HEIF = "heif"
    HEIFS = "heifs"
    HEIC = "heic"
    HEICS = "heics"
    AVIF = "avif"
    AVCI = "avci"
    AVCS = "avcs"
    SVG = "svg"
    SVGZ = "svgz"
    PDF = "pdf"
    WEBP = "webp"

    def __str__(self) -> str:
        return self.value

    @property
    def category(self) -> ExtensionCategory:
        for category, group in _CATEGORY_GROUPS.items():
            if self.value in group:
                return category
        raise AssertionError(f"{self.value} is missing from the extension groups")

    @classmethod
    def parse(cls, text: str, heif: bool | None = None) -> "ConvertibleExtension":
        """Parse an extension case-insensitively.

        Raises:
            UnsupportedExtensionError: If the text is not a known extension, or
                names an extended raster format while that group is disabled.
        """
        try:
            extension = cls(text.lower())
        except ValueError:
            raise UnsupportedExtensionError(text) from None

        if extension.category is ExtensionCategory.EXTENDED and not heif_enabled(heif):
            raise UnsupportedExtensionError(text)

        return extension

    @classmethod
    def available(cls, heif: bool | None = None) -> list["ConvertibleExtension"]:
        enabled = heif_enabled(heif)
        return [
            ext
            for ext in cls
            if enabled or ext.category is not ExtensionCategory.EXTENDED
        ]


def _validate_extension(value: Any, info: ValidationInfo) -> ConvertibleExtension:
    if isinstance(value, ConvertibleExtension):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an extension string, got {type(value).__name__}")

    heif = info.context.get("heif") if info.context else None
    return ConvertibleExtension.parse(value, heif=heif)


# Pydantic field type: a bare string on the wire, a ConvertibleExtension in memory
ExtensionStr = Annotated[
    ConvertibleExtension,
    PlainValidator(_validate_extension),
    PlainSerializer(lambda ext: ext.value, return_type=str),
]
