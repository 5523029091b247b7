"""Extension groups and size constants used by the thumbnail pipeline."""

from thumbnailer.core.features import heif_enabled

# The size of 1MiB in bytes
MIB = 1_048_576

# Largest source file (in bytes) that will have a thumbnail generated
MAXIMUM_FILE_SIZE = MIB * 192

# Raster formats with good encoding and decoding support in a standard bitmap codec
GENERIC_EXTENSIONS: tuple[str, ...] = (
    "bmp",
    "dib",
    "ff",
    "gif",
    "ico",
    "jpg",
    "jpeg",
    "png",
    "pnm",
    "qoi",
    "tga",
    "icb",
    "vda",
    "vst",
    "tiff",
    "tif",
    "webp",
)
SVG_EXTENSIONS: tuple[str, ...] = ("svg", "svgz")
PDF_EXTENSIONS: tuple[str, ...] = ("pdf",)
# Only available when the heif capability is enabled
HEIF_EXTENSIONS: tuple[str, ...] = (
    "heif",
    "heifs",
    "heic",
    "heics",
    "avif",
    "avci",
    "avcs",
)

# 512x512, spread over the SVG's own aspect ratio
SVG_TARGET_PX = 262_144.0

# 120 DPI at A4 paper width; page height follows the page aspect ratio
PDF_RENDER_WIDTH = 992


def all_compatible_extensions(heif: bool | None = None) -> list[str]:
    """Return every raster and vector extension the pipeline will attempt.

    Document extensions are handled separately and are not included.
    """
    extensions = list(GENERIC_EXTENSIONS)
    if heif_enabled(heif):
        extensions.extend(HEIF_EXTENSIONS)
    extensions.extend(SVG_EXTENSIONS)
    return extensions
