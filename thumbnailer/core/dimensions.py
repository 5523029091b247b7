"""Target raster sizes for each conversion strategy."""

import math

from thumbnailer.core.consts import PDF_RENDER_WIDTH, SVG_TARGET_PX
from thumbnailer.core.extension import ConvertibleExtension, ExtensionCategory


def _require_positive(width: float, height: float) -> None:
    finite = math.isfinite(width) and math.isfinite(height)
    if not finite or width <= 0 or height <= 0:
        raise ValueError(f"Dimensions must be positive and finite, got {width}x{height}")


def scale_dimensions(
    width: float, height: float, target_px: float = SVG_TARGET_PX
) -> tuple[int, int]:
    """Scale width/height so their product is roughly target_px, keeping aspect ratio."""
    _require_positive(width, height)

    scale = math.sqrt(target_px / (width * height))
    return max(1, round(width * scale)), max(1, round(height * scale))


def pdf_render_dimensions(page_width: float, page_height: float) -> tuple[int, int]:
    """Fix the width to PDF_RENDER_WIDTH and keep the page aspect ratio."""
    _require_positive(page_width, page_height)

    height = PDF_RENDER_WIDTH * page_height / page_width
    return PDF_RENDER_WIDTH, max(1, round(height))


def target_dimensions(
    extension: ConvertibleExtension, width: float, height: float
) -> tuple[int, int]:
    category = extension.category

    if category is ExtensionCategory.VECTOR:
        return scale_dimensions(width, height)
    if category is ExtensionCategory.DOCUMENT:
        return pdf_render_dimensions(width, height)

    _require_positive(width, height)
    return round(width), round(height)
