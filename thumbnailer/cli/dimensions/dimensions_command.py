#!/usr/bin/env python3
"""CLI command for computing thumbnail target dimensions."""

import sys

from thumbnailer.core.dimensions import target_dimensions
from thumbnailer.core.extension import ConvertibleExtension


def dimensions_command(args):
    """Print the raster size an extension's strategy would render at."""
    try:
        extension = ConvertibleExtension.parse(args.extension, heif=args.heif)
        width, height = target_dimensions(extension, args.width, args.height)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Extension: {extension} ({extension.category})")
    print(f"Target: {width}x{height}")
    return 0
