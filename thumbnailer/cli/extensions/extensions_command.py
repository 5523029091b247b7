#!/usr/bin/env python3
"""CLI command for listing convertible extensions."""

import sys

from rich.console import Console
from rich.table import Table

from thumbnailer.core.consts import (
    MAXIMUM_FILE_SIZE,
    MIB,
    PDF_RENDER_WIDTH,
    SVG_TARGET_PX,
    all_compatible_extensions,
)
from thumbnailer.core.extension import ConvertibleExtension, ExtensionCategory
from thumbnailer.core.load.load import load_config


def extensions_command(args):
    """List enabled extensions with their category, then the size constants."""
    try:
        config = load_config(args.config, heif=args.heif)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    heif = config.features.heif
    category = ExtensionCategory(args.category) if args.category else None
    compatible = set(all_compatible_extensions(heif))

    table = Table(title="Convertible extensions")
    table.add_column("Extension")
    table.add_column("Category")
    table.add_column("Thumbnail registry")

    for ext in ConvertibleExtension.available(heif):
        if category is not None and ext.category is not category:
            continue
        table.add_row(
            ext.value,
            str(ext.category),
            "yes" if ext.value in compatible else "no",
        )

    console = Console()
    console.print(table)
    console.print(f"Extended formats (heif): {'enabled' if heif else 'disabled'}")
    console.print(
        f"Maximum file size: {MAXIMUM_FILE_SIZE} bytes ({MAXIMUM_FILE_SIZE // MIB} MiB)"
    )
    console.print(f"SVG target pixels: {SVG_TARGET_PX:g}")
    console.print(f"PDF render width: {PDF_RENDER_WIDTH}px")

    return 0
