#!/usr/bin/env python3
"""Main CLI entry point for thumbnailer."""

import argparse
import os
import sys

from dotenv import load_dotenv

from thumbnailer.cli.check.check_command import check_command
from thumbnailer.cli.dimensions.dimensions_command import dimensions_command
from thumbnailer.cli.extensions.extensions_command import extensions_command
from thumbnailer.core.extension import ExtensionCategory


def _add_heif_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--heif",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable extended raster formats (default: config / THUMBNAILER_HEIF)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thumbnailer", description="Thumbnail extension registry CLI tool"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Extensions command
    extensions_parser = subparsers.add_parser(
        "extensions", help="List convertible extensions and size limits"
    )
    extensions_parser.add_argument(
        "--category",
        choices=[c.value for c in ExtensionCategory],
        help="Only list extensions in this category",
    )
    extensions_parser.add_argument("--config", help="Path to a YAML config file")
    _add_heif_flag(extensions_parser)

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Check which files are eligible for thumbnails"
    )
    check_parser.add_argument(
        "paths", nargs="+", help="Files or directories (searched recursively)"
    )
    check_parser.add_argument("--config", help="Path to a YAML config file")
    _add_heif_flag(check_parser)

    # Dimensions command
    dimensions_parser = subparsers.add_parser(
        "dimensions", help="Compute the target raster size for a source"
    )
    dimensions_parser.add_argument("extension", help="File extension (e.g., 'svg')")
    dimensions_parser.add_argument("width", type=float, help="Source width")
    dimensions_parser.add_argument("height", type=float, help="Source height")
    _add_heif_flag(dimensions_parser)

    return parser


def main(argv: list[str] | None = None):
    """Main CLI dispatcher."""
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"))

    try:
        parser = build_parser()
        args = parser.parse_args(argv)

        if args.command == "extensions":
            return extensions_command(args)
        elif args.command == "check":
            return check_command(args)
        elif args.command == "dimensions":
            return dimensions_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main() or 0)
