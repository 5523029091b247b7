#!/usr/bin/env python3
"""CLI command for checking which files are eligible for thumbnails."""

import sys
import time
from pathlib import Path

from rich.console import Console
from rich.table import Table

from thumbnailer.cli.check.logging_manager import StructuredLogger
from thumbnailer.core.eligibility import check_file
from thumbnailer.core.load.load import load_config
from thumbnailer.core.shapes import Eligibility

REASON_LABELS = {
    "unsupported_extension": "unsupported extension",
    "skipped": "skipped by config",
    "too_large": "too large",
}


def _collect_files(paths: list[str]) -> tuple[list[Path], list[str]]:
    """Expand directories recursively; return (files, missing paths)."""
    files: list[Path] = []
    missing: list[str] = []

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            missing.append(raw)

    return files, missing


def _render_table(results: list[Eligibility]) -> Table:
    table = Table(title="Thumbnail eligibility")
    table.add_column("Path")
    table.add_column("Extension")
    table.add_column("Category")
    table.add_column("Size", justify="right")
    table.add_column("Status")

    for result in results:
        status = (
            "[green]eligible[/green]"
            if result.eligible
            else f"[yellow]{REASON_LABELS[result.reason]}[/yellow]"
        )
        table.add_row(
            result.path,
            str(result.extension) if result.extension else "-",
            str(result.category) if result.category else "-",
            str(result.size),
            status,
        )

    return table


def check_command(args):
    """Check files and print an eligibility table."""
    console = Console()
    start_time = time.time()

    try:
        config = load_config(args.config, heif=args.heif)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    heif = config.features.heif

    logger = StructuredLogger(config.logging.directory) if config.logging.enabled else None
    if logger:
        logger.log_check_start(list(args.paths), heif)

    files, missing = _collect_files(args.paths)
    for path in missing:
        print(f"Error: File not found: {path}", file=sys.stderr)
        if logger:
            logger.log_file_error(path, "FileNotFoundError", f"File not found: {path}")

    results: list[Eligibility] = []
    for path in files:
        try:
            result = check_file(path, heif=heif, skip_extensions=config.skip_extensions)
        except (FileNotFoundError, ValueError) as e:
            # File vanished or changed type between listing and checking
            print(f"Error: {e}", file=sys.stderr)
            if logger:
                logger.log_file_error(str(path), type(e).__name__, str(e))
            continue

        results.append(result)
        if logger:
            logger.log_file_result(result)

    console.print(_render_table(results))

    eligible = sum(1 for r in results if r.eligible)
    console.print(f"{eligible} of {len(results)} files eligible")

    if logger:
        logger.log_check_complete(len(results), eligible, time.time() - start_time)
        console.print(f"  Logs: {logger.log_file}")

    return 1 if missing else 0
