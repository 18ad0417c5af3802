#!/usr/bin/env python3
"""
ComicWalker Download Script

A command-line tool for downloading a series from ComicWalker. Resolves the
series' active chapters, downloads every page, removes the XOR obfuscation
applied to some images and saves the pages as PNG files under
<output-dir>/<series>/<chapter>/.

Usage:
    uv run main.py [url]
    uv run main.py [cid] [chapter]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from cwget.config import Settings
from cwget.errors import (
    ComicWalkerError,
    DecodeError,
    DownloadCancelledError,
    KeyFormatError,
    MalformedUrlError,
    RetrievalError,
    SchemaError,
    UnsupportedDrmError,
)
from cwget.parsers import parse_input
from cwget.processors import SeriesResolver

# Load environment variables from .env file
_ = load_dotenv()

# Initialize Rich console for output
console = Console()

USAGE = """Usage:
cwget [url]
cwget [cid] [chapter]"""

# Stage names shown when a download fails
ERROR_STAGES: dict[type[ComicWalkerError], str] = {
    RetrievalError: "download",
    SchemaError: "document parsing",
    MalformedUrlError: "page url",
    KeyFormatError: "page decoding",
    UnsupportedDrmError: "page decoding",
    DecodeError: "image conversion",
}


def non_negative_int(value: str) -> int:
    """argparse type for millisecond options that cannot be negative."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {number}")
    return number


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Download a series from ComicWalker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run main.py https://comic-walker.com/detail/KC_005366_S
  uv run main.py https://comic-walker.com/detail/KC_005366_S/episodes/KC_0053660000200011_E
  uv run main.py KC_005366_S 2 --wait 500
        """,
    )

    _ = parser.add_argument(
        "target",
        nargs="*",
        help="Series or episode URL, or a series id followed by a chapter number",
    )

    _ = parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Folder to save series to (default: manga)",
    )

    _ = parser.add_argument(
        "--wait",
        type=non_negative_int,
        default=None,
        metavar="MS",
        help="Milliseconds to wait between pages",
    )

    _ = parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Download pages again even if they already exist",
    )

    _ = parser.add_argument(
        "--no-convert",
        action="store_true",
        help="Keep pages in their original format instead of converting to PNG",
    )

    _ = parser.add_argument(
        "--index-prefix",
        action="store_true",
        help="Prefix chapter folders with their position in the chapter list",
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging",
    )

    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Combine environment settings with command-line overrides."""
    settings = Settings.from_env()

    if args.output_dir is not None:
        settings.download_path = args.output_dir
    if args.wait is not None:
        settings.page_wait_ms = args.wait
    if args.overwrite:
        settings.overwrite = True
    if args.no_convert:
        settings.convert_to_png = False
    if args.index_prefix:
        settings.index_prefix_chapters = True

    return settings


def describe_failure(error: ComicWalkerError) -> str:
    for error_type, stage in ERROR_STAGES.items():
        if isinstance(error, error_type):
            return f"Failed during {stage}: {error}"
    return str(error)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the download script."""
    args = parse_arguments(argv)
    verbose_mode: bool = getattr(args, "verbose", False)

    ids = parse_input(args.target)
    if ids is None:
        console.print(USAGE, markup=False)
        return 0
    cid, episode = ids

    try:
        settings = build_settings(args)
    except ValueError as e:
        console.print(f"[red]Error: Invalid configuration: {e}[/red]")
        return 1

    if verbose_mode:
        console.print(f"[dim]Series {cid}, episode {episode}, saving to {settings.download_path}[/dim]")

    resolver = SeriesResolver(settings=settings, console=console)

    try:
        series_path = resolver.get(cid, episode)
    except KeyboardInterrupt:
        console.print("\n[yellow]Download interrupted by user.[/yellow]")
        resolver.reporter.display_summary()
        return 1
    except DownloadCancelledError:
        console.print("\n[yellow]Download cancelled.[/yellow]")
        return 1
    except ComicWalkerError as e:
        resolver.reporter.display_error(describe_failure(e))
        if verbose_mode:
            import traceback

            console.print(traceback.format_exc(), style="dim", markup=False)
        resolver.reporter.display_summary()
        return 1

    resolver.reporter.display_summary()
    resolver.reporter.display_success(f"Download completed: {series_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
