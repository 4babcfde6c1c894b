"""Main argument parser for AssetHound CLI."""

import argparse
from typing import Any

from assethound import __version__

from .rename_parser import add_rename_subparser


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with version information."""
    parser = argparse.ArgumentParser(
        prog="assethound",
        description="Content-addressed asset renaming for static build output.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  assethound rename                       # dist/x with .js .css .woff2 .woff
  assethound rename build --assets-subdir assets
  assethound rename dist --ext .js .css .svg
  assethound rename dist --max-iterations 5 -v
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"assethound {__version__}",
    )
    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> Any:
    """Register all command subparsers."""
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    add_rename_subparser(subparsers)
    return subparsers
