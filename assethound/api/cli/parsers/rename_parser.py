"""Rename command argument parser for AssetHound CLI."""

import argparse
from typing import Any, cast

from .common_arguments import add_common_arguments, add_config_arguments


def add_rename_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add rename command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured rename subparser
    """
    rename_parser = subparsers.add_parser(
        "rename",
        help="Rename assets by content hash and rewrite references",
        description=(
            "Renames every whitelisted file in the asset subdirectory to "
            "<hash><ext> and replaces references to the old names in all text "
            "files of the build output. Passes repeat until nothing changes."
        ),
    )

    # Add rename config arguments (dist_dir, --assets-subdir, --ext, ...)
    add_config_arguments(rename_parser, ["rename"])

    # Add common arguments (verbose, config, debug)
    add_common_arguments(rename_parser)

    return cast(argparse.ArgumentParser, rename_parser)


__all__: list[str] = ["add_rename_subparser"]
