"""Common CLI argument patterns shared across parsers."""

import argparse
from pathlib import Path

from assethound.core.config.logging_config import LOG_LEVELS


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments common to all commands.

    Args:
        parser: Argument parser to add common arguments to
    """
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-file progress on the console",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (default: ./.assethound.json if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Enable file logging to specified path",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        help="Set file logging level (default: INFO)",
    )


def add_config_arguments(parser: argparse.ArgumentParser, configs: list[str]) -> None:
    """Add CLI arguments for specified config sections.

    Args:
        parser: Argument parser to add config arguments to
        configs: List of config section names to include
    """
    if "rename" in configs:
        from assethound.core.config.rename_config import RenameConfig

        RenameConfig.add_cli_arguments(parser)
