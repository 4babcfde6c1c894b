"""Main CLI entry point for AssetHound."""

import argparse
import sys
from typing import Any

from loguru import logger
from pydantic import ValidationError

from assethound.core.config.config import Config

from .parsers import create_main_parser, setup_subparsers
from .utils.rich_output import RichOutputFormatter

CONSOLE_FORMAT = "<level>{level: <8}</level> | {message}"


def setup_logging(verbose: bool = False, config: Any | None = None, debug: bool = False) -> None:
    """Configure loguru sinks for a CLI run.

    Console goes to stderr: DEBUG with ``debug``, INFO with ``verbose``,
    otherwise the configured console level (WARNING by default). File logging
    is added when enabled in the logging config.

    Args:
        verbose: Show per-file progress lines
        config: Config (or LoggingConfig) instance; None for console only
        debug: Show debug lines
    """
    logging_config = getattr(config, "logging", config)

    logger.remove()

    if debug:
        console_level = "DEBUG"
    elif verbose:
        console_level = "INFO"
    elif logging_config is not None:
        console_level = logging_config.console_level
    else:
        console_level = "WARNING"

    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)

    if logging_config is not None and logging_config.file.enabled:
        file_config = logging_config.file
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Build the parser and parse ``argv``."""
    parser = create_main_parser()
    setup_subparsers(parser)
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    return args


def main(argv: list[str] | None = None) -> None:
    """Run the CLI and exit with 0 on success, 1 on failure."""
    args = parse_arguments(argv)

    try:
        config = Config(args=args)
    except (ValidationError, ValueError) as e:
        RichOutputFormatter().error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(
        verbose=getattr(args, "verbose", False),
        config=config,
        debug=config.debug,
    )
    logger.debug(f"Loaded configuration: {config.rename!r}")

    if args.command == "rename":
        from .commands.rename import rename_command

        rename_command(args, config)
    else:
        RichOutputFormatter().error(f"Unknown command: {args.command}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
