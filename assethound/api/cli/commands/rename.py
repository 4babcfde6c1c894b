"""Rename command module - content-addressed asset renaming."""

import argparse
import sys
import time

from loguru import logger

from assethound.core.config.config import Config
from assethound.core.exceptions import AssetHoundError
from assethound.services.convergence_driver import ConvergenceDriver

from ..utils.rich_output import RichOutputFormatter


def rename_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the rename command.

    Exits with status 1 on any run-level failure; returns normally on success,
    including when there was nothing to rename.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=getattr(args, "verbose", False))
    rename_config = config.rename

    formatter.section_header("AssetHound Asset Renaming")
    formatter.verbose_info(f"Output directory: {rename_config.get_dist_path()}")
    formatter.verbose_info(f"Assets directory: {rename_config.get_assets_path()}")
    formatter.verbose_info(f"Extensions: {' '.join(rename_config.extensions)}")

    start_time = time.perf_counter()
    try:
        result = ConvergenceDriver.from_config(rename_config).run()
    except AssetHoundError as e:
        formatter.error(str(e))
        logger.debug(f"Run failed: {e!r}")
        sys.exit(1)

    elapsed = time.perf_counter() - start_time

    if not result.changed:
        formatter.success("No assets were renamed; output is already content-addressed.")
        return

    if formatter.verbose:
        combined: dict[str, str] = {}
        for mapping in result.mappings:
            combined.update(mapping)
        formatter.mapping_table(combined)

    formatter.completion_summary(
        {
            "iterations": result.iterations,
            "renamed": result.renamed,
            "rewritten": result.rewritten,
        },
        elapsed,
    )
