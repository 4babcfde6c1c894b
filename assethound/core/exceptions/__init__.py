"""Exception hierarchy for AssetHound."""

from .rename import (
    AssetHoundError,
    AssetsDirectoryMissingError,
    IterationLimitError,
    TreeScanError,
)

__all__ = [
    "AssetHoundError",
    "AssetsDirectoryMissingError",
    "IterationLimitError",
    "TreeScanError",
]
