"""Service layer for AssetHound - the rename-and-rewrite pipeline."""

from .asset_renamer import AssetFile, AssetRenamer
from .convergence_driver import ConvergenceDriver, ConvergenceResult, run_until_converged
from .reference_rewriter import ReferenceRewriter
from .tree_scanner import iter_files, scan_tree

__all__ = [
    "AssetFile",
    "AssetRenamer",
    "ConvergenceDriver",
    "ConvergenceResult",
    "ReferenceRewriter",
    "iter_files",
    "run_until_converged",
    "scan_tree",
]
