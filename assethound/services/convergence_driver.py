"""Fixed-point driver for the rename-and-rewrite pipeline.

Each iteration hashes and renames assets first, then rewrites references to
them. Hashing always happens before the rewrite of the same iteration, so an
asset that references another asset is hashed on its pre-rewrite bytes and
picks up the new reference on the next pass. The loop ends when a pass has
nothing left to rename or rewrites no file at all.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from assethound.core.config.rename_config import RenameConfig
from assethound.core.exceptions import IterationLimitError
from assethound.core.utils.classify import is_binary
from assethound.core.utils.hashing import content_digest

from .asset_renamer import AssetRenamer
from .reference_rewriter import ReferenceRewriter


@dataclass
class ConvergenceResult:
    """Outcome of a successful run."""

    iterations: int
    renamed: int = 0
    rewritten: int = 0
    mappings: list[dict[str, str]] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.renamed > 0 or self.rewritten > 0


class ConvergenceDriver:
    """Repeats rename + rewrite passes until the output tree stops changing."""

    def __init__(
        self,
        dist_path: Path,
        assets_path: Path,
        extensions: list[str] | tuple[str, ...],
        max_iterations: int = 10,
        hasher: Callable[[bytes], str] = content_digest,
        classifier: Callable[[bytes], bool] = is_binary,
    ):
        """Initialize driver.

        Args:
            dist_path: Root of the build output tree
            assets_path: Directory whose files are renamed
            extensions: Extensions eligible for renaming
            max_iterations: Attempts allowed before assuming a cycle
            hasher: Content digest function
            classifier: Binary-buffer predicate
        """
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
        self.dist_path = Path(dist_path)
        self.assets_path = Path(assets_path)
        self.max_iterations = max_iterations
        self._renamer = AssetRenamer(extensions, hasher=hasher)
        self._rewriter = ReferenceRewriter(classifier=classifier)

    @classmethod
    def from_config(cls, config: RenameConfig, **kwargs) -> "ConvergenceDriver":
        """Build a driver from validated rename configuration."""
        return cls(
            dist_path=config.get_dist_path(),
            assets_path=config.get_assets_path(),
            extensions=config.extensions,
            max_iterations=config.max_iterations,
            **kwargs,
        )

    def run(self) -> ConvergenceResult:
        """Run passes until convergence.

        Returns:
            ConvergenceResult with the number of attempts and totals

        Raises:
            AssetsDirectoryMissingError: Asset directory cannot be listed
            TreeScanError: Output tree root cannot be listed
            IterationLimitError: Still rewriting files after max_iterations attempts
        """
        result = ConvergenceResult(iterations=0)
        iteration = 1

        while True:
            result.iterations = iteration
            logger.info(f"Iteration #{iteration}")

            updated = self._run_pass(result)
            if updated == 0:
                logger.info(
                    "Asset renaming and reference update process finished "
                    f"successfully in {iteration} iterations."
                )
                return result

            if iteration >= self.max_iterations:
                raise IterationLimitError(iteration, self.max_iterations)
            iteration += 1

    def _run_pass(self, result: ConvergenceResult) -> int:
        """Run one rename + rewrite pass, returning the number of rewritten files."""
        mapping = self._renamer.rename_assets(self.assets_path)
        if not mapping:
            logger.info("No assets were renamed. Skipping reference update phase.")
            return 0

        result.renamed += len(mapping)
        result.mappings.append(mapping)

        updated = self._rewriter.rewrite_references(self.dist_path, mapping)
        result.rewritten += updated
        return updated


def run_until_converged(config: RenameConfig, **kwargs) -> ConvergenceResult:
    """Convenience wrapper: build a driver from ``config`` and run it."""
    return ConvergenceDriver.from_config(config, **kwargs).run()
