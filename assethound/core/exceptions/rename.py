"""Fatal errors raised by the rename-and-rewrite pipeline.

Per-file problems (unreadable file, failed rename, undecodable text, failed
write) are never raised to callers. They are logged and the file is skipped.
Only structural failures that make a run meaningless end up here.
"""

from pathlib import Path


class AssetHoundError(Exception):
    """Base exception for run-level failures."""

    pass


class AssetsDirectoryMissingError(AssetHoundError):
    """Raised when the asset directory cannot be listed.

    This occurs when:
    - The build did not produce the asset subdirectory
    - The asset path exists but is not a readable directory
    """

    def __init__(self, path: Path, reason: OSError | None = None):
        self.path = path
        self.reason = reason
        if reason is None or isinstance(reason, FileNotFoundError):
            message = (
                f"Assets directory not found at {path}. "
                "Did the build run correctly?"
            )
        else:
            message = f"Error reading assets directory {path}: {reason}"
        super().__init__(message)


class TreeScanError(AssetHoundError):
    """Raised when the root of the output tree cannot be listed."""

    def __init__(self, path: Path, reason: OSError | None = None):
        self.path = path
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Failed to scan output tree {path}{detail}")


class IterationLimitError(AssetHoundError):
    """Raised when rename/rewrite passes keep changing files.

    ``iteration`` is the attempt number at which the run was aborted.
    """

    def __init__(self, iteration: int, max_iterations: int):
        self.iteration = iteration
        self.max_iterations = max_iterations
        super().__init__(
            f"Too many iterations ({iteration} of {max_iterations}). "
            "There is most likely a cyclic reference."
        )
