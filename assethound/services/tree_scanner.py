"""Recursive file enumeration for the build output tree."""

import os
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from assethound.core.exceptions import TreeScanError


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every regular file under ``root``.

    Traversal is iterative (explicit stack) so deep trees cannot hit the
    recursion limit. Symbolic links are neither followed nor yielded.
    Directories are visited in sorted order, which makes the output order
    deterministic for a given tree.

    Raises:
        TreeScanError: If ``root`` itself cannot be listed. Unreadable
            subdirectories are logged and skipped instead.
    """
    root = Path(root)
    stack: list[Path] = [root]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            if current == root:
                raise TreeScanError(root, e) from e
            logger.error(f"Error reading directory {current}: {e}")
            continue

        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    yield Path(entry.path)
            except OSError as e:
                logger.error(f"Error inspecting {entry.path}: {e}")

        # Reverse so the lexically first subdirectory is popped first
        stack.extend(reversed(subdirs))


def scan_tree(root: Path) -> list[Path]:
    """Return all regular files under ``root`` as a sorted list."""
    return sorted(iter_files(root))
