"""Rewrites references to renamed assets across the build output tree."""

import os
import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path

from loguru import logger

from assethound.core.utils.classify import is_binary
from assethound.core.utils.path_utils import display_path

from .tree_scanner import scan_tree


class ReferenceRewriter:
    """Replaces old asset names with new ones in every text file under a root.

    Replacement is plain substring substitution: every occurrence of an old
    name is replaced, with no word-boundary or path-separator checks. Old
    names are expected to be distinctive enough that accidental matches do
    not occur (e.g. ``index.4f1c.js``).
    """

    def __init__(self, classifier: Callable[[bytes], bool] = is_binary):
        """Initialize rewriter.

        Args:
            classifier: Predicate returning True for binary buffers
        """
        self._is_binary = classifier

    def rewrite_references(self, root: Path, mapping: Mapping[str, str]) -> int:
        """Apply ``mapping`` to all text files under ``root``.

        Args:
            root: Build output directory
            mapping: Ordered old basename -> new basename pairs

        Returns:
            Number of files whose content was changed and written back

        Raises:
            ValueError: If ``mapping`` is empty
            TreeScanError: If ``root`` cannot be listed
        """
        if not mapping:
            raise ValueError("Cannot rewrite references with an empty mapping")

        all_files = scan_tree(root)
        logger.info(f"Found {len(all_files)} total files to scan for references.")

        updated_count = 0
        for file_path in all_files:
            if self._rewrite_file(file_path, mapping):
                logger.info(f"Updated references in: {display_path(file_path, root)}")
                updated_count += 1

        return updated_count

    def _rewrite_file(self, file_path: Path, mapping: Mapping[str, str]) -> bool:
        """Rewrite a single file; True only if new content was persisted."""
        try:
            raw = file_path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading file {file_path} for reference update: {e}")
            logger.warning(f"Skipping reference update for {file_path}.")
            return False

        if self._is_binary(raw):
            return False

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.error(f"Error decoding file {file_path} as UTF-8: {e}")
            logger.warning(f"Skipping reference update for {file_path}.")
            return False

        original_content = content
        for old_name, new_name in mapping.items():
            if old_name in content:
                content = content.replace(old_name, new_name)

        if content == original_content:
            return False

        try:
            _write_atomic(file_path, content.encode("utf-8"))
        except OSError as e:
            logger.error(f"Error writing updated file {file_path}: {e}")
            return False

        return True


def _write_atomic(path: Path, data: bytes) -> None:
    """Replace ``path`` with ``data`` using write-then-rename.

    The temp file lives in the same directory so ``os.replace`` stays atomic.
    On failure the original file is untouched and the temp file is removed.
    When the directory does not accept new files, the file is overwritten in
    place instead.
    """
    try:
        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.tmp.")
    except OSError as e:
        logger.debug(f"Cannot create temp file next to {path} ({e}); writing in place")
        path.write_bytes(data)
        return

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        try:
            os.chmod(temp_path, path.stat().st_mode & 0o7777)
        except OSError:
            pass  # Keep mkstemp's default permissions
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
