"""Content-addressed renaming of files in the asset directory."""

import os
import stat
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from assethound.core.exceptions import AssetsDirectoryMissingError
from assethound.core.utils.hashing import content_digest


@dataclass(frozen=True)
class AssetFile:
    """A whitelisted asset read for one rename attempt."""

    path: Path
    content: bytes

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return os.path.splitext(self.path.name)[1]


class AssetRenamer:
    """Renames whitelisted assets to ``<digest><ext>``.

    Only files whose physical rename succeeded end up in the returned mapping;
    a failed rename leaves the file under its old name and out of the mapping,
    so no reference is ever rewritten to point at a file that does not exist.

    Examples:
        >>> renamer = AssetRenamer([".js", ".css"])
        >>> renamer.rename_assets(Path("dist/x"))
        {"app.js": "3f2a9c0d1e4b5a67.js"}
    """

    def __init__(
        self,
        extensions: Iterable[str],
        hasher: Callable[[bytes], str] = content_digest,
    ):
        """Initialize renamer.

        Args:
            extensions: Eligible extensions including the leading dot
            hasher: Content digest function (bytes -> lowercase hex)
        """
        self.extensions = frozenset(extensions)
        self._hasher = hasher

    def rename_assets(self, assets_dir: Path) -> dict[str, str]:
        """Rename every eligible file in ``assets_dir`` by content digest.

        Args:
            assets_dir: Directory holding the built assets (not recursive)

        Returns:
            Ordered mapping of old basename -> new basename for successful renames

        Raises:
            AssetsDirectoryMissingError: If ``assets_dir`` cannot be listed
        """
        try:
            names = sorted(os.listdir(assets_dir))
        except OSError as e:
            raise AssetsDirectoryMissingError(assets_dir, e) from e

        mapping: dict[str, str] = {}
        for old_name in names:
            if os.path.splitext(old_name)[1] not in self.extensions:
                continue

            asset = self._read_asset(assets_dir / old_name)
            if asset is None:
                continue

            new_name = f"{self._hasher(asset.content)}{asset.extension}"
            if new_name == old_name:
                continue

            if self._rename(asset, assets_dir / new_name):
                mapping[old_name] = new_name

        return mapping

    def _read_asset(self, path: Path) -> AssetFile | None:
        """Read a candidate asset, returning None when it must be skipped."""
        try:
            mode = path.stat().st_mode
        except OSError as e:
            logger.error(f"Error reading file status {path}: {e}")
            logger.warning(f"Skipping rename for {path.name} due to stat error.")
            return None

        if not stat.S_ISREG(mode):
            logger.info(f"Skipping non-file entry: {path.name}")
            return None

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading file {path}: {e}")
            logger.warning(f"Skipping rename for {path.name} due to read error.")
            return None

        return AssetFile(path=path, content=content)

    def _rename(self, asset: AssetFile, new_path: Path) -> bool:
        """Move ``asset`` to ``new_path``; False if the move failed."""
        old_path = asset.path
        if new_path.exists():
            self._report_collision(asset, new_path)

        try:
            old_path.replace(new_path)
        except OSError as e:
            logger.error(f"Error renaming {old_path.name} to {new_path.name}: {e}")
            logger.warning(
                f"Skipping reference updates for {old_path.name} due to rename error."
            )
            return False

        logger.info(f"Renamed: {old_path.name} -> {new_path.name}")
        return True

    def _report_collision(self, asset: AssetFile, target: Path) -> None:
        """Log what is lost when ``target`` is replaced by ``asset``."""
        try:
            existing = target.read_bytes()
        except OSError as e:
            logger.error(
                f"Target {target.name} already exists and could not be read ({e}); "
                f"it will be overwritten by {asset.name}"
            )
            return

        if existing == asset.content:
            logger.warning(
                f"Target {target.name} already exists with identical content; "
                f"replacing it with {asset.name}"
            )
        else:
            logger.error(
                f"Digest collision: {target.name} holds different content and "
                f"will be overwritten by {asset.name}"
            )
