"""Tests for content-addressed renaming of the asset directory."""

import os
import sys
from pathlib import Path

import pytest

from assethound.core.exceptions import AssetsDirectoryMissingError
from assethound.core.utils.hashing import content_digest
from assethound.services.asset_renamer import AssetFile, AssetRenamer

EXTENSIONS = [".js", ".css", ".woff2", ".woff"]


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    assets = tmp_path / "x"
    assets.mkdir()
    return assets


class TestAssetRenamer:
    """Test AssetRenamer phase-one behavior."""

    def test_renames_whitelisted_files_to_digest(self, assets_dir: Path):
        font = b"\x00\x01font"
        (assets_dir / "app.js").write_bytes(b"X")
        (assets_dir / "font.woff2").write_bytes(font)

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {
            "app.js": f"{content_digest(b'X')}.js",
            "font.woff2": f"{content_digest(font)}.woff2",
        }
        assert sorted(p.name for p in assets_dir.iterdir()) == sorted(mapping.values())

    def test_skips_extensions_outside_whitelist(self, assets_dir: Path):
        (assets_dir / "logo.png").write_bytes(b"png")
        (assets_dir / "README").write_bytes(b"text")
        (assets_dir / "app.JS").write_bytes(b"case sensitive")

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {}
        assert sorted(p.name for p in assets_dir.iterdir()) == ["README", "app.JS", "logo.png"]

    def test_only_last_suffix_counts(self, assets_dir: Path):
        (assets_dir / "vendor.min.js").write_bytes(b"v")
        (assets_dir / "data.js.map").write_bytes(b"m")

        mapping = AssetRenamer([".js"]).rename_assets(assets_dir)

        assert mapping == {"vendor.min.js": f"{content_digest(b'v')}.js"}

    def test_skips_directories(self, assets_dir: Path, log_messages):
        (assets_dir / "chunks.js").mkdir()

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {}
        assert (assets_dir / "chunks.js").is_dir()
        assert any("Skipping non-file entry: chunks.js" in msg for _, msg in log_messages)

    def test_already_canonical_name_is_not_renamed(self, assets_dir: Path):
        canonical = f"{content_digest(b'X')}.js"
        (assets_dir / canonical).write_bytes(b"X")

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {}
        assert (assets_dir / canonical).read_bytes() == b"X"

    def test_missing_directory_is_fatal(self, tmp_path: Path):
        with pytest.raises(AssetsDirectoryMissingError, match="Did the build run correctly"):
            AssetRenamer(EXTENSIONS).rename_assets(tmp_path / "missing")

    def test_non_directory_is_fatal(self, tmp_path: Path):
        not_a_dir = tmp_path / "x"
        not_a_dir.write_text("file", encoding="utf-8")

        with pytest.raises(AssetsDirectoryMissingError, match="Error reading assets directory"):
            AssetRenamer(EXTENSIONS).rename_assets(not_a_dir)

    def test_failed_rename_is_excluded_from_mapping(
        self, assets_dir: Path, monkeypatch: pytest.MonkeyPatch, log_messages
    ):
        (assets_dir / "a.js").write_bytes(b"A")
        (assets_dir / "b.js").write_bytes(b"B")
        real_replace = Path.replace

        def flaky_replace(self, target):
            if self.name == "a.js":
                raise PermissionError(13, "Permission denied", str(self))
            return real_replace(self, target)

        monkeypatch.setattr(Path, "replace", flaky_replace)

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {"b.js": f"{content_digest(b'B')}.js"}
        assert (assets_dir / "a.js").exists()
        assert any(
            level == "ERROR" and "Error renaming a.js" in msg
            for level, msg in log_messages
        )

    def test_read_failure_skips_entry(
        self, assets_dir: Path, monkeypatch: pytest.MonkeyPatch
    ):
        (assets_dir / "a.js").write_bytes(b"A")
        (assets_dir / "b.js").write_bytes(b"B")
        real_read_bytes = Path.read_bytes

        def flaky_read(self):
            if self.name == "a.js":
                raise OSError("disk on fire")
            return real_read_bytes(self)

        monkeypatch.setattr(Path, "read_bytes", flaky_read)

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert list(mapping) == ["b.js"]
        assert (assets_dir / "a.js").exists()

    def test_identical_content_converges_to_same_name(
        self, assets_dir: Path, log_messages
    ):
        (assets_dir / "one.js").write_bytes(b"same")
        (assets_dir / "two.js").write_bytes(b"same")
        (assets_dir / "three.css").write_bytes(b"same")

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        digest = content_digest(b"same")
        assert mapping == {
            "one.js": f"{digest}.js",
            "three.css": f"{digest}.css",
            "two.js": f"{digest}.js",
        }
        assert sorted(p.name for p in assets_dir.iterdir()) == [f"{digest}.css", f"{digest}.js"]
        assert any(
            level == "WARNING" and "already exists" in msg
            for level, msg in log_messages
        )

    def test_overwriting_different_content_is_reported_as_error(
        self, assets_dir: Path, log_messages
    ):
        target_name = f"{content_digest(b'X1')}.js"
        (assets_dir / "a.js").write_bytes(b"X1")
        (assets_dir / target_name).write_bytes(b"DIFFERENT CONTENT Y")

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert mapping == {"a.js": target_name}
        assert (assets_dir / target_name).read_bytes() == b"X1"
        errors = [msg for level, msg in log_messages if level == "ERROR"]
        assert any(
            "Digest collision" in msg and target_name in msg and "a.js" in msg
            for msg in errors
        )
        assert not any("identical content" in msg for _, msg in log_messages)

    def test_mapping_preserves_sorted_order(self, assets_dir: Path):
        for name in ["c.js", "a.js", "b.css"]:
            (assets_dir / name).write_bytes(name.encode())

        mapping = AssetRenamer(EXTENSIONS).rename_assets(assets_dir)

        assert list(mapping) == ["a.js", "b.css", "c.js"]

    def test_does_not_descend_into_subdirectories(self, assets_dir: Path):
        nested = assets_dir / "nested"
        nested.mkdir()
        (nested / "deep.js").write_bytes(b"deep")

        assert AssetRenamer(EXTENSIONS).rename_assets(assets_dir) == {}
        assert (nested / "deep.js").exists()

    def test_custom_hasher_is_used(self, assets_dir: Path):
        (assets_dir / "app.js").write_bytes(b"X")

        mapping = AssetRenamer(EXTENSIONS, hasher=lambda data: "cafebabe").rename_assets(
            assets_dir
        )

        assert mapping == {"app.js": "cafebabe.js"}

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_dangling_symlink_is_skipped(self, assets_dir: Path, log_messages):
        os.symlink(assets_dir / "gone.js", assets_dir / "link.js")

        assert AssetRenamer(EXTENSIONS).rename_assets(assets_dir) == {}
        assert any("Error reading file status" in msg for _, msg in log_messages)


def test_asset_file_properties(tmp_path: Path):
    asset = AssetFile(path=tmp_path / "bundle.min.js", content=b"x")
    assert asset.name == "bundle.min.js"
    assert asset.extension == ".js"
