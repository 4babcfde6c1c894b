"""Rename configuration for AssetHound.

This module describes where the build output lives, which subdirectory holds
the assets to rename and which file extensions are eligible.
"""

import argparse
import os
from pathlib import Path, PurePath
from typing import Any

from pydantic import BaseModel, Field, field_validator

from assethound.core.constants import (
    DEFAULT_ASSETS_SUBDIR,
    DEFAULT_DIST_DIR,
    DEFAULT_EXTENSIONS,
    DEFAULT_MAX_ITERATIONS,
)


class RenameConfig(BaseModel):
    """Asset rename configuration.

    Configuration can be provided via:
    - Environment variables (ASSETHOUND_RENAME__*)
    - Configuration files
    - CLI arguments
    - Default values
    """

    dist_dir: Path = Field(
        default=Path(DEFAULT_DIST_DIR),
        description="Build output directory scanned for references",
    )

    assets_subdir: str = Field(
        default=DEFAULT_ASSETS_SUBDIR,
        description="Subdirectory of dist_dir containing the assets to rename",
    )

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="File extensions (with leading dot) eligible for renaming",
    )

    max_iterations: int = Field(
        default=DEFAULT_MAX_ITERATIONS,
        ge=1,
        description="Maximum rename/rewrite passes before assuming a cyclic reference",
    )

    @field_validator("dist_dir", mode="before")
    @classmethod
    def validate_dist_dir(cls, v: Any) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            if not v.strip():
                raise ValueError("dist_dir cannot be empty")
            return Path(v)
        return v

    @field_validator("assets_subdir")
    @classmethod
    def validate_assets_subdir(cls, v: str) -> str:
        """Assets must live inside the output tree."""
        if not v.strip():
            raise ValueError("assets_subdir cannot be empty")
        pure = PurePath(v)
        if pure.is_absolute() or pure.anchor:
            raise ValueError(f"assets_subdir must be relative to dist_dir: {v}")
        if ".." in pure.parts:
            raise ValueError(f"assets_subdir must not leave dist_dir: {v}")
        return v

    @field_validator("extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: Any) -> list[str]:
        """Normalize extensions to '.ext' form, preserving order."""
        if isinstance(v, str):
            v = v.split(",")
        normalized: list[str] = []
        for raw in v:
            ext = str(raw).strip()
            if not ext or ext == ".":
                raise ValueError("Extensions cannot be empty")
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("At least one extension is required")
        return normalized

    def get_dist_path(self) -> Path:
        """Absolute build output directory."""
        return self.dist_dir.resolve()

    def get_assets_path(self) -> Path:
        """Absolute asset directory inside the build output."""
        return self.get_dist_path() / self.assets_subdir

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add rename-related CLI arguments."""
        parser.add_argument(
            "dist_dir",
            nargs="?",
            type=Path,
            default=None,
            help=f"Build output directory (default: {DEFAULT_DIST_DIR})",
        )

        parser.add_argument(
            "--assets-subdir",
            type=str,
            help=f"Asset subdirectory relative to the output directory (default: {DEFAULT_ASSETS_SUBDIR})",
        )

        parser.add_argument(
            "--ext",
            "--extensions",
            dest="extensions",
            nargs="+",
            metavar="EXT",
            help=f"Extensions eligible for renaming (default: {' '.join(DEFAULT_EXTENSIONS)})",
        )

        parser.add_argument(
            "--max-iterations",
            type=int,
            help=f"Maximum rename passes before giving up (default: {DEFAULT_MAX_ITERATIONS})",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load rename config from environment variables."""
        config: dict[str, Any] = {}
        if dist_dir := os.getenv("ASSETHOUND_RENAME__DIST_DIR"):
            config["dist_dir"] = Path(dist_dir)
        if assets_subdir := os.getenv("ASSETHOUND_RENAME__ASSETS_SUBDIR"):
            config["assets_subdir"] = assets_subdir
        if extensions := os.getenv("ASSETHOUND_RENAME__EXTENSIONS"):
            config["extensions"] = [e for e in extensions.split(",") if e.strip()]
        if max_iterations := os.getenv("ASSETHOUND_RENAME__MAX_ITERATIONS"):
            try:
                config["max_iterations"] = int(max_iterations)
            except ValueError:
                pass
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract rename config from CLI arguments."""
        overrides: dict[str, Any] = {}
        if getattr(args, "dist_dir", None):
            overrides["dist_dir"] = args.dist_dir
        if getattr(args, "assets_subdir", None):
            overrides["assets_subdir"] = args.assets_subdir
        if getattr(args, "extensions", None):
            overrides["extensions"] = args.extensions
        if getattr(args, "max_iterations", None) is not None:
            overrides["max_iterations"] = args.max_iterations
        return overrides

    def __repr__(self) -> str:
        """String representation of rename configuration."""
        parts = [
            f"dist_dir={self.dist_dir}",
            f"assets_subdir={self.assets_subdir}",
            f"extensions={self.extensions}",
            f"max_iterations={self.max_iterations}",
        ]
        return f"RenameConfig({', '.join(parts)})"
