"""Top-level configuration for AssetHound.

Sources are merged in increasing order of precedence:

1. Model defaults
2. JSON config file (``--config`` or ``.assethound.json`` in the CWD)
3. Environment variables (``ASSETHOUND_*``)
4. CLI arguments
5. Keyword arguments passed to ``Config(...)`` directly
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from assethound.core.constants import DEFAULT_CONFIG_FILENAME

from .logging_config import LoggingConfig
from .rename_config import RenameConfig


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` recursively, returning a new dict."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config(BaseModel):
    """Validated configuration for a single AssetHound run."""

    rename: RenameConfig = Field(default_factory=RenameConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = Field(default=False, description="Enable debug output")

    def __init__(self, args: Any | None = None, **kwargs: Any):
        data: dict[str, Any] = {}

        config_file = self._locate_config_file(args)
        if config_file is not None:
            data = _deep_merge(data, self._load_config_file(config_file))

        data = _deep_merge(data, self._load_from_env())

        if args is not None:
            data = _deep_merge(data, self._extract_cli_overrides(args))

        data = _deep_merge(data, kwargs)
        super().__init__(**data)

    @staticmethod
    def _locate_config_file(args: Any | None) -> Path | None:
        explicit = getattr(args, "config", None) if args is not None else None
        if explicit:
            path = Path(explicit)
            if not path.is_file():
                raise ValueError(f"Config file not found: {path}")
            return path

        discovered = Path.cwd() / DEFAULT_CONFIG_FILENAME
        return discovered if discovered.is_file() else None

    @staticmethod
    def _load_config_file(path: Path) -> dict[str, Any]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to load config file {path}: {e}") from e
        if not isinstance(payload, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        # Relative dist_dir is interpreted against the config file location
        rename = payload.get("rename")
        if isinstance(rename, dict) and isinstance(rename.get("dist_dir"), str):
            dist_dir = Path(rename["dist_dir"])
            if not dist_dir.is_absolute():
                rename["dist_dir"] = str(path.parent / dist_dir)
        return payload

    @staticmethod
    def _load_from_env() -> dict[str, Any]:
        config: dict[str, Any] = {}
        if rename := RenameConfig.load_from_env():
            config["rename"] = rename
        if console_level := os.getenv("ASSETHOUND_LOGGING__CONSOLE_LEVEL"):
            config["logging"] = {"console_level": console_level}
        if os.getenv("ASSETHOUND_DEBUG", "").lower() in ("true", "1", "yes"):
            config["debug"] = True
        return config

    @staticmethod
    def _extract_cli_overrides(args: Any) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        if rename := RenameConfig.extract_cli_overrides(args):
            overrides["rename"] = rename
        if logging_overrides := LoggingConfig.extract_cli_overrides(args):
            overrides["logging"] = logging_overrides
        if getattr(args, "debug", False):
            overrides["debug"] = True
        return overrides
