"""Configuration models for AssetHound."""

from .config import Config
from .logging_config import FileLoggingConfig, LoggingConfig
from .rename_config import RenameConfig

__all__ = [
    "Config",
    "FileLoggingConfig",
    "LoggingConfig",
    "RenameConfig",
]
