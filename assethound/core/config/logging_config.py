"""Logging configuration models for AssetHound.

The CLI turns these into loguru sinks: one on stderr at ``console_level`` and,
when enabled, a rotating file sink.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def _normalize_level(value: str, kind: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid {kind} '{value}'. Must be one of: {', '.join(LOG_LEVELS)}")
    return level


class FileLoggingConfig(BaseModel):
    """Rotating log file written alongside console output."""

    enabled: bool = False
    path: str = Field(default="assethound.log", description="Log file location")
    level: str = "INFO"
    rotation: str = Field(default="10 MB", description="loguru rotation, e.g. '10 MB' or '1 day'")
    retention: str = Field(default="1 week", description="loguru retention, e.g. '30 days'")
    format: str = DEFAULT_FILE_FORMAT

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        return _normalize_level(v, "log level")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Log file path cannot be empty")
        return v


class LoggingConfig(BaseModel):
    """Console level plus the optional file sink."""

    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)
    console_level: str = "WARNING"

    @field_validator("console_level")
    @classmethod
    def validate_console_level(cls, v: str) -> str:
        return _normalize_level(v, "console log level")

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any] | None:
        """Map ``--log-file``/``--log-level`` onto the file sink.

        Passing ``--log-file`` turns file logging on. Returns None when neither
        flag was given.
        """
        file_overrides: dict[str, Any] = {}
        log_file = getattr(args, "log_file", None)
        if log_file:
            file_overrides["enabled"] = True
            file_overrides["path"] = str(log_file)
        log_level = getattr(args, "log_level", None)
        if log_level:
            file_overrides["level"] = log_level

        return {"file": file_overrides} if file_overrides else None
