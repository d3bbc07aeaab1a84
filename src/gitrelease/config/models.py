"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GITRELEASE__SECTION__KEY)
3. Repo YAML (.gitrelease.yaml)
4. Global YAML (~/.config/gitrelease/config.yaml)
5. Built-in defaults (this file)

Examples:
    GITRELEASE__LOGGING__LEVEL=DEBUG
    GITRELEASE__GIT__REMOTE=upstream
    GITRELEASE__GIT__COMMAND_TIMEOUT_SEC=30
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GITRELEASE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every git invocation.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GitConfig(BaseModel):
    """Git invocation settings.

    Env vars:
        GITRELEASE__GIT__EXECUTABLE: git binary (default: git)
        GITRELEASE__GIT__REMOTE: Remote pushed to by push_to_origin (default: origin)
        GITRELEASE__GIT__TAG_PREFIX: Prefix for release tags (default: v)
        GITRELEASE__GIT__COMMAND_TIMEOUT_SEC: Per-command timeout, unset for none
    """

    executable: str = Field(default="git", description="git executable name or path.")
    remote: str = Field(default="origin", description="Remote used for pushing releases.")
    tag_prefix: str = Field(default="v", description="Prefix for tag names and merge messages.")
    command_timeout_sec: float | None = Field(
        default=None,
        description="Kill a git command after this many seconds. Unset waits forever.",
    )

    @field_validator("executable", "remote")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("command_timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class GitReleaseConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    git: GitConfig = Field(default_factory=GitConfig)
