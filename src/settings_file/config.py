"""Configuration for the settings file parser and its logging."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="INFO", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    json_logs: bool = Field(default=True, description="Emit JSON logs")
    # Optional file path for log output; if None, logs go to stdout.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, ge=1, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, ge=0, description="Number of rotated log files to keep")


class ParserConfig(BaseSettings):
    """Parser behaviour, loaded from env or an optional TOML file."""

    # Environment keys use SETTINGS_FILE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="SETTINGS_FILE_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    # Text encoding of settings files.
    encoding: str = Field(default="utf-8", description="Settings file encoding")
    # Lines starting with one of these (after trimming) are comments.
    comment_prefixes: list[str] = Field(default_factory=lambda: ["#", "//"], description="Comment markers")
    # Return empty settings for a missing file instead of raising.
    missing_ok: bool = Field(default=True, description="Tolerate missing settings files")
    # Sort keys when rendering arguments.
    sort_arguments: bool = Field(default=False, description="Sort rendered arguments by key")

    @classmethod
    def from_toml(cls, path: str | Path) -> "ParserConfig":
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)
