"""Settings for reading dupFinder logs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .core.exceptions import ConfigurationError
from .core.logger import LogConfig, LogFormat

__all__ = [
    "FileLinkSettings",
    "LoggingConfig",
    "DupFinderIssuesSettings",
    "load_settings",
]


class FileLinkSettings(BaseModel):
    """How fragments are turned into links to the hosted source files."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["pattern", "github", "azure_devops"] = Field(
        default="pattern",
        description="Resolver flavour.",
    )
    pattern: str | None = Field(
        default=None,
        description="URL template with {path}, {file_path}, {line_start} and {line_end}.",
    )
    repository_url: str | None = Field(
        default=None,
        description="Base URL of the repository for the github and azure_devops kinds.",
    )
    revision: str | None = Field(
        default=None,
        description="Commit, tag or branch the links point to.",
    )

    @model_validator(mode="after")
    def _check_required_fields(self) -> FileLinkSettings:
        if self.kind == "pattern":
            if not self.pattern:
                raise ValueError("file link kind 'pattern' requires 'pattern'")
        elif not (self.repository_url and self.revision):
            raise ValueError(f"file link kind '{self.kind}' requires 'repository_url' and 'revision'")
        return self


class LoggingConfig(BaseModel):
    """Structured logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", description="Log level for UnifiedLogger.")
    format: LogFormat = Field(default=LogFormat.JSON, description="Log format (json, key_value).")

    def to_log_config(self) -> LogConfig:
        return LogConfig(level=self.level, format=self.format)


class DupFinderIssuesSettings(BaseModel):
    """Settings of the dupFinder issue provider.

    The log is given either as a path or as raw content, never both.
    """

    model_config = ConfigDict(extra="forbid")

    log_file_path: Path | None = Field(default=None, description="Path to the dupFinder log file.")
    log_file_content: bytes | None = Field(default=None, description="Raw content of the dupFinder log.")
    file_links: FileLinkSettings | None = Field(default=None, description="Optional file link resolution.")
    strict_numbers: bool = Field(
        default=True,
        description="If true, non-numeric Cost/Start/End values abort reading; otherwise they are skipped with a warning.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_log_source(self) -> DupFinderIssuesSettings:
        if (self.log_file_path is None) == (self.log_file_content is None):
            raise ValueError("exactly one of 'log_file_path' or 'log_file_content' must be set")
        return self

    @classmethod
    def from_file_path(cls, log_file_path: str | Path, **kwargs: Any) -> DupFinderIssuesSettings:
        if log_file_path is None or not str(log_file_path).strip():
            raise ConfigurationError("Log file path must not be empty.", setting="log_file_path")
        return cls(log_file_path=Path(log_file_path), **kwargs)

    @classmethod
    def from_content(cls, log_file_content: bytes | str, **kwargs: Any) -> DupFinderIssuesSettings:
        if log_file_content is None:
            raise ConfigurationError("Log file content must not be None.", setting="log_file_content")
        if isinstance(log_file_content, str):
            log_file_content = log_file_content.encode("utf-8")
        return cls(log_file_content=log_file_content, **kwargs)

    def read_log_content(self) -> bytes:
        """Return the raw bytes of the configured log."""

        if self.log_file_path is None:
            return self.log_file_content or b""
        try:
            return self.log_file_path.read_bytes()
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read dupFinder log '{self.log_file_path}': {exc.strerror or exc}",
                setting="log_file_path",
                source=str(self.log_file_path),
                cause=exc,
            ) from exc


def load_settings(path: str | Path, **overrides: Any) -> DupFinderIssuesSettings:
    """Load provider settings from a YAML file.

    A relative ``log_file_path`` is resolved against the directory of the YAML
    file. Keyword ``overrides`` replace top-level keys before validation.
    """

    config_path = Path(path).expanduser()
    try:
        with config_path.open("r", encoding="utf-8") as stream:
            payload = yaml.safe_load(stream)
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read settings file '{config_path}': {exc.strerror or exc}",
            source=str(config_path),
            cause=exc,
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in '{config_path}': {exc}", source=str(config_path), cause=exc) from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Settings file '{config_path}' must contain a mapping.", source=str(config_path))

    payload = {**payload, **overrides}
    log_file_path = payload.get("log_file_path")
    if isinstance(log_file_path, str) and log_file_path.strip():
        candidate = Path(log_file_path).expanduser()
        if not candidate.is_absolute():
            candidate = (config_path.parent / candidate).resolve()
        payload["log_file_path"] = candidate

    try:
        return DupFinderIssuesSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in '{config_path}': {exc}", source=str(config_path), cause=exc) from exc
