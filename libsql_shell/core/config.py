"""Utilities for loading shell settings from YAML configuration files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_HISTORY_PATH = "~/.libsql_history"


@dataclass(slots=True)
class DatabaseSettings:
    path: str = ":memory:"


@dataclass(slots=True)
class PromptSettings:
    primary: str = "libsql> "
    continuation: str = "...   > "
    directive_marker: str = "."


@dataclass(slots=True)
class HistorySettings:
    path: str | None = DEFAULT_HISTORY_PATH
    enabled: bool = True

    def resolve_path(self) -> Path | None:
        if not self.enabled or not self.path:
            return None
        return Path(self.path).expanduser()


@dataclass(slots=True)
class LoggingSettings:
    level: str = "WARNING"

    def resolve_level(self) -> int:
        value = logging.getLevelName(self.level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level '{self.level}'")
        return value


@dataclass(slots=True)
class PathsSettings:
    statement_logs_dir: str | None = None


@dataclass(slots=True)
class Settings:
    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    prompts: PromptSettings = field(default_factory=PromptSettings)
    history: HistorySettings = field(default_factory=HistorySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    paths: PathsSettings = field(default_factory=PathsSettings)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError("Config file must contain a top-level mapping")
    return payload


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return value


def load_settings(path: str | Path | None = None) -> Settings:
    """Read configuration from *path* and return structured settings.

    With no path the built-in defaults are returned.
    """

    if path is None:
        return Settings()

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at '{config_path}'")
    raw = _load_yaml(config_path)
    defaults = Settings()

    database_raw = _section(raw, "database")
    database = DatabaseSettings(path=str(database_raw.get("path", defaults.database.path)))

    prompts_raw = _section(raw, "prompts")
    prompts = PromptSettings(
        primary=str(prompts_raw.get("primary", defaults.prompts.primary)),
        continuation=str(prompts_raw.get("continuation", defaults.prompts.continuation)),
        directive_marker=str(prompts_raw.get("directive_marker", defaults.prompts.directive_marker)),
    )
    if len(prompts.directive_marker) != 1:
        raise ValueError("prompts.directive_marker must be a single character")

    history_raw = _section(raw, "history")
    history_path = history_raw.get("path", defaults.history.path)
    history = HistorySettings(
        path=str(history_path) if history_path else None,
        enabled=bool(history_raw.get("enabled", defaults.history.enabled)),
    )

    logging_raw = _section(raw, "logging")
    logging_settings = LoggingSettings(level=str(logging_raw.get("level", defaults.logging.level)))

    paths_raw = _section(raw, "paths")
    logs_dir = paths_raw.get("statement_logs_dir")
    paths = PathsSettings(statement_logs_dir=str(logs_dir) if logs_dir else None)

    return Settings(
        database=database,
        prompts=prompts,
        history=history,
        logging=logging_settings,
        paths=paths,
    )
