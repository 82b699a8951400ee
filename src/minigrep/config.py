from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_FILE = ".minigrep.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Messages:
    matched: str = "Pattern matched"
    not_matched: str = "Pattern not matched!"

    @staticmethod
    def from_obj(obj: Any, *, source: str) -> "Messages":
        if obj is None:
            return Messages()
        if not isinstance(obj, Mapping):
            raise ConfigError(f"{source}: messages must be a mapping")
        unknown = sorted(set(obj) - {"matched", "not_matched"})
        if unknown:
            raise ConfigError(f"{source}: unknown messages keys: {', '.join(map(str, unknown))}")
        defaults = Messages()
        return Messages(
            matched=_ensure_str(obj.get("matched", defaults.matched), source=source, field_name="messages.matched"),
            not_matched=_ensure_str(
                obj.get("not_matched", defaults.not_matched), source=source, field_name="messages.not_matched"
            ),
        )


@dataclass(frozen=True)
class Config:
    quiet: bool = False
    log_level: str = "WARNING"
    messages: Messages = field(default_factory=Messages)
    source: str | None = None


def _ensure_str(value: Any, *, source: str, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{source}: '{field_name}' must be a string")
    return value


def normalize_log_level(value: Any, *, source: str) -> str:
    if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
        raise ConfigError(f"{source}: 'log_level' must be one of: {', '.join(_LOG_LEVELS)}")
    return value.upper()


def parse_config_obj(data: Any, *, source: str) -> Config:
    if data is None:
        return Config(source=source)

    if not isinstance(data, Mapping):
        raise ConfigError(f"{source}: expected a mapping")

    unknown = sorted(set(data) - {"quiet", "log_level", "messages"})
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(map(str, unknown))}")

    quiet = data.get("quiet", False)
    if not isinstance(quiet, bool):
        raise ConfigError(f"{source}: 'quiet' must be true or false")

    return Config(
        quiet=quiet,
        log_level=normalize_log_level(data.get("log_level", "WARNING"), source=source),
        messages=Messages.from_obj(data.get("messages"), source=source),
        source=source,
    )


def load_config(path: Path, *, required: bool = False) -> Config:
    if not path.exists():
        if required:
            raise ConfigError(f"config file not found: {path}")
        return Config()
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e
    return parse_config_obj(obj, source=str(path))
