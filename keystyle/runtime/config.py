"""Centralized style configuration sourced from environment variables."""

from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class StyleLoggingConfig:
    level_name: str
    console_format: str
    file_path: str | None


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Immutable style engine configuration."""

    legacy_rendering_mode_default: bool
    trace_resolution: bool
    logging: StyleLoggingConfig


_STYLE_CONFIG: ContextVar[StyleConfig | None] = ContextVar("keystyle_style_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("KEYSTYLE_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    name = value.strip().upper()
    return name if name in logging.getLevelNamesMapping() else default


def _normalize_log_format(raw: str) -> str:
    value = raw.strip().lower()
    return value if value in {"text", "json"} else "text"


def load_style_config(*, env: Mapping[str, str] | None = None) -> StyleConfig:
    file_path = _text("KEYSTYLE_LOG_FILE", "", env=env)
    return StyleConfig(
        legacy_rendering_mode_default=_flag("KEYSTYLE_LEGACY_RENDERING_MODE", False, env=env),
        trace_resolution=_flag("KEYSTYLE_TRACE_RESOLUTION", False, env=env),
        logging=StyleLoggingConfig(
            level_name=resolve_log_level_name(env=env),
            console_format=_normalize_log_format(_text("KEYSTYLE_LOG_FORMAT", "text", env=env)),
            file_path=file_path or None,
        ),
    )


def initialize_style_config(*, env: Mapping[str, str] | None = None) -> StyleConfig:
    config = load_style_config(env=env)
    _STYLE_CONFIG.set(config)
    return config


def set_style_config(config: StyleConfig) -> StyleConfig:
    _STYLE_CONFIG.set(config)
    return config


def get_style_config() -> StyleConfig:
    config = _STYLE_CONFIG.get()
    if config is not None:
        return config
    return initialize_style_config()


def reset_style_config() -> None:
    """Drop the cached configuration so the next read reloads the environment."""
    _STYLE_CONFIG.set(None)


__all__ = [
    "StyleConfig",
    "StyleLoggingConfig",
    "get_style_config",
    "initialize_style_config",
    "load_style_config",
    "reset_style_config",
    "resolve_log_level_name",
    "set_style_config",
]
