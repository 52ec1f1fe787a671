"""Soft keyboard key style resolution."""

from keystyle.api import (
    EnvironmentSnapshot,
    KeyStyle,
    StyleResolver,
    create_environment_snapshot,
    create_style_resolver,
)

__all__ = [
    "EnvironmentSnapshot",
    "KeyStyle",
    "StyleResolver",
    "create_environment_snapshot",
    "create_style_resolver",
]
