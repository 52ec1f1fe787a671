"""Public keystyle logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeystyleLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: KeystyleLoggingConfig) -> None:
    """Configure root logging for a host or tool."""
    from keystyle.runtime.logging import configure_logging as runtime_configure_logging

    runtime_configure_logging(config)


def setup_logging() -> None:
    """Configure logging from environment unless the host already did."""
    from keystyle.runtime.logging import setup_logging as runtime_setup_logging

    runtime_setup_logging()


__all__ = ["KeystyleLoggingConfig", "configure_logging", "setup_logging"]
