"""Logging implementation for keystyle hosts and tools."""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from keystyle.api.logging import KeystyleLoggingConfig
from keystyle.diagnostics.json_codec import dumps_text
from keystyle.runtime.config import get_style_config

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = {k: _json_safe(v) for k, v in extras.items()}
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def _json_safe(value: object) -> object:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def resolve_level(level_name: str) -> int:
    """Map a level name to its number, falling back to INFO for unknown names."""
    return logging.getLevelNamesMapping().get(level_name.strip().upper(), logging.INFO)


def configure_logging(config: KeystyleLoggingConfig) -> None:
    """Install console logging, streaming file records through a queue listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolve_level(config.level_name))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    file_handler = _file_handler(config)
    if file_handler is None:
        root.addHandler(console_handler)
        return

    # Records are written on the listener thread.
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, console_handler, file_handler, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def _file_handler(config: KeystyleLoggingConfig) -> logging.Handler | None:
    if not config.file_path:
        return None
    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_resolve_formatter(config.file_format))
    return handler


def shutdown_logging() -> None:
    """Stop the file streaming listener, flushing queued records."""
    global _QUEUE_LISTENER

    listener, _QUEUE_LISTENER = _QUEUE_LISTENER, None
    if listener is not None:
        listener.stop()


def setup_logging() -> None:
    """Configure logging from style configuration if no handlers are present."""
    root = logging.getLogger()
    if root.handlers:
        return
    settings = get_style_config().logging
    configure_logging(
        KeystyleLoggingConfig(
            level_name=settings.level_name,
            console_format=settings.console_format,
            file_path=settings.file_path,
            file_format="json",
        )
    )


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "resolve_level",
    "setup_logging",
    "shutdown_logging",
]
