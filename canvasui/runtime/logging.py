"""Root logging setup for canvasui applications.

Scene, input and window modules log ``event key=value ...`` messages, e.g.
``drag_begin node=Box(x=0, y=0, width=20, height=20) origin=(5.0, 5.0)``.
``JsonFormatter`` splits those into an ``event`` name and a ``data`` mapping
so drag and focus traces can be filtered without re-parsing the message.
"""

from __future__ import annotations

import json
import logging
import queue
import re
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from canvasui.api.logging import LoggingConfig

BACKEND_LOGGER_NAMES: tuple[str, ...] = ("rendercanvas", "wgpu", "glfw")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_QUEUE_LISTENER: QueueListener | None = None

_EVENT_NAME_RE = re.compile(r"[a-z][a-z0-9_]*")
# A value is either a call-like/parenthesized repr or a bare token.
_PAIR_RE = re.compile(r"(\w+)=([^\s(=,]*\([^)]*\)|[^\s,:]+)")

_RECORD_ATTRIBUTES: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


def parse_event_message(message: str) -> tuple[str | None, dict[str, object]]:
    """Split ``event key=value ...`` into the event name and its typed values."""
    head, _, _ = message.partition(" ")
    event = head if _EVENT_NAME_RE.fullmatch(head) else None
    data = {key: _coerce(value) for key, value in _PAIR_RE.findall(message)}
    return event, data


def _coerce(value: str) -> object:
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


class JsonFormatter(logging.Formatter):
    """One JSON object per record with the scene event split out."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": message,
        }
        event, data = parse_event_message(message)
        if event is not None:
            payload["event"] = event
        if data:
            payload["data"] = data
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRIBUTES}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_logging(config: LoggingConfig) -> None:
    """Install console (and optional queued file) handlers on the root logger."""
    global _QUEUE_LISTENER

    stop_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level(config.level_name, logging.INFO))
    for name in BACKEND_LOGGER_NAMES:
        logging.getLogger(name).setLevel(_level(config.backend_level_name, logging.WARNING))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return
    # File writes happen on the listener thread, off the draw callback.
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging unless the host application already did."""
    if logging.getLogger().handlers:
        return
    configure_logging(config if config is not None else LoggingConfig())


def stop_logging() -> None:
    """Flush and stop the queued file listener, if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


__all__ = [
    "BACKEND_LOGGER_NAMES",
    "JsonFormatter",
    "configure_logging",
    "parse_event_message",
    "setup_logging",
    "stop_logging",
]
