# src/logging/logger.py — v3
"""Logger factory and the two output formats of the content service.

JSON lines carry the document being loaded as a top-level "path" field, so
every warning about an invalid document can be grepped by path. Text lines
are for the CLI and local development.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, TYPE_CHECKING, Any

from sitecontent.logging.context import get_context

if TYPE_CHECKING:
    from sitecontent.config.settings import Settings

ROOT_LOGGER = "sitecontent"


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Fields: timestamp, level, logger, message, then path / request_id when a
    load or request is in progress, the record's extra "data" dict and any
    exception traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        ctx = get_context()
        if ctx.content_path:
            entry["path"] = ctx.content_path
        if ctx.request_id:
            entry["request_id"] = ctx.request_id

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """`2025-01-15 10:00:00 WARNING  loader [req] (content/x.json) message`"""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        when = datetime.fromtimestamp(record.created, timezone.utc)
        name = record.name.removeprefix(f"{ROOT_LOGGER}.")
        line = f"{when:%Y-%m-%d %H:%M:%S} {record.levelname:<8s} {name}"
        if ctx.request_id:
            line += f" [{ctx.request_id}]"
        if ctx.content_path:
            line += f" ({ctx.content_path})"
        line += f" {record.getMessage()}"
        if record.exc_info and record.exc_info[1] is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(name: str) -> logging.Logger:
    """Logger under the sitecontent hierarchy, e.g. get_logger("loader")."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
    stream: IO[str] | None = None,
) -> None:
    """(Re)configure the sitecontent logger tree.

    Console output goes to stderr unless stream is given, which keeps the
    CLI's stdout reserved for document output. Calling it again replaces
    the previous handlers and closes them.

    Args:
        level: DEBUG, INFO, WARNING or ERROR.
        log_format: "json" or "text".
        log_file: Optional rotating log file; its directory is created.
        rotation: Size at which the file rolls over, e.g. "10MB".
        retention: Rotated files kept.
        stream: Console stream override.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        from sitecontent.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(log_file, rotation=rotation, retention=retention)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def setup_logging_from_settings(
    settings: Settings,
    level: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Apply the LOG_* settings; level, when given, overrides LOG_LEVEL."""
    setup_logging(
        level=level or settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
        stream=stream,
    )
