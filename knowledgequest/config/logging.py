"""Logging setup for the knowledgequest package logger."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

ROOT_LOGGER = "knowledgequest"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record.

    Records logged through ``log_error`` also carry ``error_code`` and
    ``error_context``; both are copied into the entry.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        code = getattr(record, "error_code", None)
        if code:
            entry["code"] = code
        error_context = getattr(record, "error_context", None)
        if error_context:
            entry["context"] = error_context

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Level name, case-insensitive. Unknown names fall back to INFO.
        log_file: Extra destination; parent directories are created.
        json_format: Emit JSON lines instead of the text format.
    """
    formatter: logging.Formatter
    if json_format:
        formatter = JsonLineFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger
