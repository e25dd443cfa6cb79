"""
Logging setup for the Event Hub API.

Two output formats are supported, selected by ``LOG_FORMAT``:

* ``text``: one human-readable line per record;
* ``json``: one JSON object per record, for log shippers.

Store and service log calls attach ``entity_kind``, ``entity_id`` and
``error_code`` through ``extra=``.  The JSON format emits them as
separate keys; the text format keeps them in the message itself.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extra attributes copied into JSON records when a log call sets them.
CONTEXT_FIELDS = ("entity_kind", "entity_id", "error_code", "method", "path")


class JSONFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            value = record.__dict__.get(key)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_formatter(fmt: str = "text") -> logging.Formatter:
    """Return the formatter for ``fmt``; unknown names fall back to text."""
    if fmt.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, fmt: str = "text") -> None:
    """Configure the root logger once per process.

    A console handler is always attached and a file handler is added
    when ``logfile`` is given.  If the root logger already has handlers
    (pytest, or a second ``create_app`` call) only the level is applied.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = build_formatter(fmt)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
