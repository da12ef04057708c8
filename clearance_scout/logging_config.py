"""Structured logging configuration."""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from pythonjsonlogger import jsonlogger

from clearance_scout.config import settings

SERVICE_NAME = "clearance-scout"

# Libraries that are chatty at INFO
NOISY_LOGGERS = ("apscheduler", "playwright", "aiosqlite", "asyncio")

SCAN_CONTEXT_FIELDS = ("scan_id", "correlation_id", "retailer")


class ScanJsonFormatter(jsonlogger.JsonFormatter):
    """One JSON object per record, with scan context hoisted to the top level."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = SERVICE_NAME
        log_record['source'] = f"{record.module}.{record.funcName}:{record.lineno}"

        for field in SCAN_CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value


class ConsoleFormatter(logging.Formatter):
    """Plain console lines, suffixed with [scan=...] when a scan is in context."""

    def format(self, record):
        line = super().format(record)
        scan_id = getattr(record, "scan_id", None)
        return f"{line} [scan={scan_id}]" if scan_id else line


def setup_logging(log_dir: str | Path | None = None, to_file: bool | None = None):
    """
    Configure the root logger.

    Console output is always on. JSON files (app.log, error.log) are written to
    ``log_dir`` (default: settings.log_dir) unless file logging is disabled.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        ConsoleFormatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s")
    )
    root_logger.addHandler(console_handler)

    if settings.log_to_file if to_file is None else to_file:
        logs_dir = Path(log_dir or settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        json_formatter = ScanJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")

        app_handler = logging.FileHandler(logs_dir / "app.log", encoding="utf-8")
        app_handler.setFormatter(json_formatter)
        root_logger.addHandler(app_handler)

        error_handler = logging.FileHandler(logs_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(json_formatter)
        root_logger.addHandler(error_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


class ScanLoggerAdapter(logging.LoggerAdapter):
    """Attaches scan context to every record without clobbering per-call extras."""

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return msg, kwargs


def get_logger(name: str, **context) -> ScanLoggerAdapter:
    """
    Get a logger bound to scan context.

    Args:
        name: Logger name (usually __name__)
        **context: Context fields, e.g. scan_id='...', retailer='home-depot'
    """
    return ScanLoggerAdapter(logging.getLogger(name), context)


def new_correlation_id() -> str:
    """Short id used to tie server-side logs to a single scan execution."""
    return uuid4().hex[:16]
