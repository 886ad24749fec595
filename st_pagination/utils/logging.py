"""Logging configuration for st_pagination."""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from st_pagination.config import APP_NAME, LOG_FORMAT, LOG_JSON, LOG_LEVEL


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter adding app context to every record."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["app_name"] = APP_NAME
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        if hasattr(record, "pagination_id"):
            log_record["pagination_id"] = record.pagination_id


def setup_logging(level: str = LOG_LEVEL, json_output: bool = LOG_JSON) -> None:
    """Configure the root logger with a single stdout handler."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if json_output:
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("streamlit").setLevel(logging.WARNING)

    get_logger(__name__).debug(
        "Logging configured",
        extra={"log_level": level, "log_json": json_output},
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
