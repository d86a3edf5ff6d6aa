"""Structured logging utilities with JSONL output."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from change_detector.config.settings import get_settings


def get_logger(name: str, log_file: Path | None = None) -> logging.Logger:
    """
    Get a configured logger with a console handler and an optional JSONL handler.

    Args:
        name: Logger name (usually __name__)
        log_file: Optional path to JSONL log file (defaults to the configured one)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if logger.handlers:
        return logger

    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    # Console handler (human-readable)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    log_file = log_file or settings.log_file
    if log_file:
        file_handler = JSONLFileHandler(Path(log_file))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger


class JSONLFileHandler(logging.Handler):
    """Handler that appends log records to a file as JSON Lines."""

    def __init__(self, filepath: Path):
        """
        Initialize JSONL file handler.

        Args:
            filepath: Path to JSONL log file
        """
        super().__init__()
        self.filepath = filepath
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }

            # Structured fields attached by log_event
            if hasattr(record, "extra"):
                log_entry.update(record.extra)

            with open(self.filepath, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry, default=str) + "\n")

        except Exception:
            self.handleError(record)


def log_event(
    logger: logging.Logger,
    event_type: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event with additional metadata.

    Args:
        logger: Logger instance
        event_type: Type of event (e.g., "file_changed", "file_missing")
        message: Human-readable message
        level: Logging level for the record
        **kwargs: Additional metadata to include in log
    """
    if not logger.isEnabledFor(level):
        return

    record = logger.makeRecord(
        logger.name,
        level,
        "(unknown file)",
        0,
        message,
        (),
        None,
    )
    record.extra = {"event_type": event_type, **kwargs}
    logger.handle(record)
