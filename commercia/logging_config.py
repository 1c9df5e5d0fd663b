"""Logging configuration for the scraper.

Provides console output for humans and structured JSONL files for later
inspection of scrape runs.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "setup_logging",
    "get_logger",
    "log_scrape_event",
    "SCRAPE_EVENTS",
    "LOG_DIR",
]

LOG_DIR = Path(__file__).parent.parent / "logs"

ROOT_LOGGER = "commercia"

# Structured events written to the JSONL log and the fields each one carries.
# Fields missing from the logged data are written as null.
SCRAPE_EVENTS: Dict[str, Tuple[str, ...]] = {
    "fetch_complete": ("url", "status_code", "bytes"),
    "extract_complete": ("url", "title", "skus", "categories", "properties", "reviews"),
    "save_failed": ("path", "error"),
}


class JSONLFileHandler(logging.Handler):
    """Writes one JSON object per log record, one file per day."""

    def __init__(self, log_dir: Path, prefix: str = ROOT_LOGGER):
        super().__init__()
        self.log_dir = log_dir
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.prefix = prefix

    def _get_log_file(self) -> Path:
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.prefix}_{today}.jsonl"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = {
                "timestamp": datetime.now().isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            if hasattr(record, "event_type"):
                entry["event_type"] = record.event_type
            if hasattr(record, "extra_data"):
                entry.update(record.extra_data)

            with open(self._get_log_file(), "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")

        except Exception:
            self.handleError(record)


class ColoredConsoleHandler(logging.StreamHandler):
    """Console handler with colored level names when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if hasattr(self.stream, "isatty") and self.stream.isatty():
            color = self.COLORS.get(record.levelname, "")
            if color:
                message = message.replace(
                    f"[{record.levelname}]", f"[{color}{record.levelname}{self.RESET}]", 1
                )
        return message


def setup_logging(
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Set up logging for the scraper.

    Args:
        level: Logging level (default: INFO)
        log_to_file: Whether to log to JSONL file
        log_to_console: Whether to log to console
        log_dir: Custom log directory (default: project logs/)

    Returns:
        Configured root logger for the commercia package
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    # Console goes to stderr so stdout carries only the JSON document
    if log_to_console:
        console_handler = ColoredConsoleHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        ))
        logger.addHandler(console_handler)

    if log_to_file:
        file_handler = JSONLFileHandler(log_dir or LOG_DIR)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (will be prefixed with 'commercia.')
    """
    if name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def log_scrape_event(
    event_type: str,
    data: Dict[str, Any],
    level: int = logging.INFO,
    logger_name: str = ROOT_LOGGER,
) -> None:
    """Log a structured scrape event.

    Args:
        event_type: One of SCRAPE_EVENTS
        data: Event-specific data; keys outside the event's fields are kept too
        level: Log level
        logger_name: Logger to use

    Raises:
        ValueError: If event_type is not in SCRAPE_EVENTS
    """
    fields = SCRAPE_EVENTS.get(event_type)
    if fields is None:
        raise ValueError(f"Unknown scrape event: {event_type}")

    logger = get_logger(logger_name)
    if not logger.isEnabledFor(level):
        return

    record = logger.makeRecord(
        logger.name,
        level,
        "(commercia)",
        0,
        data.get("message", event_type),
        (),
        None,
    )
    record.event_type = event_type
    extra = {name: data.get(name) for name in fields}
    extra.update((k, v) for k, v in data.items() if k != "message")
    record.extra_data = extra

    logger.handle(record)
