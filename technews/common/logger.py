"""Logging configuration for the tech news agent."""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = "technews"


class TimeZoneFormatter(logging.Formatter):
    """Custom formatter that supports configurable timezone for timestamps."""

    def __init__(self, fmt: str, use_utc: bool = True):
        """
        Initialize formatter with timezone configuration.

        Args:
            fmt: Format string for the log message
            use_utc: If True, use UTC time; if False, use local time
        """
        super().__init__(fmt)
        self.use_utc = use_utc

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        if self.use_utc:
            dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        else:
            dt = datetime.fromtimestamp(record.created)

        if datefmt:
            return dt.strftime(datefmt)

        return dt.isoformat(sep=' ', timespec='seconds')


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    use_utc: bool = False,
) -> logging.Logger:
    """
    Configure the package logger shared by all components.

    Calling it again replaces the previously installed handlers, so the CLI can
    reconfigure logging once settings are loaded.

    Args:
        log_level: Logging level name (default: INFO)
        log_file: Optional path to log file. If not provided, logs to stderr only
        use_utc: If True, use UTC time in logs; if False, use local time

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_formatter = TimeZoneFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        use_utc=use_utc
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(detailed_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    # python-telegram-bot logs every request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger


def get_component_logger(component_name: str) -> logging.Logger:
    """
    Get the logger for a component.

    Component loggers propagate to the package logger configured by setup_logger().

    Args:
        component_name: Name of the component (e.g., 'collector' or 'notifier.telegram')

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component_name}")
