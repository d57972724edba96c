"""
Logging configuration utilities for Font Responder.

Provides configurable logging with file rotation support.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ..config import DEFAULT_LOG_FORMAT, ResponderConfig


def setup_logging(config: Optional[ResponderConfig] = None) -> None:
    """
    Configure logging based on ResponderConfig settings.

    Args:
        config: ResponderConfig instance. If None, uses sensible defaults.

    Example:
        config = ResponderConfig.load("fonts.yaml")
        setup_logging(config)
    """
    if config is None:
        setup_logging_from_dict({})
    else:
        setup_logging_from_dict(config.to_dict()["logging"])


def setup_logging_from_dict(config_dict: dict) -> None:
    """
    Configure logging from a dictionary.

    Args:
        config_dict: Dictionary with logging configuration, the ``logging``
            block of a config file.
            - level: Log level (DEBUG, INFO, WARNING, ERROR)
            - file: Optional log file path
            - format: Log format string
            - max_bytes: Max file size before rotation
            - backup_count: Number of backup files to keep
    """
    level_str = config_dict.get("level", "INFO").upper()
    level = getattr(logging, level_str, logging.INFO)
    log_format = config_dict.get("format", DEFAULT_LOG_FORMAT)
    log_file = config_dict.get("file")
    max_bytes = config_dict.get("max_bytes", 10485760)
    backup_count = config_dict.get("backup_count", 3)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler with rotation (if configured)
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
