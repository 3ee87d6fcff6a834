"""
Logging configuration for the command-line tool.

Diagnostics go to stderr so they never mix with a report written to stdout.
File output is optional and controlled by config.
"""

import logging
import logging.handlers
import sys
from typing import Optional

from .config import config


def setup_logging(
    logger_name: str = "sensorlog",
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        logger_name: Name of the logger (the package root by default)
        level: Logging level override (falls back to config.log_level)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    level = (level or config.log_level).upper()
    logger.setLevel(level)

    # Don't add handlers if logger already configured
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console handler (stderr keeps stdout free for the report)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_to_file:
        config.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = config.logs_dir / f"{logger_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
