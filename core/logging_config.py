"""Logging configuration"""

import logging
import sys

from app.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: logging.Handler | None = None


def setup_logging() -> None:
    """Configure application logging"""
    global _console_handler

    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Console handler, added once per process
    if _console_handler is None:
        formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(formatter)
        root_logger.addHandler(_console_handler)

    # Set uvicorn log level
    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(log_level)
    logging.getLogger("httpx").setLevel(max(log_level, logging.WARNING))
