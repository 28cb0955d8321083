"""Centralized logging configuration for the application."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _level_from_env() -> int:
    if os.getenv("DEBUG", "").lower() in ("1", "true", "yes"):
        return logging.DEBUG
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level, logging.INFO)


LOG_LEVEL = _level_from_env()

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

# the openai client logs every request through httpx
logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str | None = None):
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger
