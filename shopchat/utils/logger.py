"""
Logging configuration for ShopChat.

One "shopchat" logger writes to stdout; modules log through children of it
(shopchat.core.controller, shopchat.data.catalog_store, ...). Levels come from
environment variables:

    LOG_LEVEL        level for shopchat loggers (default INFO)
    HTTPX_LOG_LEVEL  level for httpx request lines (default WARNING)
"""
import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HTTPX_LOG_LEVEL = os.getenv("HTTPX_LOG_LEVEL", "WARNING").upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("shopchat")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

logger.propagate = False

# httpx logs every store request at INFO, including the full query string
logging.getLogger("httpx").setLevel(HTTPX_LOG_LEVEL)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (will be appended to 'shopchat')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"shopchat.{name}")
    return logger
