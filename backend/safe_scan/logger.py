"""
Logging configuration.
"""
import logging
import sys

from safe_scan.config import settings

# Create logger
logger = logging.getLogger("safe_school_scan")
logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.DEBUG)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
console_handler.setFormatter(formatter)

# Add handler
if not logger.handlers:
    logger.addHandler(console_handler)
