"""
Logging setup shared by the CLI samples and the web service.
"""

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(level='INFO'):
    """Configure the package logger with a single stderr handler."""
    logger = logging.getLogger('zpl_print_service')
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
