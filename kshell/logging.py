"""
Logging configuration for kshell.
"""

import logging
import logging.config
import os

from kshell.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def setup_logging(default_level=None):
    """Configure diagnostic logging for the whole package.

    Messages go to stderr so they never mix with command output. The level
    comes from ``default_level`` or, when omitted, from the ``KSHELL_LOG_LEVEL``
    environment variable.

    Args:
        default_level: A ``logging`` level name or number.
    """
    if default_level is None:
        default_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "[%(asctime)s] - [%(levelname)s] - %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "kshell": {
                "handlers": ["console"],
                "level": default_level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)
