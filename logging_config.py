"""
Logging configuration for the basket pricing app.

This module provides a centralized configuration for all loggers in the
application. It allows setting different log levels for the domain,
service, repository and command layers.
"""

import os
import logging
from typing import Dict

from shared.constants import EnvKeys

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Logger hierarchy -> environment variable overriding its level
LAYER_LOGGERS = {
    "domain": EnvKeys.LOG_LEVEL_DOMAIN,
    "services": EnvKeys.LOG_LEVEL_SERVICES,
    "repositories": EnvKeys.LOG_LEVEL_REPOSITORIES,
    "commands": EnvKeys.LOG_LEVEL_COMMANDS,
}


def configure_logging(level: str = None):
    """
    Configure logging for the application.

    Args:
        level: Root level name; defaults to the LOG_LEVEL environment variable
    """
    log_level_name = (level or os.getenv(EnvKeys.LOG_LEVEL, "INFO")).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    # Configure root logger
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for logger_name, env_key in LAYER_LOGGERS.items():
        logger = logging.getLogger(logger_name)
        level_name = os.getenv(env_key, logging.getLevelName(log_level)).upper()
        logger.setLevel(getattr(logging, level_name, log_level))

        # Ensure each logger has a handler
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

        # Layer loggers have their own handler; avoid duplicate root output
        logger.propagate = False


def get_logger_levels() -> Dict[str, str]:
    """Get current log levels for all configured loggers."""
    result = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in LAYER_LOGGERS:
        logger = logging.getLogger(logger_name)
        result[logger_name] = logging.getLevelName(logger.level)

    return result
