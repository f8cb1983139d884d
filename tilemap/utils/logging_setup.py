"""Apply configured log levels to the tilemap loggers."""

from __future__ import annotations

import logging

from ..config import CONFIG, Config

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "tilemap"


def configure_logging(config: Config = CONFIG) -> logging.Logger:
    """Set the package and per-module log levels from ``config``.

    Handlers are left to the application; only levels are touched. Returns
    the package logger.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    numeric_level = getattr(logging, config.logging.global_level.upper(), None)
    if isinstance(numeric_level, int):
        package_logger.setLevel(numeric_level)
    else:
        package_logger.setLevel(logging.WARNING)
        logger.warning(
            "Invalid global log level '%s' in config.", config.logging.global_level
        )

    # Apply per-module levels if defined
    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )
    return package_logger


__all__ = ["configure_logging", "PACKAGE_LOGGER"]
