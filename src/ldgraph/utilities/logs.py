"""Logging setup for applications embedding ldgraph.

Library modules only create loggers with logging.getLogger(__name__);
configure_logging() applies the `logging.level` setting to them.
"""

from __future__ import annotations

import logging

from ldgraph.config import ConfigError, ConfigLoader

ROOT_LOGGER = "ldgraph"


def configure_logging(config: ConfigLoader) -> logging.Logger:
    """Set the ldgraph logger level from configuration.

    Args:
        config: Loaded configuration.

    Returns:
        The "ldgraph" logger.

    Raises:
        ConfigError: If logging.level is not a known level name.
    """
    level_name = str(config.get("logging.level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown logging level: {level_name!r}")
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger
