"""Pulls pieces together into a ready Snowflake ID generator.

This module provides:
- create_generator: a function to get an IdGenerator considering a dev/prod environment
"""

import logging

from .ids import IdGenerator, IdParts
from .utils.errors import ClockRegressionError, ConfigurationError, TimestampOverflowError

__all__ = [
    "create_generator",
    "IdGenerator",
    "IdParts",
    "ConfigurationError",
    "ClockRegressionError",
    "TimestampOverflowError",
]


def create_generator(config_name="development"):
    """Initializes an IdGenerator from environment configuration with logging set up.

    Configuration is imported here so that ``.env`` loading and parsing only
    happen for callers of the factory.
    """
    from .config import config
    from .utils.logging import setup_logging

    settings = config[config_name]

    logger = logging.getLogger(__name__)
    setup_logging(logger, debug=settings.DEBUG, log_path=settings.LOG_PATH)

    generator = IdGenerator(
        machine_id=settings.MACHINE_ID,
        max_machine_id=settings.MAX_MACHINE_ID,
        max_sequence=settings.MAX_SEQUENCE,
    )
    logger.info(
        "ID generator ready for machine %d of %d (%s)",
        generator.machine_id, generator.max_machine_id, config_name
    )
    return generator
