"""Manages configuration variables.

This module provides:
- Config: a base class for pulling environment variables
- DevelopmentConfig: a dev config class for test environments
- ProductionConfig: a config class for production
- config: a dict for getting configuration depending on environment
"""

import os

from dotenv import load_dotenv

from .constants import DEFAULT_MAX_MACHINE_ID, DEFAULT_MAX_SEQUENCE

load_dotenv()


class Config:
    """Base class for pulling environment variables."""

    MACHINE_ID = int(os.getenv("MACHINE_ID", "0"))
    MAX_MACHINE_ID = int(os.getenv("MAX_MACHINE_ID", str(DEFAULT_MAX_MACHINE_ID)))
    MAX_SEQUENCE = int(os.getenv("MAX_SEQUENCE", str(DEFAULT_MAX_SEQUENCE)))

    LOG_PATH = os.getenv("LOG_PATH", "logs")


class DevelopmentConfig(Config):
    """Config class with DEBUG on."""

    DEBUG = True


class ProductionConfig(Config):
    """Config class with DEBUG off."""

    DEBUG = False


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}
