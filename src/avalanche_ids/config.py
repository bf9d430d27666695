"""
Global configuration for the identifier library.

This module contains environment-specific settings read once at import.
"""

import logging
import os

_SUPPORTED_ENVS: list[str] = ["prod", "test"]

AVALANCHE_IDS_ENV = os.environ.get("AVALANCHE_IDS_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if AVALANCHE_IDS_ENV not in _SUPPORTED_ENVS:
    raise ValueError(
        f"Invalid AVALANCHE_IDS_ENV environment variable: '{AVALANCHE_IDS_ENV}'. "
        f"Supported values: {_SUPPORTED_ENVS}"
    )

_SUPPORTED_LOG_LEVELS: list[str] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL_NAME = os.environ.get(
    "AVALANCHE_IDS_LOG_LEVEL", "DEBUG" if AVALANCHE_IDS_ENV == "test" else "INFO"
).upper()
"""Default log level of the command line when `--verbose` is not given."""

if LOG_LEVEL_NAME not in _SUPPORTED_LOG_LEVELS:
    raise ValueError(
        f"Invalid AVALANCHE_IDS_LOG_LEVEL environment variable: '{LOG_LEVEL_NAME}'. "
        f"Supported values: {_SUPPORTED_LOG_LEVELS}"
    )

LOG_LEVEL: int = logging.getLevelName(LOG_LEVEL_NAME)
"""Numeric form of `LOG_LEVEL_NAME`."""
