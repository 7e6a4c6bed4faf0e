"""
Configuration module for speaker statistics.
"""

from .settings import (
    Settings,
    StatsSettings,
    settings,
)
from .logger import logger, get_logger, setup_logging

__all__ = [
    "Settings",
    "StatsSettings",
    "settings",
    "logger",
    "get_logger",
    "setup_logging",
]
