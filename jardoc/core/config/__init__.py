"""Configuration management for jardoc."""

from jardoc.core.config.loader import ConfigLoader
from jardoc.core.config.settings import (
    AnalysisSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AnalysisSettings",
    "ConfigLoader",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
