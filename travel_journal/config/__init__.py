"""
Configuration package for the Travel Journal record store.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    StorageBackend,
    StorageSettings,
    RedisSettings,
    MapsSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "StorageBackend",
    "StorageSettings",
    "RedisSettings",
    "MapsSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
