"""Configuration and CLI handling."""

from playlist_manager.config.settings import (
    DEFAULT_API_URL,
    DEFAULT_DATA_DIR,
    LOG_FILENAME,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_DATA_DIR",
    "LOG_FILENAME",
    "Settings",
    "load_settings",
]
