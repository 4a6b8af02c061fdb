"""Runtime configuration for Trassen Explorer."""

from .settings import ApiSettings, LoggingSettings, Settings, settings

__all__ = ["ApiSettings", "LoggingSettings", "Settings", "settings"]
