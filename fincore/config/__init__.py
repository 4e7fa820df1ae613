"""Configuration module."""

from fincore.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
