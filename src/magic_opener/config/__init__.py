"""Configuration for magic-opener."""

from magic_opener.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
