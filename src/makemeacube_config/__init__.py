"""MakeMeACube runtime configuration (environment and ``config/.env*`` files)."""

from .settings import Settings, clear_settings_cache, get_settings

__all__ = ["Settings", "clear_settings_cache", "get_settings"]
