"""
Configuration module for the application.
Exports the settings singleton and its accessor.
"""

from config.settings import get_settings, settings

__all__ = ["get_settings", "settings"]
