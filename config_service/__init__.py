"""
Centralised configuration for the todo service.

Provides a single access point to the settings used by every package.
"""

from config_service.config import GlobalSettings, settings

__all__ = ["GlobalSettings", "settings"]
