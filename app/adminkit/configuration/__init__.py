"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Module-level Settings instance (read by logging setup)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Message catalog settings
"""

from adminkit.configuration.i18n import I18nSettings
from adminkit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
