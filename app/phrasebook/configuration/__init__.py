"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class

Example:
    ```python
    from phrasebook.configuration import settings

    log_level = settings.LOG_LEVEL
    extension_name = settings.i18n.PLURAL_EXTENSION
    ```
"""

from phrasebook.configuration.i18n import I18nSettings
from phrasebook.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
