"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: i18n feature settings class (for testing)
    ServerSettings: Server settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    translations_dir = settings.i18n.TRANSLATIONS_DIR
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.infrastructure import ServerSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "ServerSettings", "settings"]
