"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    ContentIndexDep,
    I18nServiceDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_content_index,
    get_i18n_service,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "ContentIndexDep",
    "get_settings",
    "get_i18n_service",
    "get_content_index",
]
