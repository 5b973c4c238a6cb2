"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import I18nService
from infrastructure.services.providers import (
    get_content_index,
    get_i18n_service,
    get_settings,
)
from modules.feeds import ContentIndex

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# i18n facade dependency - route resolution, translations, language switcher
I18nServiceDep = Annotated[I18nService, Depends(get_i18n_service)]

# Blog content index dependency
ContentIndexDep = Annotated[ContentIndex, Depends(get_content_index)]

__all__ = [
    "SettingsDep",
    "I18nServiceDep",
    "ContentIndexDep",
]
