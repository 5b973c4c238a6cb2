"""i18n feature settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Locale routing and translation configuration.

    The set of locales itself is static (see ``infrastructure.i18n.registry``);
    only file locations and the public site URL are configurable.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory of ``<domain>.<locale>.yml`` translation
            files (default: bundled ``app/locales``)
        I18N_CONTENT_INDEX: YAML file listing blog posts for feeds (optional)
        SITE_URL: Public base URL of the site (default: https://example.com)

    Example:
        ```python
        from infrastructure.configuration import settings

        translations_dir = settings.i18n.TRANSLATIONS_DIR
        site_url = settings.i18n.SITE_URL
        ```
    """

    TRANSLATIONS_DIR: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    CONTENT_INDEX: Optional[Path] = Field(default=None, alias="I18N_CONTENT_INDEX")
    SITE_URL: str = Field(default="https://example.com", alias="SITE_URL")

    @field_validator("TRANSLATIONS_DIR", "CONTENT_INDEX", mode="before")
    @classmethod
    def empty_path_is_unset(cls, v: object) -> object:
        """Treat an empty environment value as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("SITE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
