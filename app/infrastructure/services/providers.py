"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import I18nService, create_translation_resolver
from modules.feeds import ContentIndex, load_content_index


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped i18n service singleton.

    Loads and validates every locale's translations on first call. The
    server lifespan calls this at startup so configuration errors abort boot.

    Returns:
        I18nService: Cached service built from settings.i18n.TRANSLATIONS_DIR.

    Usage:
        @router.get("/route")
        def route(path: str, i18n: I18nServiceDep):
            return i18n.resolve_route(path).to_dict()
    """
    settings = get_settings()
    resolver = create_translation_resolver(
        translations_dir=settings.i18n.TRANSLATIONS_DIR
    )
    return I18nService(translations=resolver)


@lru_cache
def get_content_index() -> ContentIndex:
    """
    Get application-scoped blog content index.

    Returns:
        ContentIndex: Posts listed in settings.i18n.CONTENT_INDEX, or an
        empty index when no file is configured.
    """
    settings = get_settings()
    return load_content_index(settings.i18n.CONTENT_INDEX)
