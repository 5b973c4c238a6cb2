"""Factory functions for creating i18n components.

Provides convenience functions for building the translation resolver at
startup with the configuration suitable for the application.
"""

from pathlib import Path

import structlog
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.registry import LocaleRegistry, registry as default_registry
from infrastructure.i18n.translator import TranslationResolver

logger = structlog.get_logger()


def default_translations_dir() -> Path:
    """Return the bundled translations directory (``app/locales``)."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translation_resolver(
    translations_dir: Path | None = None,
    registry: LocaleRegistry = default_registry,
) -> TranslationResolver:
    """Load every locale's translations and build a TranslationResolver.

    Args:
        translations_dir: Path to YAML translation files (default: app/locales)
        registry: Locale registry the catalogs must match.

    Returns:
        TranslationResolver: Resolver holding one validated catalog per locale.

    Raises:
        ValueError: If translations_dir does not exist.
        TranslationConfigurationError: If any locale is missing or invalid.

    Usage:
        resolver = create_translation_resolver()
        copy = resolver.translations_for(Locale.KO)
    """
    if translations_dir is None:
        translations_dir = default_translations_dir()

    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=False)
    resolver = TranslationResolver(loader.load_all(), registry=registry)

    logger.info(
        "translation_resolver_created",
        translations_dir=str(translations_dir),
        locale_count=len(resolver.available_locales()),
    )
    return resolver
