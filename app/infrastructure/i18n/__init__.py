"""i18n system - locale-aware routing and translation resolution.

Derives a request's locale from its URL path, rebuilds canonical localized
paths, switches paths between locales and resolves the translation
dictionary for rendering.

Main components:
- models: Locale, LocaleMetadata, SplitPath, LanguageOption, NavLink, errors
- registry: LocaleRegistry with the static LANGUAGES table
- paths: split/build path codec
- resolvers: LocaleResolver and the shared resolve_locale()
- schema: Translations tree models and TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: TranslationResolver with the startup lockstep check
- links: LinkBuilder and localized link helpers
- service: I18nService facade and RouteContext
"""

from infrastructure.i18n.factory import create_translation_resolver
from infrastructure.i18n.links import (
    LinkBuilder,
    blog_base_path,
    blog_post_path,
    download_href,
    home_path,
    language_options,
    localize,
    nav_links,
    switch_locale,
)
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    I18nConfigurationError,
    LanguageOption,
    Locale,
    LocaleConfigurationError,
    LocaleMetadata,
    NavLink,
    SplitPath,
    TranslationConfigurationError,
)
from infrastructure.i18n.paths import build, normalize_segments, split
from infrastructure.i18n.registry import (
    DEFAULT_LOCALE,
    LANGUAGES,
    LocaleRegistry,
    registry,
)
from infrastructure.i18n.resolvers import LocaleResolver, resolve_locale
from infrastructure.i18n.schema import TranslationCatalog, Translations
from infrastructure.i18n.service import I18nService, RouteContext
from infrastructure.i18n.translator import TranslationResolver

__all__ = [
    "DEFAULT_LOCALE",
    "LANGUAGES",
    "I18nConfigurationError",
    "I18nService",
    "LanguageOption",
    "LinkBuilder",
    "Locale",
    "LocaleConfigurationError",
    "LocaleMetadata",
    "LocaleRegistry",
    "LocaleResolver",
    "NavLink",
    "RouteContext",
    "SplitPath",
    "TranslationCatalog",
    "TranslationConfigurationError",
    "TranslationLoader",
    "TranslationResolver",
    "Translations",
    "YAMLTranslationLoader",
    "blog_base_path",
    "blog_post_path",
    "build",
    "create_translation_resolver",
    "download_href",
    "home_path",
    "language_options",
    "localize",
    "nav_links",
    "normalize_segments",
    "registry",
    "resolve_locale",
    "split",
    "switch_locale",
]
