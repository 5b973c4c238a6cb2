"""i18n service for dependency injection.

Provides a class-based interface to the i18n system for page renderers and
API routes, so they never re-derive locale logic at the call site.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from infrastructure.i18n import paths
from infrastructure.i18n.factory import create_translation_resolver
from infrastructure.i18n.links import LinkBuilder
from infrastructure.i18n.models import LanguageOption, Locale, NavLink
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.schema import Translations
from infrastructure.i18n.translator import TranslationResolver


@dataclass(frozen=True)
class RouteContext:
    """Everything a page renderer needs for one request path.

    Attributes:
        locale: Locale derived from the path prefix.
        segments: Content segments of the path.
        canonical_path: Normalized form of the request path.
        html_lang: Value for the page's ``lang`` attribute.
        translations: Translation dictionary of ``locale``.
        language_options: Language switcher entries.
        nav_links: Localized header navigation.
        home_path: Localized home page path.
        download_href: Localized download page path.
    """

    locale: Locale
    segments: Tuple[str, ...]
    canonical_path: str
    html_lang: str
    translations: Translations
    language_options: List[LanguageOption]
    nav_links: List[NavLink]
    home_path: str
    download_href: str

    def to_dict(self, include_translations: bool = False) -> dict:
        data: dict[str, Any] = {
            "locale": self.locale.value,
            "segments": list(self.segments),
            "canonicalPath": self.canonical_path,
            "htmlLang": self.html_lang,
            "languageOptions": [option.to_dict() for option in self.language_options],
            "navLinks": [link.to_dict() for link in self.nav_links],
            "homePath": self.home_path,
            "downloadHref": self.download_href,
        }
        if include_translations:
            data["translations"] = self.translations.model_dump(by_alias=True)
        return data


class I18nService:
    """Class-based i18n facade.

    This is a thin facade - locale parsing, resolution, translation lookup
    and link building are delegated to the underlying components.

    Usage:
        # Via dependency injection
        from infrastructure.services import I18nServiceDep

        @router.get("/route")
        def route(path: str, i18n: I18nServiceDep):
            return i18n.resolve_route(path).to_dict()

        # Direct instantiation
        service = I18nService()
        context = service.resolve_route("/ko/blog/")
    """

    def __init__(
        self,
        translations: Optional[TranslationResolver] = None,
        resolver: Optional[LocaleResolver] = None,
        links: Optional[LinkBuilder] = None,
    ):
        """Initialize i18n service.

        Args:
            translations: Optional pre-built TranslationResolver.
                If not provided, loads the bundled translations via factory.
            resolver: Optional LocaleResolver (default: registry default).
            links: Optional LinkBuilder (default: registry default).
        """
        self._translations = translations or create_translation_resolver()
        self.registry = self._translations.registry
        self.resolver = resolver or LocaleResolver(self.registry)
        self.links = links or LinkBuilder(self.registry)

    def resolve_route(self, path: Optional[str]) -> RouteContext:
        """Build the RouteContext for a request path."""
        locale, segments = paths.split(path, self.registry)
        translations = self._translations.translations_for(locale)
        canonical_path = paths.build(locale, segments, self.registry)
        return RouteContext(
            locale=locale,
            segments=segments,
            canonical_path=canonical_path,
            html_lang=self.registry.metadata_for(locale).html_lang,
            translations=translations,
            language_options=self.links.language_options(canonical_path, locale),
            nav_links=self.links.nav_links(locale, translations.header.nav_links),
            home_path=self.links.home_path(locale),
            download_href=self.links.download_href(
                locale, translations.header.download_path
            ),
        )

    def resolve_locale(self, token: Optional[Any]) -> Locale:
        return self.resolver.resolve(token)

    def translations_for(self, token: Optional[Any]) -> Translations:
        """Return translations for a locale token, falling back to the default locale."""
        return self._translations.translations_for(self.resolver.resolve(token))

    def switch_locale(self, path: Optional[str], target: Optional[Any]) -> str:
        return self.links.switch_locale(path or "", self.resolver.resolve(target))

    def language_options(self, path: Optional[str]) -> List[LanguageOption]:
        locale = paths.split(path, self.registry).locale
        return self.links.language_options(path or "", locale)

    @property
    def translation_resolver(self) -> TranslationResolver:
        """Access underlying TranslationResolver instance."""
        return self._translations
