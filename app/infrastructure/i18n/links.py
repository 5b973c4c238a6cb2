"""Localized link building for navigation and the language switcher.

All functions compose the path codec and the registry; none of them contain
locale logic of their own.
"""

from typing import Iterable, List

from infrastructure.i18n import paths
from infrastructure.i18n.models import LanguageOption, Locale, NavLink
from infrastructure.i18n.registry import LocaleRegistry, registry as default_registry
from infrastructure.i18n.schema import NavLinkConfig


class LinkBuilder:
    """Builds canonical localized paths for a locale registry."""

    def __init__(self, registry: LocaleRegistry = default_registry):
        self.registry = registry

    def localize(self, content_path: str, locale: Locale) -> str:
        """Build the canonical path of a content path under ``locale``.

        The content path is taken as content only; a leading slash is
        ignored. A first component equal to a locale prefix is still
        content here, unlike in ``paths.split``.
        """
        stripped = content_path[1:] if content_path.startswith("/") else content_path
        return paths.build(locale, paths.normalize_segments(stripped), self.registry)

    def switch_locale(self, current_path: str, target_locale: Locale) -> str:
        """Rebuild ``current_path`` under ``target_locale``, keeping its content segments."""
        _, segments = paths.split(current_path, self.registry)
        return paths.build(target_locale, segments, self.registry)

    def language_options(
        self, current_path: str, active_locale: Locale
    ) -> List[LanguageOption]:
        """Return one switcher entry per registered locale, in registry order."""
        return [
            LanguageOption(
                code=metadata.code,
                label=metadata.label,
                flag=metadata.flag,
                href=self.switch_locale(current_path, metadata.code),
                is_active=metadata.code == active_locale,
            )
            for metadata in self.registry
        ]

    def nav_links(
        self, locale: Locale, nav_links: Iterable[NavLinkConfig]
    ) -> List[NavLink]:
        return [
            NavLink(label=item.label, href=self.localize(item.path, locale))
            for item in nav_links
        ]

    def download_href(self, locale: Locale, path: str) -> str:
        return self.localize(path, locale)

    def blog_base_path(self, locale: Locale) -> str:
        return self.localize("blog", locale)

    def blog_post_path(self, locale: Locale, slug: str) -> str:
        return self.localize(f"blog/{slug}", locale)

    def home_path(self, locale: Locale) -> str:
        return self.localize("", locale)


default_link_builder = LinkBuilder()

localize = default_link_builder.localize
switch_locale = default_link_builder.switch_locale
language_options = default_link_builder.language_options
nav_links = default_link_builder.nav_links
download_href = default_link_builder.download_href
blog_base_path = default_link_builder.blog_base_path
blog_post_path = default_link_builder.blog_post_path
home_path = default_link_builder.home_path
