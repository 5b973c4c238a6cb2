"""Translation resolver mapping a resolved locale to its translation tree.

Catalogs are handed over once at startup. The resolver refuses to start
unless there is exactly one catalog per registered locale, so a lookup with
an already-resolved Locale can never miss.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from infrastructure.i18n.models import Locale, TranslationConfigurationError
from infrastructure.i18n.registry import LocaleRegistry, registry as default_registry
from infrastructure.i18n.schema import TranslationCatalog, Translations
from infrastructure.logging import get_module_logger
from infrastructure.models import ContentModel

logger = get_module_logger()


class TranslationResolver:
    """Read-only lookup of translation dictionaries by locale.

    Attributes:
        registry: Locale registry the catalogs must match.
        catalogs: Validated catalogs keyed by Locale.
    """

    def __init__(
        self,
        catalogs: Mapping[Locale, TranslationCatalog],
        registry: LocaleRegistry = default_registry,
    ):
        """Initialize TranslationResolver.

        Args:
            catalogs: One TranslationCatalog per registered locale.
            registry: Locale registry to check the catalogs against.

        Raises:
            TranslationConfigurationError: If catalogs and registry are out of lockstep.
        """
        self.registry = registry
        self.catalogs: Mapping[Locale, TranslationCatalog] = MappingProxyType(
            dict(catalogs)
        )
        self._check_lockstep()
        logger.info(
            "initialized_translation_resolver",
            locales=[locale.value for locale in self.available_locales()],
        )

    def _check_lockstep(self) -> None:
        registered = set(self.registry.locales())
        loaded = set(self.catalogs)
        missing = sorted(locale.value for locale in registered - loaded)
        unexpected = sorted(locale.value for locale in loaded - registered)

        mismatched = sorted(
            locale.value
            for locale, catalog in self.catalogs.items()
            if catalog.locale != locale
        )

        if missing or unexpected or mismatched:
            logger.error(
                "translation_catalogs_out_of_lockstep",
                missing=missing,
                unexpected=unexpected,
                mismatched=mismatched,
            )
            raise TranslationConfigurationError(
                "Translation catalogs do not match the locale registry "
                f"(missing: {missing}, unexpected: {unexpected}, mismatched: {mismatched})"
            )

    def translations_for(self, code: Locale) -> Translations:
        """Return the translation dictionary of a resolved locale."""
        return self.catalogs[code].translations

    def catalog_for(self, code: Locale) -> TranslationCatalog:
        return self.catalogs[code]

    def available_locales(self) -> List[Locale]:
        """Loaded locales in registry order."""
        return [locale for locale in self.registry.locales() if locale in self.catalogs]

    def lookup(self, code: Locale, path: str) -> Any:
        """Look up a value in a translation tree by dotted path.

        Path components are attribute names, or list indexes for list values
        (e.g. "header.nav_links.0.label").

        Args:
            code: Resolved locale.
            path: Dotted path into the tree.

        Returns:
            The value found at ``path``.

        Raises:
            KeyError: If the path does not exist in the tree.
        """
        node: Any = self.translations_for(code)
        for part in path.split("."):
            if isinstance(node, list):
                try:
                    node = node[int(part)]
                except (ValueError, IndexError) as e:
                    raise KeyError(f"Translation path not found: {path}") from e
            elif isinstance(node, dict):
                if part not in node:
                    raise KeyError(f"Translation path not found: {path}")
                node = node[part]
            elif isinstance(node, ContentModel) and part in type(node).model_fields:
                node = getattr(node, part)
            else:
                raise KeyError(f"Translation path not found: {path}")
        return node

    def as_dict(self, code: Locale) -> Dict[str, Any]:
        """Serialize a locale's tree with its authored camelCase keys."""
        return self.translations_for(code).model_dump(by_alias=True)
