"""Translation loading interface and implementations.

Defines the contract for loading translations and provides YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

import structlog
from infrastructure.i18n.models import Locale, TranslationConfigurationError
from infrastructure.i18n.schema import TranslationCatalog, Translations

logger = structlog.get_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with the validated translation tree.

        Raises:
            FileNotFoundError: If translation files not found.
            TranslationConfigurationError: If translation content is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every locale that has files.

        Returns:
            Dict mapping Locale to TranslationCatalog.
        """


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``overlay`` into a copy of ``base``; nested dicts merge, other values replace."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named ``<domain>.<locale>.yml`` (e.g. ``site.ko.yml``) in
    the translations directory. All files of a locale are merged in file
    name order and the result is validated against ``Translations``.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Optional cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load and validate the translation tree for a locale.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with the validated tree.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            TranslationConfigurationError: If parsing or schema validation fails.
        """
        if self.use_cache and locale in self.cache:
            return self.cache[locale]

        yaml_files = sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        data: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            data = deep_merge(data, self._read_file(yaml_file))

        try:
            translations = Translations.model_validate(data)
        except ValidationError as e:
            logger.error(
                "translation_schema_error",
                locale=locale.value,
                error_count=e.error_count(),
                errors=[
                    ".".join(str(part) for part in err["loc"]) for err in e.errors()
                ],
            )
            raise TranslationConfigurationError(
                f"Translations for {locale.value} do not match the schema: {e}"
            ) from e

        catalog = TranslationCatalog(
            locale=locale,
            translations=translations,
            source_files=tuple(f.name for f in yaml_files),
        )

        logger.info(
            "loaded_translations",
            locale=locale.value,
            file_count=len(yaml_files),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load translations for every supported locale found on disk.

        Files whose locale suffix is not a supported Locale are skipped.

        Returns:
            Dict mapping each Locale to its TranslationCatalog.

        Raises:
            TranslationConfigurationError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "site.ko.yml" -> "ko"
            parts = yaml_file.stem.split(".")
            if len(parts) < 2:
                continue
            try:
                locales_found.add(Locale.from_string(parts[-1]))
            except ValueError:
                logger.warning("skipped_unknown_locale_file", file=yaml_file.name)

        if not locales_found:
            raise TranslationConfigurationError(
                f"No translation files found in {self.translations_dir}"
            )

        return {locale: self.load(locale) for locale in sorted(locales_found)}

    def _read_file(self, yaml_file: Path) -> Dict[str, Any]:
        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise TranslationConfigurationError(
                f"Failed to parse {yaml_file}: {e}"
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error("invalid_yaml_format", file=str(yaml_file), expected="dict")
            raise TranslationConfigurationError(
                f"Expected a mapping at the top of {yaml_file}"
            )
        return data

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
