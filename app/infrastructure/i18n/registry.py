"""Static registry of supported locales.

The registry is the single source of truth for which locales exist, which one
is the default and which URL prefix identifies each of them. It is built once
at import time from the ``LANGUAGES`` table and never mutated afterwards.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple

from infrastructure.i18n.models import Locale, LocaleConfigurationError, LocaleMetadata

LANGUAGES: Mapping[Locale, LocaleMetadata] = MappingProxyType(
    {
        Locale.EN: LocaleMetadata(
            code=Locale.EN,
            label="ENG",
            flag="🇺🇸",
            name="English",
            formatting_locale="en-US",
            html_lang="en",
            path_prefix="en",
        ),
        Locale.KO: LocaleMetadata(
            code=Locale.KO,
            label="KOR",
            flag="🇰🇷",
            name="한국어",
            formatting_locale="ko-KR",
            html_lang="ko",
            path_prefix="ko",
        ),
    }
)

DEFAULT_LOCALE: Locale = Locale.EN


class LocaleRegistry:
    """Read-only lookup over the supported locale table.

    Args:
        languages: Mapping of Locale to its metadata, in display order.
        default_locale: Locale whose canonical paths carry no prefix.

    Raises:
        LocaleConfigurationError: If the table is inconsistent.
    """

    def __init__(
        self,
        languages: Mapping[Locale, LocaleMetadata] = LANGUAGES,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self._languages: Mapping[Locale, LocaleMetadata] = MappingProxyType(
            dict(languages)
        )
        self._default_locale = default_locale
        self._by_prefix: Dict[str, Locale] = {}
        self._validate()

    def _validate(self) -> None:
        if self._default_locale not in self._languages:
            raise LocaleConfigurationError(
                f"Default locale {self._default_locale.value} is not registered"
            )

        missing = [locale.value for locale in Locale if locale not in self._languages]
        if missing:
            raise LocaleConfigurationError(
                f"Locales without metadata: {', '.join(missing)}"
            )

        for code, metadata in self._languages.items():
            if metadata.code != code:
                raise LocaleConfigurationError(
                    f"Metadata for {code.value} is registered as {metadata.code.value}"
                )
            prefix = metadata.path_prefix
            if not prefix or "/" in prefix or prefix != prefix.strip():
                raise LocaleConfigurationError(
                    f"Invalid path prefix {prefix!r} for locale {code.value}"
                )
            if prefix in self._by_prefix:
                raise LocaleConfigurationError(
                    f"Path prefix {prefix!r} is shared by "
                    f"{self._by_prefix[prefix].value} and {code.value}"
                )
            self._by_prefix[prefix] = code

    def metadata_for(self, code: Locale) -> LocaleMetadata:
        """Return the metadata of a supported locale."""
        return self._languages[code]

    def is_supported(self, token: Any) -> bool:
        """Check whether an arbitrary runtime value names a supported locale.

        Matching is exact: ``"KO"`` or ``" ko"`` are not supported tokens.
        """
        if not isinstance(token, str):
            return False
        return any(token == code.value for code in self._languages)

    def default_locale(self) -> Locale:
        return self._default_locale

    def locales(self) -> Tuple[Locale, ...]:
        """Registered locales in table order."""
        return tuple(self._languages.keys())

    def prefixes(self) -> FrozenSet[str]:
        return frozenset(self._by_prefix)

    def locale_for_prefix(self, prefix: str) -> Optional[Locale]:
        """Return the locale identified by a path prefix, if any."""
        return self._by_prefix.get(prefix)

    def __iter__(self) -> Iterator[LocaleMetadata]:
        return iter(self._languages.values())

    def __len__(self) -> int:
        return len(self._languages)


registry = LocaleRegistry()
