"""Locale models for the i18n system.

Defines the locale identifiers, their static metadata and the value objects
passed between the path codec, the resolvers and the link builder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

from infrastructure.models import ContentModel


class I18nConfigurationError(ValueError):
    """Raised at startup when locale or translation configuration is inconsistent."""


class LocaleConfigurationError(I18nConfigurationError):
    """Raised when the locale registry table is inconsistent."""


class TranslationConfigurationError(I18nConfigurationError):
    """Raised when translation catalogs are missing, malformed or out of lockstep."""


class Locale(str, Enum):
    """Supported locale identifiers.

    Values are the short language codes used in URLs and content metadata.
    """

    EN = "en"
    KO = "ko"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Strict parsing. Use ``LocaleResolver.resolve`` for untrusted input.

        Args:
            locale_str: Locale string (e.g., "en", "ko").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e


@dataclass(frozen=True)
class LocaleMetadata:
    """Static metadata for a single supported locale.

    Attributes:
        code: The Locale this metadata describes.
        label: Short label shown in the language switcher (e.g., "KOR").
        flag: Flag glyph shown next to the label.
        name: Native display name (e.g., "한국어").
        formatting_locale: BCP 47 tag used for date and number formatting.
        html_lang: Value for the ``lang`` attribute of rendered pages.
        path_prefix: URL segment identifying the locale when it is not the default.
    """

    code: Locale
    label: str
    flag: str
    name: str
    formatting_locale: str
    html_lang: str
    path_prefix: str


class SplitPath(NamedTuple):
    """Result of splitting a URL path into locale and content segments.

    A tuple so callers can unpack it: ``locale, segments = split(path)``.
    """

    locale: Locale
    segments: Tuple[str, ...]


class LanguageOption(ContentModel):
    """A single entry of the language switcher.

    Attributes:
        code: Locale the option switches to.
        label: Short label (e.g., "ENG").
        flag: Flag glyph.
        href: Current page path rebuilt under ``code``.
        is_active: True for the locale the page is currently rendered in.
    """

    code: Locale
    label: str
    flag: str
    href: str
    is_active: bool

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class NavLink(ContentModel):
    """Localized navigation link."""

    label: str
    href: str

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
