"""Locale resolution for untrusted input.

Every place that derives a locale from a URL, a query parameter, a header or
a content item goes through ``LocaleResolver``. Resolution never fails:
missing or unsupported tokens fall back to the default locale. Callers that
need to tell "unsupported locale requested" apart from "no locale given"
must check ``registry.is_supported`` before resolving.
"""

from typing import Any, Optional

import structlog
from infrastructure.i18n import paths
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import LocaleRegistry, registry as default_registry

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Resolves a supported locale from request and content sources.

    Sources:
    1. Explicit locale token (query parameter, content field, path token)
    2. URL path prefix
    3. Accept-Language header
    All of them fall back to the registry's default locale.
    """

    def __init__(self, registry: LocaleRegistry = default_registry):
        """Initialize locale resolver.

        Args:
            registry: Locale registry providing supported codes and the default.
        """
        self.registry = registry
        self.default_locale = registry.default_locale()
        self.log = logger.bind(default_locale=self.default_locale.value)

    def resolve(self, token: Optional[Any]) -> Locale:
        """Map a possibly-invalid locale token to a supported locale.

        Args:
            token: Locale token from untrusted input, or None.

        Returns:
            The matching Locale, or the default locale.
        """
        if token is not None and self.registry.is_supported(token):
            return Locale(token)

        if token is not None:
            self.log.debug("locale_token_fell_back", token=str(token))
        return self.default_locale

    def resolve_from_path(self, path: Optional[str]) -> Locale:
        """Resolve locale from the prefix of a URL path."""
        return paths.split(path, self.registry).locale

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from HTTP Accept-Language header.

        Parses header and returns the first supported locale in preference
        order. A range matches a locale by its code ("ko") or its formatting
        tag ("ko-KR"), case-insensitively; "ko-KP" still matches "ko" by
        language. Ranges weighted q=0 are skipped.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale, or default if none match.
        """
        if not accept_language:
            return self.default_locale

        # Parse "ko-KR,ko;q=0.9,en;q=0.8" -> [(ko-KR, 1.0), (ko, 0.9), (en, 0.8)]
        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            # q=0 marks a range as not acceptable
            if quality <= 0:
                continue

            preferences.append((lang_range, quality))

        # sorted() is stable, so equal weights keep header order
        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True):
            lang_range = lang_range.lower()
            language = lang_range.split("-")[0]
            for metadata in self.registry:
                if lang_range in (
                    metadata.code.value,
                    metadata.formatting_locale.lower(),
                ) or language == metadata.code.value:
                    self.log.debug(
                        "resolved_from_header", locale=metadata.code.value
                    )
                    return metadata.code

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale


default_resolver = LocaleResolver()


def resolve_locale(token: Optional[Any]) -> Locale:
    """Resolve a locale token with the process-wide resolver.

    This is the shared resolution path for page routing, the API and feeds.
    """
    return default_resolver.resolve(token)
