"""Path codec for locale-prefixed URLs.

``split`` and ``build`` are inverse operations between a URL path and a
(locale, content segments) pair:

    split("/ko/use-cases/")           -> (Locale.KO, ("use-cases",))
    build(Locale.KO, ["use-cases"])   -> "/ko/use-cases/"

Default-locale paths never carry a prefix. A content segment that equals a
locale prefix (e.g. ``/ko/`` meant as content under the default locale) is
read as a locale marker; prefix-based routing cannot tell the two apart.
"""

from typing import Iterable, Optional, Tuple

from infrastructure.i18n.models import Locale, SplitPath
from infrastructure.i18n.registry import LocaleRegistry, registry as default_registry


def normalize_segments(path: Optional[str]) -> Tuple[str, ...]:
    """Split a path on ``/``, trimming components and dropping empty ones."""
    if not path:
        return ()
    return tuple(
        segment for segment in (part.strip() for part in path.split("/")) if segment
    )


def split(path: Optional[str], registry: LocaleRegistry = default_registry) -> SplitPath:
    """Split a URL path into its locale and content segments.

    If the first component is a known locale prefix it is taken as the locale
    and the rest are content segments; otherwise every component is content
    and the locale is the default.
    """
    segments = normalize_segments(path)
    if segments:
        locale = registry.locale_for_prefix(segments[0])
        if locale is not None:
            return SplitPath(locale, segments[1:])
    return SplitPath(registry.default_locale(), segments)


def build(
    locale: Locale,
    segments: Iterable[str],
    registry: LocaleRegistry = default_registry,
) -> str:
    """Build the canonical path for content segments under a locale.

    The result always starts and ends with ``/``; the root path is ``/``.
    """
    cleaned = [segment for segment in segments if segment]
    if locale != registry.default_locale():
        cleaned.insert(0, registry.metadata_for(locale).path_prefix)
    if not cleaned:
        return "/"
    return "/" + "/".join(cleaned) + "/"
