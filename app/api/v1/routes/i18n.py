from typing import Optional

from fastapi import APIRouter, Query, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.i18n import registry
from infrastructure.services import I18nServiceDep

router = APIRouter(prefix="/i18n", tags=["i18n"])
limiter = get_limiter()


@router.get("/locales")
def list_locales():
    """List supported locales in language switcher order."""
    default = registry.default_locale()
    return {
        "default": default.value,
        "locales": [
            {
                "code": metadata.code.value,
                "label": metadata.label,
                "flag": metadata.flag,
                "name": metadata.name,
                "formattingLocale": metadata.formatting_locale,
                "htmlLang": metadata.html_lang,
                "pathPrefix": (
                    None if metadata.code == default else metadata.path_prefix
                ),
            }
            for metadata in registry
        ],
    }


# Route resolution for the page renderer. Always succeeds: unknown prefixes
# are content under the default locale.
@router.get("/route")
@limiter.limit("600/minute")
def resolve_route(
    request: Request,  # pylint: disable=unused-argument
    i18n: I18nServiceDep,
    path: str = Query(default="/"),
    translations: bool = Query(default=False),
):
    context = i18n.resolve_route(path)
    return context.to_dict(include_translations=translations)


@router.get("/switch")
def switch_locale(
    i18n: I18nServiceDep,
    path: str = Query(default="/"),
    target: Optional[str] = Query(default=None),
):
    """Rebuild a path under another locale; unsupported targets use the default."""
    return {"href": i18n.switch_locale(path, target)}


@router.get("/translations/{token}")
def get_translations(token: str, i18n: I18nServiceDep):
    locale = i18n.resolve_locale(token)
    return {
        "locale": locale.value,
        "translations": i18n.translations_for(locale).model_dump(by_alias=True),
    }
