from typing import Optional

from fastapi import APIRouter, Query

from infrastructure.services import ContentIndexDep, I18nServiceDep, SettingsDep
from modules.feeds import select_feed_items

router = APIRouter(prefix="/feeds", tags=["Feeds"])


@router.get("/blog")
def blog_feed(
    i18n: I18nServiceDep,
    content: ContentIndexDep,
    settings: SettingsDep,
    lang: Optional[str] = Query(default=None),
):
    """Feed channel and items for a locale, ready for XML serialization."""
    channel = select_feed_items(
        content.posts,
        lang,
        translations=i18n.translation_resolver,
        site_url=settings.i18n.SITE_URL,
    )
    return channel.model_dump(by_alias=True, mode="json")
