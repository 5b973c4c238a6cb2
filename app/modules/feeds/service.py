"""Blog feed item selection.

Feeds use the same locale resolver as page routing, so a post is listed in
exactly the feed whose pages link to it.
"""

from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from pydantic import ValidationError

from infrastructure.i18n import Locale, LinkBuilder, TranslationResolver, resolve_locale
from infrastructure.i18n.registry import registry
from infrastructure.logging import get_module_logger
from modules.feeds.schemas import BlogPost, ContentIndex, FeedChannel, FeedItem

logger = get_module_logger()

links = LinkBuilder(registry)


def post_locale(post: BlogPost) -> Locale:
    """Resolve the locale a post belongs to from its explicit ``lang`` field."""
    return resolve_locale(post.lang)


def select_posts(posts: Iterable[BlogPost], locale: Locale) -> List[BlogPost]:
    """Return published posts of ``locale``, newest first."""
    selected = [
        post for post in posts if not post.draft and post_locale(post) == locale
    ]
    return sorted(selected, key=lambda post: post.pub_date, reverse=True)


def build_feed_item(post: BlogPost, locale: Locale) -> FeedItem:
    return FeedItem(
        title=post.title,
        description=post.description,
        pub_date=post.pub_date,
        updated_date=post.updated_date,
        link=links.blog_post_path(locale, post.translation_key),
    )


def select_feed_items(
    posts: Iterable[BlogPost],
    locale_token: Optional[str],
    translations: TranslationResolver,
    site_url: str,
) -> FeedChannel:
    """Build the feed channel of a locale.

    Args:
        posts: All known posts, any locale.
        locale_token: Requested locale; unsupported or missing tokens
            resolve to the default locale.
        translations: Source of the channel title and description.
        site_url: Public base URL of the site.

    Returns:
        FeedChannel with the locale's published posts, newest first.
    """
    locale = resolve_locale(locale_token)
    site = translations.translations_for(locale).site
    items = [build_feed_item(post, locale) for post in select_posts(posts, locale)]

    logger.info("feed_items_selected", locale=locale.value, item_count=len(items))

    return FeedChannel(
        locale=locale.value,
        language=registry.metadata_for(locale).formatting_locale,
        title=site.title,
        description=site.description,
        site=site_url,
        link=links.home_path(locale),
        items=items,
    )


def load_content_index(path: Optional[Path]) -> ContentIndex:
    """Load the blog content index from a YAML file.

    Expected format:
    posts:
      - translationKey: hello-world
        lang: en
        title: Hello world
        pubDate: 2024-01-01

    Args:
        path: Index file, or None for an empty index.

    Returns:
        ContentIndex with validated posts.

    Raises:
        FileNotFoundError: If ``path`` is set but does not exist.
        ValueError: If the file is not valid YAML or posts are malformed.
    """
    if path is None:
        return ContentIndex()

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Content index not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error("content_index_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e

    try:
        index = ContentIndex.model_validate(data)
    except ValidationError as e:
        logger.error(
            "content_index_invalid", file=str(path), error_count=e.error_count()
        )
        raise ValueError(f"Invalid content index {path}: {e}") from e

    logger.info("content_index_loaded", file=str(path), post_count=len(index.posts))
    return index
