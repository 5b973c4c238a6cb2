"""Blog feed module.

Selects the posts of a locale for its feed and builds their localized links.
XML serialization is left to the feed writer.
"""

from modules.feeds.schemas import BlogPost, ContentIndex, FeedChannel, FeedItem
from modules.feeds.service import (
    build_feed_item,
    load_content_index,
    post_locale,
    select_feed_items,
    select_posts,
)

__all__ = [
    "BlogPost",
    "ContentIndex",
    "FeedChannel",
    "FeedItem",
    "build_feed_item",
    "load_content_index",
    "post_locale",
    "select_feed_items",
    "select_posts",
]
