"""Schemas for blog content items and feed output."""

from datetime import date, datetime, time, timezone
from typing import Any, List, Optional

from pydantic import Field, field_validator

from infrastructure.models import ContentModel


class BlogPost(ContentModel):
    """Metadata of one authored blog post.

    ``lang`` is set explicitly at authoring time; the post's locale is never
    inferred from where its file is stored.
    """

    translation_key: str = Field(..., min_length=1)
    lang: str
    title: str
    description: str = ""
    pub_date: datetime
    updated_date: Optional[datetime] = None
    hero_image: Optional[str] = None
    draft: bool = False

    @field_validator("pub_date", "updated_date", mode="before")
    @classmethod
    def date_to_datetime(cls, v: Any) -> Any:
        """YAML reads bare `2024-01-01` values as dates."""
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min, tzinfo=timezone.utc)
        return v

    @field_validator("pub_date", "updated_date")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps are read as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ContentIndex(ContentModel):
    """All blog posts known to the site, every locale mixed."""

    posts: List[BlogPost] = Field(default_factory=list)


class FeedItem(ContentModel):
    title: str
    description: str
    pub_date: datetime
    updated_date: Optional[datetime] = None
    link: str


class FeedChannel(ContentModel):
    """Feed channel for one locale, ready to be serialized by a feed writer."""

    locale: str
    language: str
    title: str
    description: str
    site: str
    link: str
    items: List[FeedItem] = Field(default_factory=list)
