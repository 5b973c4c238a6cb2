"""Unit tests for modules.feeds."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from infrastructure.i18n import Locale
from modules.feeds import (
    BlogPost,
    build_feed_item,
    load_content_index,
    post_locale,
    select_feed_items,
    select_posts,
)
from tests.factories.i18n import make_blog_post


@pytest.fixture
def posts():
    return [
        make_blog_post("hello-world", lang="en", pub_date=datetime(2024, 1, 1)),
        make_blog_post("release-notes", lang="en", pub_date=datetime(2024, 3, 1)),
        make_blog_post("hello-world", lang="ko", pub_date=datetime(2024, 1, 2)),
        make_blog_post("draft-post", lang="ko", draft=True),
        make_blog_post("legacy", lang="fr", pub_date=datetime(2023, 6, 1)),
    ]


@pytest.mark.unit
class TestBlogPost:
    """Tests for the BlogPost schema."""

    def test_camel_case_fields(self):
        post = BlogPost.model_validate(
            {
                "translationKey": "hello-world",
                "lang": "ko",
                "title": "안녕",
                "pubDate": "2024-01-01T00:00:00",
                "heroImage": "/images/blog/hello.jpg",
            }
        )
        assert post.translation_key == "hello-world"
        assert post.hero_image == "/images/blog/hello.jpg"

    def test_plain_dates_become_datetimes(self):
        post = make_blog_post(pub_date=date(2024, 1, 1), updated_date=date(2024, 2, 1))
        assert post.pub_date == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert post.updated_date == datetime(2024, 2, 1, tzinfo=timezone.utc)

    def test_naive_timestamps_are_utc(self):
        post = make_blog_post(pub_date=datetime(2024, 1, 1, 9, 30))
        assert post.pub_date == datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)

    def test_aware_timestamps_keep_their_offset(self):
        kst = timezone(timedelta(hours=9))
        post = make_blog_post(pub_date=datetime(2024, 1, 1, 9, 0, tzinfo=kst))
        assert post.pub_date.utcoffset() == timedelta(hours=9)

    def test_empty_translation_key_rejected(self):
        with pytest.raises(ValidationError):
            make_blog_post(translation_key="")


@pytest.mark.unit
class TestSelectPosts:
    """Tests for post locale resolution and selection."""

    @pytest.mark.parametrize(
        "lang,expected", [("en", Locale.EN), ("ko", Locale.KO), ("fr", Locale.EN), ("", Locale.EN)]
    )
    def test_post_locale(self, lang, expected):
        assert post_locale(make_blog_post(lang=lang)) == expected

    def test_select_korean_posts(self, posts):
        selected = select_posts(posts, Locale.KO)
        assert [(p.translation_key, p.lang) for p in selected] == [("hello-world", "ko")]

    def test_select_default_posts_newest_first(self, posts):
        """Posts with unsupported languages land in the default locale's feed."""
        selected = select_posts(posts, Locale.EN)
        assert [p.translation_key for p in selected] == [
            "release-notes",
            "hello-world",
            "legacy",
        ]

    def test_each_published_post_in_exactly_one_feed(self, posts):
        published = [p for p in posts if not p.draft]
        selected = [p for locale in Locale for p in select_posts(posts, locale)]
        assert len(selected) == len(published)


@pytest.mark.unit
class TestSelectFeedItems:
    """Tests for feed channel building."""

    def test_build_feed_item_link(self):
        item = build_feed_item(make_blog_post("hello-world", lang="ko"), Locale.KO)
        assert item.link == "/ko/blog/hello-world/"

    def test_korean_channel(self, posts, translation_resolver):
        channel = select_feed_items(
            posts, "ko", translations=translation_resolver, site_url="https://kuanta.example"
        )

        assert channel.locale == "ko"
        assert channel.language == "ko-KR"
        assert channel.title == "쿠안타"
        assert channel.link == "/ko/"
        assert [item.link for item in channel.items] == ["/ko/blog/hello-world/"]

    def test_unsupported_token_uses_default(self, posts, translation_resolver):
        channel = select_feed_items(
            posts, "xx", translations=translation_resolver, site_url="https://kuanta.example"
        )

        assert channel.locale == "en"
        assert channel.link == "/"
        assert channel.items[0].link == "/blog/release-notes/"

    def test_missing_token_uses_default(self, posts, translation_resolver):
        channel = select_feed_items(
            posts, None, translations=translation_resolver, site_url="https://kuanta.example"
        )
        assert channel.locale == "en"


@pytest.mark.unit
class TestLoadContentIndex:
    """Tests for load_content_index()."""

    def test_none_is_empty(self):
        assert load_content_index(None).posts == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_content_index(tmp_path / "posts.yml")

    def test_load_file(self, tmp_path):
        index_file = tmp_path / "posts.yml"
        index_file.write_text(
            "posts:\n"
            "  - translationKey: hello-world\n"
            "    lang: ko\n"
            "    title: 안녕하세요\n"
            "    pubDate: 2024-01-01\n",
            encoding="utf-8",
        )

        index = load_content_index(index_file)

        assert len(index.posts) == 1
        assert index.posts[0].pub_date == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_mixed_dates_and_timestamps(self, tmp_path, translation_resolver):
        """Bare dates and zoned timestamps in one index sort together."""
        index_file = tmp_path / "posts.yml"
        index_file.write_text(
            "posts:\n"
            "  - translationKey: new-year\n"
            "    lang: en\n"
            "    title: New year\n"
            "    pubDate: 2024-01-01\n"
            "  - translationKey: launch\n"
            "    lang: en\n"
            "    title: Launch\n"
            "    pubDate: 2024-02-01T10:00:00Z\n"
            "  - translationKey: kickoff\n"
            "    lang: en\n"
            "    title: Kickoff\n"
            "    pubDate: 2024-01-15 08:00:00\n",
            encoding="utf-8",
        )

        channel = select_feed_items(
            load_content_index(index_file).posts,
            "en",
            translations=translation_resolver,
            site_url="https://kuanta.example",
        )

        assert [item.link for item in channel.items] == [
            "/blog/launch/",
            "/blog/kickoff/",
            "/blog/new-year/",
        ]

    def test_empty_file(self, tmp_path):
        index_file = tmp_path / "posts.yml"
        index_file.write_text("", encoding="utf-8")
        assert load_content_index(index_file).posts == []

    def test_invalid_yaml(self, tmp_path):
        index_file = tmp_path / "posts.yml"
        index_file.write_text("posts: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="parse"):
            load_content_index(index_file)

    def test_invalid_post(self, tmp_path):
        index_file = tmp_path / "posts.yml"
        index_file.write_text("posts:\n  - title: no key\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid content index"):
            load_content_index(index_file)
