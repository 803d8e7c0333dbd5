"""Tests for the article route data loader and fallback data set."""

import random

import pytest

from helpers import make_raw_post
from maple_epoch.services.articles import ArticleService, parse_article_id
from maple_epoch.services.fallback import (
    FALLBACK_POSTS,
    create_placeholder_article,
    get_fallback_post,
    get_fallback_post_by_slug,
)


@pytest.fixture
def articles(fetcher):
    return ArticleService(fetcher, rng=random.Random(1))


class TestGetArticle:
    @pytest.mark.asyncio
    async def test_remote_article(self, cms, articles):
        cms.posts[101] = make_raw_post(101, title="Live story", author="Kim")

        article = await articles.get_article("101")

        assert article.id == 101
        assert article.title == "Live story"
        assert article.author == "Kim"

    @pytest.mark.asyncio
    async def test_fallback_article_when_cms_fails(self, cms, articles):
        cms.status_code = 503

        article = await articles.get_article("4")

        assert article == get_fallback_post(4)

    @pytest.mark.asyncio
    async def test_placeholder_for_unknown_id(self, articles):
        article = await articles.get_article("76")

        assert article.id == 76
        assert article.slug == "article-76"
        assert article.category == "Sports"
        assert article.title == "Article 76: Updates in Sports"

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_not_found(self, articles):
        assert await articles.get_article("not-a-number") is None


class TestGetArticleBySlug:
    @pytest.mark.asyncio
    async def test_remote(self, cms, articles):
        cms.posts[8] = make_raw_post(8, slug="wildfire-update")
        article = await articles.get_article_by_slug("wildfire-update")
        assert article.id == 8

    @pytest.mark.asyncio
    async def test_fallback_by_slug(self, articles):
        article = await articles.get_article_by_slug("universal-pharmacare")
        assert article.id == 3

    @pytest.mark.asyncio
    async def test_not_found_after_both_miss(self, articles):
        assert await articles.get_article_by_slug("nowhere") is None


class TestArticleMetadata:
    @pytest.mark.asyncio
    async def test_remote_metadata_is_plain_text(self, cms, articles):
        cms.posts[12] = make_raw_post(12, title="<b>Bold</b> move", excerpt="<p>Summary</p>")

        meta = await articles.get_article_metadata("12")

        assert meta.title == "Bold move"
        assert meta.description == "Summary"

    @pytest.mark.asyncio
    async def test_fallback_metadata(self, cms, articles):
        cms.status_code = 500
        meta = await articles.get_article_metadata("1")
        assert meta.title == FALLBACK_POSTS[0].title

    @pytest.mark.asyncio
    async def test_default_metadata(self, articles):
        meta = await articles.get_article_metadata("999")
        assert meta.title == "Article"
        assert meta.description == "News article"


class TestFallbackData:
    def test_fallback_ids_are_unique(self):
        ids = [post.id for post in FALLBACK_POSTS]
        assert ids == sorted(set(ids))

    def test_lookup(self):
        assert get_fallback_post(2).category == "Business"
        assert get_fallback_post(99) is None
        assert get_fallback_post_by_slug("climate-action-summit").id == 6

    def test_placeholder_rotates_by_id(self):
        first = create_placeholder_article(6, random.Random(0))
        second = create_placeholder_article(12, random.Random(0))

        assert first.category == second.category == "Politics"
        assert first.author == "Sarah Mitchell"
        assert first.tags == ["politics", "news"]
        assert first.read_time in {f"{n} min read" for n in range(4, 9)}


def test_parse_article_id():
    assert parse_article_id("42") == 42
    assert parse_article_id(7) == 7
    assert parse_article_id("4x") is None
