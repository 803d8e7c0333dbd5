"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from helpers import make_raw_post
from maple_epoch.models.cache import CacheEntry
from maple_epoch.models.category import Category
from maple_epoch.models.display_post import DisplayPost
from maple_epoch.models.result import FetchResult, FetchStatus
from maple_epoch.models.wordpress import RawPost


class TestRawPost:
    def test_embedded_aliases(self):
        post = RawPost.model_validate(
            make_raw_post(author="Ann", image="https://cdn.test/i.jpg", categories=["News"], tags=["a", "b"])
        )

        assert post.author_name == "Ann"
        assert post.featured_image_url == "https://cdn.test/i.jpg"
        assert post.term_names(0) == ["News"]
        assert post.term_names(1) == ["a", "b"]
        assert post.term_names(2) == []

    def test_unknown_fields_ignored(self):
        post = RawPost.model_validate({"id": 1, "meta": {"footnotes": ""}, "yoast_head": "<meta>"})
        assert post.id == 1
        assert post.embedded is None

    def test_id_required(self):
        with pytest.raises(ValidationError):
            RawPost.model_validate({"title": {"rendered": "x"}})

    def test_frozen(self):
        post = RawPost.model_validate({"id": 1})
        with pytest.raises(ValidationError):
            post.slug = "changed"


class TestDisplayPost:
    def test_accepts_camel_case(self):
        post = DisplayPost.model_validate({"id": 1, "title": "T", "readTime": "3 min read", "isBreaking": True})
        assert post.read_time == "3 min read"
        assert post.is_breaking is True

    def test_overrides_copy(self):
        post = DisplayPost(id=1, title="T")
        featured = post.with_overrides(featured=True)

        assert featured.featured is True
        assert post.featured is False


class TestCacheEntry:
    def test_freshness_boundary(self):
        entry = CacheEntry(data=[], timestamp=100.0)
        assert entry.is_fresh(399.9, 300)
        assert not entry.is_fresh(400.0, 300)


class TestFetchResult:
    def test_from_posts(self):
        assert FetchResult.from_posts([]).status is FetchStatus.EMPTY
        result = FetchResult.from_posts([RawPost(id=1)])
        assert result.ok

    def test_failed(self):
        error = RuntimeError("boom")
        result = FetchResult.failed(error)
        assert result.status is FetchStatus.ERROR
        assert result.error is error
        assert result.posts == []


def test_category_ignores_extra_fields():
    cat = Category.model_validate({"id": 7, "slug": "business", "name": "Business", "taxonomy": "category", "_links": {}})
    assert cat.id == 7
    assert cat.description == ""
