"""Tests for raw post normalization."""

import random
import re

import pytest

from helpers import make_raw_post
from maple_epoch.models.wordpress import RawPost
from maple_epoch.services.post_normalizer import (
    DEFAULT_CATEGORY,
    PLACEHOLDER_IMAGE,
    UNKNOWN_AUTHOR,
    decorate_post,
    normalize_post,
    random_views,
    transform_post,
)


class TestPlaceholders:
    def test_post_without_embedded_data(self):
        post = normalize_post(make_raw_post())

        assert post.author == UNKNOWN_AUTHOR
        assert post.image == PLACEHOLDER_IMAGE
        assert post.category == DEFAULT_CATEGORY
        assert post.tags == []

    def test_minimal_payload_does_not_raise(self):
        post = transform_post({"id": 42})

        assert post.id == 42
        assert post.author == UNKNOWN_AUTHOR
        assert post.read_time == "1 min read"

    def test_empty_embedded_groups(self):
        raw = make_raw_post()
        raw["_embedded"] = {"author": [], "wp:featuredmedia": [{"code": "rest_forbidden"}], "wp:term": []}

        post = normalize_post(raw)

        assert post.author == UNKNOWN_AUTHOR
        assert post.image == PLACEHOLDER_IMAGE
        assert post.category == DEFAULT_CATEGORY

    def test_empty_category_group_with_tags(self):
        raw = make_raw_post(categories=[], tags=["ottawa"])
        post = normalize_post(raw)

        assert post.category == DEFAULT_CATEGORY
        assert post.tags == ["ottawa"]


class TestEmbeddedFields:
    def test_uses_first_embedded_values(self):
        raw = make_raw_post(
            author="Jane Doe",
            image="https://cdn.test/a.jpg",
            categories=["Business", "Canada"],
            tags=["markets", "rates"],
        )

        post = normalize_post(raw)

        assert post.author == "Jane Doe"
        assert post.image == "https://cdn.test/a.jpg"
        assert post.category == "Business"
        assert post.tags == ["markets", "rates"]

    def test_passthrough_fields(self):
        raw = make_raw_post(7, slug="bank-of-canada", sticky=True)
        post = normalize_post(RawPost.model_validate(raw))

        assert post.id == 7
        assert post.slug == "bank-of-canada"
        assert post.publish_date == "2024-05-01T10:00:00"
        assert post.featured is True


class TestExcerpt:
    def test_tags_stripped_and_trimmed(self):
        post = normalize_post(make_raw_post(excerpt="  <p>Rates <em>held</em> steady.</p>\n"))
        assert post.excerpt == "Rates held steady."

    def test_falls_back_to_title(self):
        post = normalize_post(make_raw_post(title="Rate Decision", excerpt="<p> </p>"))
        assert post.excerpt == "Rate Decision"

    def test_attribute_text_does_not_leak(self):
        excerpt = '<p><a title="x>y" href="#">Budget</a> vote &amp; more</p>'
        post = normalize_post(make_raw_post(excerpt=excerpt))
        assert post.excerpt == "Budget vote & more"


class TestContent:
    def test_line_endings_and_blank_runs(self):
        raw = make_raw_post(content="\r\n<p>One</p>\r\n\r\n\r\n\r\n<p>Two</p>\n\n\n<p>Three</p>\n")

        content = normalize_post(raw).content

        assert "\r" not in content
        assert "\n\n\n" not in content
        assert content == "<p>One</p>\n\n<p>Two</p>\n\n<p>Three</p>"

    def test_whitespace_only_lines_count_as_blank(self):
        content = normalize_post(make_raw_post(content="<p>A</p>\n  \n\t\n<p>B</p>")).content
        assert content == "<p>A</p>\n\n<p>B</p>"

    def test_markup_is_preserved(self):
        html = '<figure class="wp-block-image"><img src="x.jpg" alt=""/></figure>\n<p>Text</p>'
        assert normalize_post(make_raw_post(content=html)).content == html


class TestReadTime:
    @pytest.mark.parametrize(
        ("words", "expected"),
        [(0, "1 min read"), (150, "1 min read"), (200, "1 min read"), (201, "2 min read"), (1000, "5 min read")],
    )
    def test_read_time(self, words, expected):
        content = "<p>" + " ".join(["word"] * words) + "</p>"
        assert normalize_post(make_raw_post(content=content)).read_time == expected

    def test_format(self):
        read_time = normalize_post(make_raw_post()).read_time
        assert re.fullmatch(r"[1-9]\d* min read", read_time)


class TestDecoration:
    def test_normalize_is_deterministic(self):
        raw = make_raw_post(author="A", categories=["Sports"])
        assert normalize_post(raw) == normalize_post(raw)

    def test_normalize_leaves_decorative_fields_neutral(self):
        post = normalize_post(make_raw_post())
        assert post.views == ""
        assert post.is_trending is False
        assert post.is_breaking is False

    def test_seeded_rng_is_reproducible(self):
        raw = make_raw_post()
        first = transform_post(raw, random.Random(5))
        second = transform_post(raw, random.Random(5))
        assert first == second

    def test_views_range(self):
        rng = random.Random(1)
        for _ in range(500):
            views = random_views(rng)
            match = re.fullmatch(r"(\d\.\d)k views", views)
            assert match
            assert 1.0 <= float(match.group(1)) < 6.0

    def test_flag_thresholds(self):
        class FixedRandom:
            def __init__(self, values):
                self.values = iter(values)

            def random(self):
                return next(self.values)

        post = normalize_post(make_raw_post())
        # views, trending, breaking
        decorated = decorate_post(post, FixedRandom([0.0, 0.71, 0.95]))
        assert decorated.views == "1.0k views"
        assert decorated.is_trending is True
        assert decorated.is_breaking is True

        decorated = decorate_post(post, FixedRandom([0.0, 0.7, 0.9]))
        assert decorated.is_trending is False
        assert decorated.is_breaking is False

    def test_decorate_keeps_core_fields(self):
        post = normalize_post(make_raw_post(author="A"))
        decorated = decorate_post(post, random.Random(3))
        assert decorated.model_dump(exclude={"views", "is_trending", "is_breaking"}) == post.model_dump(
            exclude={"views", "is_trending", "is_breaking"}
        )


def test_display_post_serializes_camel_case():
    data = normalize_post(make_raw_post()).model_dump(by_alias=True)
    assert {"readTime", "publishDate", "isTrending", "isBreaking"} <= set(data)
