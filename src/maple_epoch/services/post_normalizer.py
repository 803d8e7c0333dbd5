"""Transform raw WordPress posts into the display model."""

import math
import random
from typing import Any

from maple_epoch.models.display_post import DisplayPost
from maple_epoch.models.wordpress import RawPost
from maple_epoch.utils.text_utils import (
    clean_html_content,
    estimate_read_time,
    format_read_time,
    strip_html,
)

UNKNOWN_AUTHOR = "Unknown Author"
DEFAULT_CATEGORY = "General"
PLACEHOLDER_IMAGE = (
    "https://images.pexels.com/photos/3184292/pexels-photo-3184292.jpeg"
    "?auto=compress&cs=tinysrgb&w=400"
)

TRENDING_THRESHOLD = 0.7
BREAKING_THRESHOLD = 0.9

_default_rng = random.Random()


def normalize_post(post: RawPost | dict[str, Any]) -> DisplayPost:
    """
    Map a raw post to a DisplayPost, deterministically.

    Missing embedded data falls back to placeholders, so this never raises on
    a post that validates as a RawPost. Decorative fields (views, trending,
    breaking) are left neutral; see :func:`decorate_post`.
    """
    if not isinstance(post, RawPost):
        post = RawPost.model_validate(post)

    raw_title = post.title.rendered
    content = clean_html_content(post.content.rendered)
    categories = post.term_names(0)

    return DisplayPost(
        id=post.id,
        title=strip_html(raw_title).strip(),
        excerpt=strip_html(post.excerpt.rendered).strip() or raw_title,
        content=content,
        category=categories[0] if categories else DEFAULT_CATEGORY,
        image=post.featured_image_url or PLACEHOLDER_IMAGE,
        author=post.author_name or UNKNOWN_AUTHOR,
        read_time=format_read_time(estimate_read_time(content)),
        publish_date=post.date,
        slug=post.slug,
        tags=post.term_names(1),
        featured=post.sticky,
    )


def random_views(rng: random.Random) -> str:
    """Decorative view count in the 1.0k-6.0k range; not an analytics figure."""
    tenths = math.floor((rng.random() * 5 + 1) * 10)
    return f"{tenths / 10:.1f}k views"


def decorate_post(post: DisplayPost, rng: random.Random | None = None) -> DisplayPost:
    """Fill the cosmetic fields from ``rng``.

    Two calls with an unseeded rng give different values for the same post.
    """
    rng = rng or _default_rng
    return post.with_overrides(
        views=random_views(rng),
        is_trending=rng.random() > TRENDING_THRESHOLD,
        is_breaking=rng.random() > BREAKING_THRESHOLD,
    )


def transform_post(
    post: RawPost | dict[str, Any],
    rng: random.Random | None = None,
) -> DisplayPost:
    """Normalize a raw post and add the decorative fields."""
    return decorate_post(normalize_post(post), rng)
