"""Article page data: remote post, then fallback, then placeholder."""

import logging
import random

from maple_epoch.exceptions import MapleEpochError
from maple_epoch.models.display_post import ArticleMetadata, DisplayPost
from maple_epoch.services.content_fetcher import ContentFetcher
from maple_epoch.services.fallback import (
    create_placeholder_article,
    get_fallback_post,
    get_fallback_post_by_slug,
)
from maple_epoch.services.post_normalizer import transform_post
from maple_epoch.utils.text_utils import strip_html

logger = logging.getLogger(__name__)


def parse_article_id(value: str | int) -> int | None:
    """Parse a route id, returning None when it is not an integer."""
    try:
        return int(str(value).strip())
    except ValueError:
        return None


class ArticleService:
    """Loads a single article for the article route."""

    def __init__(self, fetcher: ContentFetcher, rng: random.Random | None = None):
        self.fetcher = fetcher
        self.rng = rng

    async def get_article(self, article_id: str | int) -> DisplayPost | None:
        """
        Resolve an article by route id.

        The CMS is tried first; on failure the static fallback with the same id is
        used, and failing that a generated placeholder article. None (not found) is
        only returned for ids that are not integers.
        """
        post_id = parse_article_id(article_id)
        if post_id is None:
            return None

        try:
            post = await self.fetcher.get_post(post_id)
            return transform_post(post, self.rng)
        except (MapleEpochError, ValueError) as exc:
            logger.warning("Falling back for article %s: %s", post_id, exc)

        fallback = get_fallback_post(post_id)
        if fallback is not None:
            return fallback
        return create_placeholder_article(post_id, self.rng)

    async def get_article_by_slug(self, slug: str) -> DisplayPost | None:
        """Resolve an article by slug: CMS, then the fallback set, else None."""
        try:
            post = await self.fetcher.get_post_by_slug(slug)
            return transform_post(post, self.rng)
        except (MapleEpochError, ValueError) as exc:
            logger.warning("Falling back for article slug %s: %s", slug, exc)

        return get_fallback_post_by_slug(slug)

    async def get_article_metadata(self, article_id: str | int) -> ArticleMetadata:
        """Plain-text title and description for the page head."""
        post_id = parse_article_id(article_id)
        title = description = ""

        if post_id is not None:
            try:
                post = await self.fetcher.get_post(post_id)
                title = post.title.rendered
                description = post.excerpt.rendered
            except (MapleEpochError, ValueError) as exc:
                logger.debug("No remote metadata for article %s: %s", post_id, exc)

            fallback = get_fallback_post(post_id)
            if fallback is not None:
                title = title or fallback.title
                description = description or fallback.excerpt

        return ArticleMetadata(
            title=strip_html(title or "Article"),
            description=strip_html(description or "News article"),
        )
