"""Fetch posts from the WordPress REST API through the fetch cache."""

import logging
from urllib.parse import quote, urlencode

from maple_epoch.config import Settings
from maple_epoch.exceptions import MapleEpochError, PostNotFoundError
from maple_epoch.models.category import Category
from maple_epoch.models.result import FetchResult
from maple_epoch.models.wordpress import RawPost
from maple_epoch.services.category_resolver import CategoryResolver
from maple_epoch.services.fetch_cache import FetchCache

logger = logging.getLogger(__name__)


class ContentFetcher:
    """Read-side client for posts and categories."""

    def __init__(self, cache: FetchCache, base_url: str):
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.categories = CategoryResolver(cache, self.base_url)

    async def get_posts(
        self,
        per_page: int | None = None,
        page: int | None = None,
        categories: int | str | None = None,
        search: str | None = None,
        embed: bool = True,
        sticky: bool = False,
    ) -> list[RawPost]:
        """List posts, newest first. Failures propagate."""
        params: list[tuple[str, str]] = []
        if per_page:
            params.append(("per_page", str(per_page)))
        if page:
            params.append(("page", str(page)))
        if categories:
            params.append(("categories", str(categories)))
        if search:
            params.append(("search", search))
        if embed:
            params.append(("_embed", "true"))
        if sticky:
            params.append(("sticky", "true"))

        # Always sort by date (newest first)
        params.append(("orderby", "date"))
        params.append(("order", "desc"))

        url = f"{self.base_url}/posts?{urlencode(params)}"
        data = await self.cache.fetch(url)
        return [RawPost.model_validate(item) for item in data or []]

    async def get_post(self, post_id: int) -> RawPost:
        """Fetch a single post by id. Failures propagate."""
        data = await self.cache.fetch(f"{self.base_url}/posts/{post_id}?_embed=true")
        if not data:
            raise PostNotFoundError(post_id)
        return RawPost.model_validate(data)

    async def get_post_by_slug(self, slug: str) -> RawPost:
        """Fetch a single post by slug. Raises PostNotFoundError if none match."""
        url = f"{self.base_url}/posts?slug={quote(slug, safe='')}&_embed=true"
        data = await self.cache.fetch(url)
        if not data:
            raise PostNotFoundError(slug)
        return RawPost.model_validate(data[0])

    async def get_categories(self) -> list[Category]:
        return await self.categories.get_categories()

    async def fetch_category_posts(self, category_slug: str, limit: int = 10) -> FetchResult:
        """
        List the newest posts in a category, reporting how the fetch ended.

        An unknown slug yields an EMPTY result. Any fetch failure (category list
        or posts) is logged and yields an ERROR result instead of raising.
        """
        try:
            category_id = await self.categories.resolve(category_slug)
            if category_id is None:
                return FetchResult.empty()
            posts = await self.get_posts(categories=category_id, per_page=limit, embed=True)
        except (MapleEpochError, ValueError) as exc:
            logger.error("Error fetching posts for category %s: %s", category_slug, exc)
            return FetchResult.failed(exc)

        return FetchResult.from_posts(posts)

    async def get_posts_by_category(self, category_slug: str, limit: int = 10) -> list[RawPost]:
        """Posts in a category; an empty list means no content is available."""
        result = await self.fetch_category_posts(category_slug, limit)
        return result.posts


def create_content_fetcher(settings: Settings, cache: FetchCache) -> ContentFetcher:
    """Factory function to create a ContentFetcher."""
    return ContentFetcher(cache=cache, base_url=settings.api_base_url)
