"""Resolve human-readable category slugs to CMS term ids."""

import logging

from maple_epoch.exceptions import CategoryNotFoundError
from maple_epoch.models.category import Category
from maple_epoch.services.fetch_cache import FetchCache

logger = logging.getLogger(__name__)


class CategoryResolver:
    """Maps category slugs to the numeric ids the posts filter needs."""

    def __init__(self, cache: FetchCache, base_url: str):
        self.cache = cache
        self.base_url = base_url.rstrip("/")

    async def get_categories(self) -> list[Category]:
        """Fetch the full category list (cached like any other request)."""
        data = await self.cache.fetch(f"{self.base_url}/categories?per_page=100")
        return [Category.model_validate(item) for item in data or []]

    async def resolve(self, slug: str) -> int | None:
        """Return the id for ``slug``, or None when no category matches.

        Matching is exact and case-sensitive. Fetch failures propagate.
        """
        categories = await self.get_categories()
        for category in categories:
            if category.slug == slug:
                return category.id

        logger.warning(
            "Category not found: %s. Available categories: %s",
            slug,
            [c.slug for c in categories],
        )
        return None

    async def require(self, slug: str) -> int:
        """Like :meth:`resolve` but raises CategoryNotFoundError on a miss."""
        category_id = await self.resolve(slug)
        if category_id is None:
            categories = await self.get_categories()
            raise CategoryNotFoundError(slug, [c.slug for c in categories])
        return category_id
