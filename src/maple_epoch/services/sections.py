"""Home page sections: per-category listings, headlines and editor's picks."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field

from maple_epoch.exceptions import MapleEpochError
from maple_epoch.models.display_post import DisplayPost
from maple_epoch.models.result import FetchResult, FetchStatus
from maple_epoch.models.wordpress import RawPost
from maple_epoch.services.content_fetcher import ContentFetcher
from maple_epoch.services.fallback import FALLBACK_POSTS
from maple_epoch.services.post_normalizer import transform_post

logger = logging.getLogger(__name__)

DEFAULT_FETCH_SIZE = 20
EDITORS_PICKS_SLUGS = ("editors-picks", "editor-picks")
HERO_CATEGORIES = ("Politics", "Business", "Technology", "Health", "Sports", "Entertainment")


@dataclass(frozen=True)
class Section:
    """A home page section backed by one CMS category."""

    slug: str
    default_limit: int = 3


SECTIONS: dict[str, Section] = {
    "daily-maple": Section("daily-maple"),
    "maple-travel": Section("maple-travel"),
    "through-the-lens": Section("through-the-lens"),
    "featured-articles": Section("featured-articles"),
    "maple-voices": Section("maple-voices"),
    "explore-canada": Section("explore-canada"),
    "resources": Section("resources"),
    "events": Section("events"),
    "continent": Section("continent"),
    "canada": Section("canada", default_limit=1),
    "you-may-have-missed": Section("you-may-have-missed"),
    # World news regions
    "africa": Section("africa", default_limit=1),
    "americas": Section("americas", default_limit=1),
    "australia": Section("australia", default_limit=1),
    "asia": Section("asia", default_limit=1),
    "europe": Section("europe", default_limit=1),
    "uk": Section("uk", default_limit=1),
    # BookNook and Lifestyle Wire
    "booknook": Section("booknook"),
    "the-friday-post": Section("the-friday-post"),
    "lifestyle": Section("lifestyle"),
}


@dataclass
class HeroLayout:
    """Articles arranged for the home page hero block."""

    main: DisplayPost
    side: list[DisplayPost] = field(default_factory=list)
    bottom: list[DisplayPost] = field(default_factory=list)


class SectionService:
    """Builds the display listings for each home page section."""

    def __init__(
        self,
        fetcher: ContentFetcher,
        fetch_size: int = DEFAULT_FETCH_SIZE,
        rng: random.Random | None = None,
    ):
        self.fetcher = fetcher
        self.fetch_size = fetch_size
        self.rng = rng

    def _page_size(self, limit: int) -> int:
        # Over-fetch so the page can pick which posts to show
        return max(limit, self.fetch_size)

    def _transform(self, posts: list[RawPost], **overrides) -> list[DisplayPost]:
        display = [transform_post(post, self.rng) for post in posts]
        if overrides:
            display = [post.with_overrides(**overrides) for post in display]
        return display

    async def fetch_section(self, name: str, limit: int | None = None) -> FetchResult:
        """Raw fetch outcome for a named section.

        Raises:
            KeyError: ``name`` is not a known section
        """
        section = SECTIONS[name]
        size = self._page_size(limit or section.default_limit)
        return await self.fetcher.fetch_category_posts(section.slug, size)

    async def get_section(self, name: str, limit: int | None = None) -> list[DisplayPost]:
        """Posts for a named section; empty when the CMS has none or is down."""
        result = await self.fetch_section(name, limit)
        return self._transform(result.posts)

    async def get_latest_headlines(self, limit: int = 3) -> list[DisplayPost]:
        try:
            posts = await self.fetcher.get_posts(per_page=limit, embed=True)
        except (MapleEpochError, ValueError) as exc:
            logger.error("Error fetching latest headlines: %s", exc)
            return []
        return self._transform(posts)

    async def get_editors_picks(self, limit: int = 3) -> list[DisplayPost]:
        """
        Featured posts for the editor's picks block.

        Sources are tried in order: the editors-picks category, the alternate
        editor-picks slug, sticky posts, then the most recent posts. Whatever
        source answers first is returned with every post marked featured.
        """
        size = self._page_size(limit)
        try:
            for slug in EDITORS_PICKS_SLUGS:
                posts = await self.fetcher.get_posts_by_category(slug, size)
                if posts:
                    return self._transform(posts, featured=True)

            posts = await self.fetcher.get_posts(per_page=size, embed=True, sticky=True)
            if posts:
                return self._transform(posts, featured=True)

            posts = await self.fetcher.get_posts(per_page=size, embed=True)
            return self._transform(posts, featured=True)
        except (MapleEpochError, ValueError) as exc:
            logger.error("Error fetching editor's picks: %s", exc)
            return []

    async def get_section_or_fallback(
        self,
        name: str,
        limit: int | None = None,
    ) -> list[DisplayPost]:
        """Section posts, or the static fallback set when the section has none.

        An outage and an empty category both fall back, but are logged apart.
        """
        result = await self.fetch_section(name, limit)
        if result.status is FetchStatus.SUCCESS:
            return self._transform(result.posts)
        if result.status is FetchStatus.ERROR:
            logger.warning("CMS unavailable for section %s (%s), using fallback posts", name, result.error)
        else:
            logger.info("No posts for section %s, using fallback posts", name)
        return list(FALLBACK_POSTS)

    async def load_sections(
        self,
        names: list[str],
        use_fallback: bool = False,
    ) -> dict[str, list[DisplayPost]]:
        """Fetch several sections concurrently; each degrades independently."""
        loader = self.get_section_or_fallback if use_fallback else self.get_section
        results = await asyncio.gather(*(loader(name) for name in names))
        return dict(zip(names, results))


def select_hero_articles(
    articles: list[DisplayPost],
    categories: tuple[str, ...] = HERO_CATEGORIES,
    per_category: int = 2,
    max_articles: int = 9,
) -> HeroLayout | None:
    """
    Pick the hero block articles: up to ``per_category`` from each target
    category, in category order, capped at ``max_articles``.

    Returns None when no article belongs to a target category.
    """
    selected: list[DisplayPost] = []
    for category in categories:
        matches = [a for a in articles if a.category.lower() == category.lower()]
        selected.extend(matches[:per_category])

    if not selected:
        return None

    selected = selected[:max_articles]
    return HeroLayout(main=selected[0], side=selected[1:4], bottom=selected[4:9])


def create_section_service(
    fetcher: ContentFetcher,
    fetch_size: int = DEFAULT_FETCH_SIZE,
) -> SectionService:
    """Factory function to create a SectionService."""
    return SectionService(fetcher=fetcher, fetch_size=fetch_size)
