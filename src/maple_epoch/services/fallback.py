"""Static articles served when the CMS is unreachable."""

import random
from datetime import datetime, timezone

from maple_epoch.models.display_post import DisplayPost


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _pexels(photo_id: int, width: int | None = 400) -> str:
    url = f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
    if width:
        url += f"?auto=compress&cs=tinysrgb&w={width}"
    return url


_PUBLISHED_AT = _now_iso()

FALLBACK_POSTS: tuple[DisplayPost, ...] = (
    DisplayPost(
        id=1,
        title="Federal Budget 2024: Major Infrastructure Investment Announced",
        excerpt=(
            "Government unveils $50 billion infrastructure plan focusing on green energy, "
            "transportation, and digital connectivity across all provinces."
        ),
        content="<p>Government unveils major infrastructure investment...</p>",
        category="Politics",
        image=_pexels(3184292),
        author="Sarah Mitchell",
        read_time="6 min read",
        views="15.2k views",
        publish_date=_PUBLISHED_AT,
        slug="federal-budget-2024",
        tags=["politics", "budget", "infrastructure"],
        featured=True,
    ),
    DisplayPost(
        id=2,
        title="Canadian Tech Sector Sees Record Growth in Q4 2024",
        excerpt=(
            "Technology companies report unprecedented expansion with AI and clean tech "
            "leading the surge in innovation and investment."
        ),
        content="<p>Technology companies report unprecedented expansion...</p>",
        category="Business",
        image=_pexels(3861972),
        author="Michael Chen",
        read_time="8 min read",
        views="12.8k views",
        publish_date=_PUBLISHED_AT,
        slug="tech-sector-growth",
        tags=["business", "technology", "growth"],
        featured=True,
    ),
    DisplayPost(
        id=3,
        title="Universal Pharmacare Program Launches Nationwide",
        excerpt=(
            "Historic healthcare expansion provides prescription drug coverage for all "
            "Canadians, marking a significant milestone in public health policy."
        ),
        content="<p>Historic healthcare expansion provides prescription drug coverage...</p>",
        category="Health",
        image=_pexels(4386466),
        author="Dr. Amanda Rodriguez",
        read_time="7 min read",
        views="18.5k views",
        publish_date=_PUBLISHED_AT,
        slug="universal-pharmacare",
        tags=["health", "healthcare", "policy"],
        featured=True,
    ),
    DisplayPost(
        id=4,
        title="Canadian Olympic Team Prepares for Paris 2024 with Record Roster",
        excerpt=(
            "Team Canada announces largest ever Olympic delegation with strong medal "
            "prospects across multiple disciplines."
        ),
        content=(
            "<p>Team Canada announces largest ever Olympic delegation with strong medal "
            "prospects across multiple disciplines. The 2024 Paris Olympics will see Canada "
            "represented by over 300 athletes competing in various sports.</p>"
            "<h2>Record Participation</h2><p>This year's team represents the largest Canadian "
            "Olympic delegation in history, with athletes qualifying across traditional "
            "strongholds like swimming and hockey, as well as emerging sports like "
            "skateboarding and sport climbing.</p>"
            "<h2>Medal Prospects</h2><p>Canadian Olympic officials are optimistic about medal "
            "prospects, with several athletes ranked among the world's top competitors in "
            "their respective disciplines.</p>"
        ),
        category="Sports",
        image=_pexels(1884574),
        author="David Park",
        read_time="5 min read",
        views="11.3k views",
        publish_date=_PUBLISHED_AT,
        slug="olympic-team-2024",
        tags=["sports", "olympics", "canada"],
    ),
    DisplayPost(
        id=5,
        title="Canadian Film Industry Celebrates International Recognition",
        excerpt=(
            "Multiple Canadian productions receive major international awards, highlighting "
            "the country's growing influence in global entertainment."
        ),
        content=(
            "<p>Multiple Canadian productions receive major international awards, highlighting "
            "the country's growing influence in global entertainment. From documentaries to "
            "feature films, Canadian creators are making their mark on the world stage.</p>"
            "<h2>Award Winners</h2><p>Several Canadian films and documentaries have received "
            "recognition at major international film festivals, showcasing the diversity and "
            "quality of Canadian storytelling.</p>"
            "<h2>Industry Growth</h2><p>The Canadian film industry has seen significant growth "
            "in recent years, supported by government initiatives and increased international "
            "co-productions.</p>"
        ),
        category="Entertainment",
        image=_pexels(7991579),
        author="Emma Thompson",
        read_time="6 min read",
        views="8.9k views",
        publish_date=_PUBLISHED_AT,
        slug="canadian-film-recognition",
        tags=["entertainment", "film", "awards"],
    ),
    DisplayPost(
        id=6,
        title="Provincial Leaders Meet for Climate Action Summit",
        excerpt=(
            "Premiers from across Canada gather to discuss coordinated response to climate "
            "change and sustainable development goals."
        ),
        content=(
            "<p>Premiers from across Canada gather to discuss coordinated response to climate "
            "change and sustainable development goals. The summit aims to align provincial "
            "policies with federal climate targets.</p>"
            "<h2>Key Discussions</h2><p>The summit focuses on carbon pricing, renewable energy "
            "investments, and adaptation strategies for climate change impacts across "
            "different regions.</p>"
            "<h2>Collaborative Approach</h2><p>Provincial leaders emphasize the importance of "
            "working together to address climate challenges while supporting economic growth "
            "and job creation.</p>"
        ),
        category="Politics",
        image=_pexels(2990644),
        author="Robert Wilson",
        read_time="9 min read",
        views="7.2k views",
        publish_date=_PUBLISHED_AT,
        slug="climate-action-summit",
        tags=["politics", "climate", "environment"],
    ),
)

PLACEHOLDER_CATEGORIES = ["Politics", "Business", "Technology", "Health", "Sports", "Entertainment"]
PLACEHOLDER_AUTHORS = [
    "Sarah Mitchell",
    "Michael Chen",
    "Dr. Amanda Rodriguez",
    "David Park",
    "Emma Thompson",
    "Robert Wilson",
]
PLACEHOLDER_IMAGES = [
    _pexels(photo_id, width=None)
    for photo_id in (3184292, 3861972, 4386466, 1884574, 7991579, 2990644)
]


def get_fallback_post(post_id: int) -> DisplayPost | None:
    """Look up a fallback article by id."""
    for post in FALLBACK_POSTS:
        if post.id == post_id:
            return post
    return None


def get_fallback_post_by_slug(slug: str) -> DisplayPost | None:
    """Look up a fallback article by slug."""
    for post in FALLBACK_POSTS:
        if post.slug == slug:
            return post
    return None


def create_placeholder_article(post_id: int, rng: random.Random | None = None) -> DisplayPost:
    """Build a synthetic article for an id that neither the CMS nor the fallback set has."""
    rng = rng or random.Random()
    category = PLACEHOLDER_CATEGORIES[post_id % len(PLACEHOLDER_CATEGORIES)]
    author = PLACEHOLDER_AUTHORS[post_id % len(PLACEHOLDER_AUTHORS)]
    image = PLACEHOLDER_IMAGES[post_id % len(PLACEHOLDER_IMAGES)]

    return DisplayPost(
        id=post_id,
        title=f"Article {post_id}: Updates in {category}",
        excerpt=f"Brief overview of key developments in {category.lower()}.",
        content=f"<p>This is a fallback article for {category}.</p>",
        category=category,
        image=image,
        author=author,
        read_time=f"{rng.randint(4, 8)} min read",
        views=f"{rng.random() * 10 + 1:.1f}k views",
        publish_date=_now_iso(),
        slug=f"article-{post_id}",
        tags=[category.lower(), "news"],
        featured=rng.random() > 0.7,
        is_trending=rng.random() > 0.8,
        is_breaking=rng.random() > 0.9,
    )
