"""Test doubles for the WordPress REST API: payload builders, a fake CMS and clock."""

import re
from typing import Any

import httpx


API_URL = "https://cms.test/wp-json/wp/v2"


def make_raw_post(
    post_id: int = 1,
    *,
    title: str = "Test Title",
    content: str = "<p>Body text.</p>",
    excerpt: str = "<p>Short excerpt.</p>",
    slug: str | None = None,
    author: str | None = None,
    image: str | None = None,
    categories: list[str] | None = None,
    tags: list[str] | None = None,
    sticky: bool = False,
) -> dict[str, Any]:
    """Build a WordPress post payload as returned with ``_embed``."""
    post: dict[str, Any] = {
        "id": post_id,
        "date": "2024-05-01T10:00:00",
        "modified": "2024-05-02T10:00:00",
        "slug": slug or f"post-{post_id}",
        "status": "publish",
        "title": {"rendered": title},
        "content": {"rendered": content, "protected": False},
        "excerpt": {"rendered": excerpt, "protected": False},
        "author": 3,
        "featured_media": 0,
        "sticky": sticky,
        "categories": [],
        "tags": [],
    }

    embedded: dict[str, Any] = {}
    if author is not None:
        embedded["author"] = [{"id": 3, "name": author}]
    if image is not None:
        embedded["wp:featuredmedia"] = [{"id": 9, "source_url": image}]
    if categories is not None or tags is not None:
        embedded["wp:term"] = [
            [{"id": i, "name": name, "taxonomy": "category"} for i, name in enumerate(categories or [])],
            [{"id": i, "name": name, "taxonomy": "post_tag"} for i, name in enumerate(tags or [])],
        ]
    if embedded:
        post["_embedded"] = embedded
    return post


class FakeClock:
    """Manually advanced clock for cache freshness tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCms:
    """In-memory stand-in for the WordPress REST API."""

    def __init__(self):
        self.categories: list[dict[str, Any]] = []
        self.category_posts: dict[int, list[dict[str, Any]]] = {}
        self.sticky_posts: list[dict[str, Any]] = []
        self.recent_posts: list[dict[str, Any]] = []
        self.posts: dict[int, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.status_code: int | None = None

    def add_category(self, category_id: int, slug: str, name: str | None = None) -> None:
        self.categories.append({
            "id": category_id,
            "slug": slug,
            "name": name or slug.replace("-", " ").title(),
            "description": "",
            "count": len(self.category_posts.get(category_id, [])),
        })

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code is not None:
            return httpx.Response(self.status_code, json={"message": "unavailable"})

        path = request.url.path
        params = request.url.params

        if path.endswith("/categories"):
            return httpx.Response(200, json=self.categories)

        if path.endswith("/posts"):
            if "slug" in params:
                matches = [p for p in self.posts.values() if p["slug"] == params["slug"]]
                return httpx.Response(200, json=matches)
            if "categories" in params:
                posts = self.category_posts.get(int(params["categories"]), [])
            elif params.get("sticky") == "true":
                posts = self.sticky_posts
            else:
                posts = self.recent_posts
            per_page = int(params.get("per_page", 10))
            return httpx.Response(200, json=posts[:per_page])

        match = re.search(r"/posts/(\d+)$", path)
        if match and int(match.group(1)) in self.posts:
            return httpx.Response(200, json=self.posts[int(match.group(1))])

        return httpx.Response(404, json={"code": "rest_post_invalid_id", "message": "Invalid post ID."})

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

