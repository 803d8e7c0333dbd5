"""Display model consumed by page rendering."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DisplayPost(BaseModel):
    """Flat, UI-ready representation of an article.

    Serialized with camelCase keys (``readTime``, ``publishDate``, ``isTrending``)
    to match what the page templates expect.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    excerpt: str = ""
    content: str = ""
    category: str = "General"
    image: str = ""
    author: str = "Unknown Author"
    read_time: str = "1 min read"
    views: str = ""
    publish_date: str = ""
    slug: str = ""
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    is_trending: bool = False
    is_breaking: bool = False

    def with_overrides(self, **fields) -> "DisplayPost":
        """Return a shallow copy with the given fields replaced."""
        return self.model_copy(update=fields)


class ArticleMetadata(BaseModel):
    """Title and description for an article page's head."""

    title: str = "Article"
    description: str = "News article"
