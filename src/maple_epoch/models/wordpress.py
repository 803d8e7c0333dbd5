"""Models for the WordPress REST API post and category payloads."""

from pydantic import BaseModel, ConfigDict, Field


class Rendered(BaseModel):
    """A rendered-HTML field such as ``title`` or ``content``."""

    model_config = ConfigDict(extra="ignore")

    rendered: str = ""
    protected: bool = False


class EmbeddedAuthor(BaseModel):
    """Author expansion returned with ``_embed``."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    slug: str = ""
    link: str = ""
    description: str = ""
    avatar_urls: dict[str, str] = Field(default_factory=dict)


class EmbeddedMedia(BaseModel):
    """Featured media expansion returned with ``_embed``."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    source_url: str = ""
    alt_text: str = ""
    media_type: str = ""
    mime_type: str = ""


class EmbeddedTerm(BaseModel):
    """Taxonomy term (category or tag) returned with ``_embed``."""

    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    slug: str = ""
    link: str = ""
    taxonomy: str = ""


class EmbeddedData(BaseModel):
    """The ``_embedded`` block of a post."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    author: list[EmbeddedAuthor] = Field(default_factory=list)
    featured_media: list[EmbeddedMedia] = Field(
        default_factory=list, alias="wp:featuredmedia"
    )
    # First group holds categories, second holds tags
    terms: list[list[EmbeddedTerm]] = Field(default_factory=list, alias="wp:term")


class RawPost(BaseModel):
    """A post as returned by ``/wp/v2/posts``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int
    date: str = ""
    date_gmt: str = ""
    modified: str = ""
    modified_gmt: str = ""
    slug: str = ""
    status: str = ""
    type: str = "post"
    link: str = ""
    title: Rendered = Field(default_factory=Rendered)
    content: Rendered = Field(default_factory=Rendered)
    excerpt: Rendered = Field(default_factory=Rendered)
    author: int = 0
    featured_media: int = 0
    sticky: bool = False
    format: str = "standard"
    categories: list[int] = Field(default_factory=list)
    tags: list[int] = Field(default_factory=list)
    embedded: EmbeddedData | None = Field(default=None, alias="_embedded")

    @property
    def author_name(self) -> str | None:
        """Display name of the first embedded author, if any."""
        if self.embedded and self.embedded.author:
            return self.embedded.author[0].name or None
        return None

    @property
    def featured_image_url(self) -> str | None:
        """Source URL of the first embedded featured media, if any."""
        if self.embedded and self.embedded.featured_media:
            return self.embedded.featured_media[0].source_url or None
        return None

    def term_names(self, group: int) -> list[str]:
        """Names of the embedded terms in ``group`` (0 = categories, 1 = tags)."""
        if not self.embedded or len(self.embedded.terms) <= group:
            return []
        return [term.name for term in self.embedded.terms[group]]
