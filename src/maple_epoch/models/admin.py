"""Payload models for the authenticated dashboard endpoints."""

from pydantic import BaseModel, Field


class PostDraft(BaseModel):
    """Fields sent when creating a post."""

    title: str
    content: str
    categories: list[int] = Field(default_factory=list)
    status: str = Field(default="draft", description="draft, publish, pending or private")
    featured_media: int | None = None


class PostUpdate(BaseModel):
    """Partial update; unset fields are not sent."""

    title: str | None = None
    content: str | None = None
    categories: list[int] | None = None
    status: str | None = None
    featured_media: int | None = None


class MediaItem(BaseModel):
    """An uploaded media attachment."""

    id: int
    source_url: str = ""
