"""Pydantic data models."""

from maple_epoch.models.admin import MediaItem, PostDraft, PostUpdate
from maple_epoch.models.cache import CacheEntry
from maple_epoch.models.category import Category
from maple_epoch.models.display_post import ArticleMetadata, DisplayPost
from maple_epoch.models.result import FetchResult, FetchStatus
from maple_epoch.models.session import Session, SessionUser
from maple_epoch.models.wordpress import (
    EmbeddedAuthor,
    EmbeddedData,
    EmbeddedMedia,
    EmbeddedTerm,
    RawPost,
    Rendered,
)

__all__ = [
    "ArticleMetadata",
    "CacheEntry",
    "Category",
    "DisplayPost",
    "EmbeddedAuthor",
    "EmbeddedData",
    "EmbeddedMedia",
    "EmbeddedTerm",
    "FetchResult",
    "FetchStatus",
    "MediaItem",
    "PostDraft",
    "PostUpdate",
    "RawPost",
    "Rendered",
    "Session",
    "SessionUser",
]
