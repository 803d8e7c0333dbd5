"""Explicit outcome of a section listing fetch."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from maple_epoch.models.wordpress import RawPost


class FetchStatus(str, Enum):
    """How a listing fetch ended."""

    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class FetchResult(BaseModel):
    """Posts returned by a listing fetch, plus how the fetch ended."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: FetchStatus
    posts: list[RawPost] = Field(default_factory=list)
    error: Exception | None = None

    @classmethod
    def from_posts(cls, posts: list[RawPost]) -> "FetchResult":
        status = FetchStatus.SUCCESS if posts else FetchStatus.EMPTY
        return cls(status=status, posts=posts)

    @classmethod
    def empty(cls) -> "FetchResult":
        return cls(status=FetchStatus.EMPTY)

    @classmethod
    def failed(cls, error: Exception) -> "FetchResult":
        return cls(status=FetchStatus.ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.SUCCESS
