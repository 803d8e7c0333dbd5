"""Exception hierarchy for CMS access, lookups and the dashboard gate."""

from typing import Any


class MapleEpochError(Exception):
    """Base exception for all Maple Epoch errors."""


class CmsFetchError(MapleEpochError):
    """Raised when a live request to the CMS fails (network or protocol)."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class CmsTimeoutError(CmsFetchError):
    """Raised when a CMS request exceeds its deadline."""


class CmsHttpError(CmsFetchError):
    """Raised when the CMS answers with a non-success status."""

    def __init__(self, message: str, *, url: str, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class CategoryNotFoundError(MapleEpochError):
    """Raised when a category slug has no match in the CMS taxonomy."""

    def __init__(self, slug: str, available: list[str] | None = None) -> None:
        super().__init__(f"Category not found: {slug}")
        self.slug = slug
        self.available = available or []


class PostNotFoundError(MapleEpochError):
    """Raised when a post lookup by id or slug yields nothing."""

    def __init__(self, identifier: int | str) -> None:
        super().__init__(f"Post not found: {identifier}")
        self.identifier = identifier


class AuthenticationError(MapleEpochError):
    """Raised when an operation needs a session or token that is missing."""


class AuthorizationError(MapleEpochError):
    """Raised when the session lacks a required role."""

    def __init__(self, role: str) -> None:
        super().__init__(f"Role '{role}' required")
        self.role = role


class WordPressApiError(MapleEpochError):
    """Raised when an authenticated WordPress API call fails."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
        self.details = details or {}
