"""Authenticated WordPress client for the author dashboard."""

import logging
import mimetypes
from pathlib import Path
from typing import Any

import httpx

from maple_epoch.clients.base import BaseAsyncClient
from maple_epoch.config import Settings
from maple_epoch.exceptions import AuthenticationError, WordPressApiError
from maple_epoch.models.admin import MediaItem, PostDraft, PostUpdate
from maple_epoch.models.category import Category
from maple_epoch.models.session import Session
from maple_epoch.models.wordpress import RawPost

logger = logging.getLogger(__name__)


class WordPressAdminClient(BaseAsyncClient):
    """Client for the bearer-token protected post and media endpoints."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(base_url=base_url, timeout=timeout, transport=transport)
        self._token = token

    def _get_headers(self) -> dict[str, str]:
        """Get headers with Bearer auth."""
        if not self._token:
            raise AuthenticationError("No authentication token available")
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }

    def _handle_http_error(self, operation: str, exc: httpx.HTTPStatusError) -> None:
        response = exc.response
        details: dict[str, Any] = {
            "http_status": response.status_code,
            "http_reason": response.reason_phrase,
        }
        message = ""
        try:
            data = response.json()
            details["response"] = data
            if isinstance(data, dict):
                message = data.get("message") or ""
        except ValueError:
            details["response_text"] = response.text[:1000] if response.text else ""

        logger.error("WordPress API error during %s: %s", operation, details)
        raise WordPressApiError(
            message or f"Failed to {operation.replace('_', ' ')}",
            operation=operation,
            status_code=response.status_code,
            details=details,
        ) from exc

    async def _call(self, operation: str, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        try:
            if method == "GET":
                return await self.get(endpoint, **kwargs)
            return await self._request(method, endpoint, **kwargs)
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(operation, exc)
            raise

    async def fetch_user_posts(self, author_id: int | str | None = None) -> list[RawPost]:
        """List posts, optionally restricted to one author."""
        params: dict[str, Any] = {"_embed": "true"}
        if author_id:
            params["author"] = author_id
        response = await self._call("fetch_posts", "GET", "/posts", params=params)
        return [RawPost.model_validate(item) for item in response.json()]

    async def fetch_post(self, post_id: int) -> RawPost:
        response = await self._call("fetch_post", "GET", f"/posts/{post_id}")
        return RawPost.model_validate(response.json())

    async def create_post(self, draft: PostDraft) -> RawPost:
        """Create a post (a draft unless ``draft.status`` says otherwise)."""
        response = await self._call(
            "create_post", "POST", "/posts", json=draft.model_dump(exclude_none=True)
        )
        return RawPost.model_validate(response.json())

    async def update_post(self, post_id: int, update: PostUpdate) -> RawPost:
        response = await self._call(
            "update_post", "PUT", f"/posts/{post_id}", json=update.model_dump(exclude_none=True)
        )
        return RawPost.model_validate(response.json())

    async def delete_post(self, post_id: int) -> None:
        await self._call("delete_post", "DELETE", f"/posts/{post_id}")

    async def upload_media(self, file_path: Path) -> MediaItem:
        """Upload a file to the media library."""
        mime_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
        response = await self._call(
            "upload_media",
            "POST",
            "/media",
            content=file_path.read_bytes(),
            headers={
                "Content-Type": mime_type,
                "Content-Disposition": f'attachment; filename="{file_path.name}"',
            },
        )
        return MediaItem.model_validate(response.json())

    async def fetch_media(self, media_id: int) -> MediaItem:
        response = await self._call("fetch_media", "GET", f"/media/{media_id}")
        return MediaItem.model_validate(response.json())

    async def fetch_categories(self) -> list[Category]:
        response = await self._call(
            "fetch_categories", "GET", "/categories", params={"per_page": 100}
        )
        return [Category.model_validate(item) for item in response.json()]


def create_admin_client(settings: Settings, session: Session | None = None) -> WordPressAdminClient:
    """Factory function; the session's access token wins over the configured one."""
    token = session.user.access_token if session else ""
    return WordPressAdminClient(
        base_url=settings.api_base_url,
        token=token or settings.wordpress_api_token,
    )
