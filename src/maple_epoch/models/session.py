"""Decoded auth session models for the author dashboard."""

from pydantic import BaseModel, Field


class SessionUser(BaseModel):
    """User claims carried by the auth session."""

    id: str = ""
    name: str = ""
    username: str = ""
    display_name: str = ""
    roles: list[str] = Field(default_factory=lambda: ["subscriber"])
    access_token: str = ""

    def has_role(self, role: str) -> bool:
        return role in self.roles


class Session(BaseModel):
    """An authenticated session as issued by the auth provider."""

    user: SessionUser
