"""Session handling and the role gate in front of the author dashboard."""

from collections.abc import Mapping
from typing import Any

from maple_epoch.exceptions import AuthenticationError, AuthorizationError
from maple_epoch.models.session import Session, SessionUser

AUTHOR_ROLE = "author"
DEFAULT_ROLES = ["subscriber"]
PROTECTED_PREFIX = "/dashboard"
UNAUTHORIZED_PATH = "/unauthorized"


def session_from_claims(claims: Mapping[str, Any] | None) -> Session | None:
    """Build a session from decoded token claims, applying claim defaults."""
    if not claims:
        return None

    name = claims.get("name") or ""
    user = SessionUser(
        id=str(claims.get("id") or claims.get("sub") or ""),
        name=name,
        username=claims.get("username") or "",
        display_name=claims.get("displayName") or claims.get("display_name") or name,
        roles=list(claims.get("roles") or DEFAULT_ROLES),
        access_token=claims.get("accessToken") or claims.get("token") or "",
    )
    return Session(user=user)


def require_auth(session: Session | None) -> Session:
    if session is None:
        raise AuthenticationError("Authentication required")
    return session


def require_role(session: Session | None, role: str) -> Session:
    session = require_auth(session)
    if not session.user.has_role(role):
        raise AuthorizationError(role)
    return session


def is_protected(path: str) -> bool:
    return path == PROTECTED_PREFIX or path.startswith(PROTECTED_PREFIX + "/")


def is_route_authorized(path: str, session: Session | None) -> bool:
    """Dashboard routes need the author role; everything else is public."""
    if not is_protected(path):
        return True
    return session is not None and session.user.has_role(AUTHOR_ROLE)


def redirect_for(path: str, session: Session | None) -> str | None:
    """Where to send the request instead, or None to let it through."""
    if is_route_authorized(path, session):
        return None
    return UNAUTHORIZED_PATH
