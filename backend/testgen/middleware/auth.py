"""Session dependencies for FastAPI."""
from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Optional

from fastapi import Depends, Header, Request

from testgen.config import settings
from testgen.services.auth import read_token
from testgen.services.github import GitHubClient, GithubNoCredentialError


@dataclass(frozen=True)
class SessionContext:
    """Per-request view of the caller's credential."""

    token: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return bool(self.token)


async def get_session(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> SessionContext:
    """Build the session context from the request.

    Checks for the session token in:
    1. Cookie (SESSION_COOKIE_NAME)
    2. Authorization header (Bearer token)

    An unsigned, tampered or expired token counts as no credential.
    """
    raw = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not raw and authorization and authorization.startswith("Bearer "):
        raw = authorization.replace("Bearer ", "", 1)

    return SessionContext(token=read_token(raw))


async def require_session(
    session: SessionContext = Depends(get_session),
) -> SessionContext:
    if not session.authenticated:
        raise GithubNoCredentialError("Not authenticated. Please login.")
    return session


async def get_github_client(
    session: SessionContext = Depends(require_session),
) -> AsyncIterator[GitHubClient]:
    """Yield a GitHub client bound to the session and close it afterwards."""
    async with GitHubClient(session.token) as client:
        yield client


async def get_optional_github_client(
    session: SessionContext = Depends(get_session),
) -> AsyncIterator[Optional[GitHubClient]]:
    """Like get_github_client, but yields None for anonymous callers."""
    if not session.authenticated:
        yield None
        return
    async with GitHubClient(session.token) as client:
        yield client
