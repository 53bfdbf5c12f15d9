"""Session credential storage: the GitHub token lives in a signed, HTTP-only cookie."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Response
from jose import JWTError, jwt

from testgen.config import settings


def create_session_token(github_token: str, expires_delta: Optional[timedelta] = None) -> str:
    """Wrap a GitHub access token in a signed JWT.

    Args:
        github_token: OAuth access token returned by GitHub
        expires_delta: Token lifetime (defaults to SESSION_TOKEN_EXPIRE_DAYS)

    Returns:
        Encoded JWT string suitable for the session cookie
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.SESSION_TOKEN_EXPIRE_DAYS)

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": "github",
        "gh": github_token,
        "exp": now + expires_delta,
        "iat": now,
        "type": "session",
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[str]:
    """Return the GitHub token inside a session JWT, or None if invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if payload.get("type") != "session":
        return None
    return payload.get("gh") or None


def store_token(response: Response, github_token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(github_token),
        httponly=True,
        secure=settings.secure_cookies,  # Use secure cookies in production
        samesite="lax",
        max_age=settings.SESSION_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        path="/",
    )


def read_token(cookie_value: Optional[str]) -> Optional[str]:
    if not cookie_value:
        return None
    return decode_session_token(cookie_value)


def clear_token(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
