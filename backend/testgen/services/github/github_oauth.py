"""GitHub OAuth helper utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from testgen.config import settings
from testgen.services.github.exceptions import (
    GithubConfigurationError,
    GithubError,
    GithubOAuthError,
)

logger = logging.getLogger(__name__)


def _require_github_credentials() -> None:
    if not settings.GITHUB_CLIENT_ID or not settings.GITHUB_CLIENT_SECRET:
        raise GithubConfigurationError(
            "GitHub OAuth credentials are not configured. Set GITHUB_CLIENT_ID/SECRET."
        )


def build_authorize_url() -> str:
    _require_github_credentials()
    query = urlencode(
        {
            "client_id": settings.GITHUB_CLIENT_ID,
            "redirect_uri": settings.GITHUB_REDIRECT_URI,
            "scope": " ".join(settings.GITHUB_SCOPES),
        }
    )
    return f"{settings.GITHUB_AUTHORIZE_URL}?{query}"


async def exchange_code_for_token(
    code: str, transport: httpx.AsyncBaseTransport | None = None
) -> str:
    """Exchange an OAuth authorization code for a GitHub access token."""
    _require_github_credentials()

    async with httpx.AsyncClient(timeout=10, transport=transport) as client:
        token_response = await client.post(
            settings.GITHUB_TOKEN_URL,
            headers={"Accept": "application/json"},
            data={
                "client_id": settings.GITHUB_CLIENT_ID,
                "client_secret": settings.GITHUB_CLIENT_SECRET,
                "code": code,
                "redirect_uri": settings.GITHUB_REDIRECT_URI,
            },
        )
    token_response.raise_for_status()
    try:
        token_data = token_response.json()
    except ValueError as exc:
        logger.error("GitHub OAuth token endpoint returned a non-JSON body")
        raise GithubError("GitHub token endpoint returned an unreadable response") from exc
    if not isinstance(token_data, dict):
        raise GithubError("GitHub token endpoint returned an unexpected payload")

    access_token = token_data.get("access_token")
    if not access_token:
        error_details = (
            token_data.get("error_description") or token_data.get("error") or "unknown error"
        )
        logger.error("GitHub OAuth error: %s", error_details)
        raise GithubOAuthError(f"GitHub did not return an access token: {error_details}")

    return access_token
