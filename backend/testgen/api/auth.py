import logging

import httpx
from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import RedirectResponse

from testgen.config import settings
from testgen.dtos import AuthStatusResponse, LogoutResponse
from testgen.middleware.auth import get_optional_github_client
from testgen.services.auth import clear_token, store_token
from testgen.services.github import (
    GitHubClient,
    GithubError,
    GithubOAuthError,
    build_authorize_url,
    exchange_code_for_token,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _frontend_redirect(error: str | None = None) -> RedirectResponse:
    target = f"{settings.FRONTEND_BASE_URL.rstrip('/')}/"
    if error:
        target = f"{target}?error={error}"
    return RedirectResponse(url=target)


@router.get("/start")
async def start_github_login():
    """Redirect to GitHub's OAuth authorize page."""
    return RedirectResponse(url=build_authorize_url())


@router.get("/callback")
async def github_oauth_callback(
    code: str | None = Query(None, description="GitHub authorization code"),
):
    """Exchange the OAuth code for a token, store it and redirect to the frontend."""
    if not code:
        return _frontend_redirect(error="no_code")

    try:
        access_token = await exchange_code_for_token(code)
    except GithubOAuthError:
        return _frontend_redirect(error="token_failed")
    except (GithubError, httpx.HTTPError):
        logger.exception("OAuth callback failed")
        return _frontend_redirect(error="callback_failed")

    response = _frontend_redirect()
    store_token(response, access_token)
    return response


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response):
    """Remove the stored GitHub credential."""
    clear_token(response)
    return {"success": True}


@router.get(
    "/status",
    response_model=AuthStatusResponse,
    response_model_exclude_none=True,
)
async def auth_status(
    client: GitHubClient | None = Depends(get_optional_github_client),
):
    """Report whether the stored credential is still accepted by GitHub."""
    if client is None:
        return {"authenticated": False}

    try:
        user = await client.get_authenticated_user()
    except (GithubError, httpx.HTTPError) as exc:
        logger.info("Stored GitHub token rejected: %s", exc)
        return {"authenticated": False}

    return {"authenticated": True, "user": user}
