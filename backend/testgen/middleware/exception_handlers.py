"""Global exception handlers.

Every failure leaves the API as the same JSON envelope:

    {"success": false,
     "error": {"code": ..., "message": ..., "request_id": ...[, "details": [...]]},
     "timestamp": ...}

GitHub causes (status, upstream message) are written to the "app.exception"
logger and never echoed to the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from testgen.middleware.error_codes import ErrorCode, get_error_code
from testgen.services.github.exceptions import (
    GithubApiError,
    GithubConfigurationError,
    GithubError,
    GithubNoCredentialError,
    GithubNotAFileError,
)
from testgen.services.pull_request_exceptions import (
    FileWriteError,
    InvalidDraftError,
    PullRequestError,
)

logger = logging.getLogger("app.exception")

UPSTREAM_FAILURE_MESSAGE = "The request to GitHub failed. Please try again later."
INTERNAL_FAILURE_MESSAGE = "An unexpected error occurred. Please try again later."


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def build_error_response(
    request: Request,
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    error: dict[str, Any] = {
        "code": code.value,
        "message": message,
        "request_id": _request_id(request),
    }
    if details:
        error["details"] = details

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "HTTP %s on %s: %s request_id=%s",
            exc.status_code,
            request.url.path,
            exc.detail,
            _request_id(request),
        )
    return build_error_response(
        request, exc.status_code, get_error_code(exc.status_code), str(exc.detail)
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 with one detail entry per rejected field."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        }
        for error in exc.errors()
    ]
    return build_error_response(
        request,
        422,
        ErrorCode.VALIDATION_ERROR,
        "Request body or parameters are invalid",
        details=details,
    )


async def github_exception_handler(request: Request, exc: GithubError) -> JSONResponse:
    """Map GitHub failures to 401, 400 or a generic 500."""
    if isinstance(exc, GithubNoCredentialError):
        return build_error_response(
            request, 401, ErrorCode.UNAUTHORIZED, "Not authenticated. Please login."
        )

    if isinstance(exc, (GithubNotAFileError, GithubConfigurationError)):
        return build_error_response(request, 400, ErrorCode.BAD_REQUEST, str(exc))

    logger.error(
        "GitHub call failed on %s: status=%s %s request_id=%s",
        request.url.path,
        exc.status_code if isinstance(exc, GithubApiError) else None,
        exc,
        _request_id(request),
    )
    return build_error_response(
        request, 500, ErrorCode.UPSTREAM_ERROR, UPSTREAM_FAILURE_MESSAGE
    )


async def pull_request_exception_handler(
    request: Request, exc: PullRequestError
) -> JSONResponse:
    """Invalid drafts answer 400; any other workflow failure answers 500."""
    if isinstance(exc, InvalidDraftError):
        return build_error_response(request, 400, ErrorCode.INVALID_DRAFT, str(exc))

    details = None
    if isinstance(exc, FileWriteError):
        failed = [outcome for outcome in exc.outcomes if not outcome.success]
        for outcome in failed:
            logger.error("Write of %s failed: %s", outcome.path, outcome.error)
        details = [
            {"field": outcome.path, "message": "write failed", "type": "file_write"}
            for outcome in failed
        ]

    logger.error(
        "Pull request workflow failed on %s: %s request_id=%s",
        request.url.path,
        exc,
        _request_id(request),
    )
    return build_error_response(
        request, 500, ErrorCode.UPSTREAM_ERROR, "Failed to create pull request", details=details
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s request_id=%s",
        type(exc).__name__,
        request.url.path,
        _request_id(request),
    )
    return build_error_response(
        request, 500, ErrorCode.INTERNAL_ERROR, INTERNAL_FAILURE_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(GithubError, github_exception_handler)
    app.add_exception_handler(PullRequestError, pull_request_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
