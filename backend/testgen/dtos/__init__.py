"""Data Transfer Objects (DTOs) for API requests and responses"""

from .auth import AuthStatusResponse, LogoutResponse
from .pull_request import (
    CreatePullRequestRequest,
    CreatePullRequestResponse,
    PullRequestDraftRequest,
    PullRequestDraftResponse,
)
from .repository import FileListResponse, RepositoryListResponse
from .test_case import (
    SummaryRequest,
    SummaryResponse,
    TestCodeRequest,
    TestCodeResponse,
)

__all__ = [
    # Auth
    "AuthStatusResponse",
    "LogoutResponse",
    # Pull requests
    "CreatePullRequestRequest",
    "CreatePullRequestResponse",
    "PullRequestDraftRequest",
    "PullRequestDraftResponse",
    # Repositories
    "FileListResponse",
    "RepositoryListResponse",
    # Test generation
    "SummaryRequest",
    "SummaryResponse",
    "TestCodeRequest",
    "TestCodeResponse",
]
