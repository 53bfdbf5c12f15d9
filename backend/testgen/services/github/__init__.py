from .exceptions import (
    GithubApiError,
    GithubConfigurationError,
    GithubError,
    GithubNoCredentialError,
    GithubNotAFileError,
    GithubOAuthError,
)
from .github_client import GitHubClient
from .github_oauth import (
    build_authorize_url,
    exchange_code_for_token,
)

__all__ = [
    "GitHubClient",
    "GithubApiError",
    "GithubConfigurationError",
    "GithubError",
    "GithubNoCredentialError",
    "GithubNotAFileError",
    "GithubOAuthError",
    "build_authorize_url",
    "exchange_code_for_token",
]
