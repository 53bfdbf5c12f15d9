"""Custom exceptions for GitHub API access."""

from __future__ import annotations


class GithubError(Exception):
    """Base exception for GitHub failures."""


class GithubConfigurationError(GithubError):
    """Raised when required configuration is missing."""


class GithubNoCredentialError(GithubError):
    """Raised when a call needs a GitHub token and the session holds none."""


class GithubOAuthError(GithubError):
    """Raised when the OAuth code exchange does not yield an access token."""


class GithubApiError(GithubError):
    """Raised when GitHub answers with a non-success status."""

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(f"GitHub API error: {status_code} {message}".strip())
        self.status_code = status_code
        self.message = message

    @property
    def already_exists(self) -> bool:
        return self.status_code == 422 and "already exists" in self.message.lower()

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class GithubNotAFileError(GithubError):
    """Raised when a contents path resolves to a directory instead of a file."""

    def __init__(self, path: str):
        super().__init__(f"Path is not a file: {path}")
        self.path = path
