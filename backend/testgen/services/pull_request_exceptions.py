"""Custom exceptions for the pull request workflow."""
from __future__ import annotations

from typing import List

from testgen.entities.pull_request import FileWriteOutcome


class PullRequestError(Exception):
    """Base exception for workflow failures."""


class InvalidDraftError(PullRequestError):
    """Raised when a draft is missing its repository, branch, title or tests."""


class FileWriteError(PullRequestError):
    """Raised when none of the generated files could be written to the branch."""

    def __init__(self, message: str, outcomes: List[FileWriteOutcome]):
        super().__init__(message)
        self.outcomes = outcomes
