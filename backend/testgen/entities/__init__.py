from .github import FileContent, FileEntry, PullRequestRef, Repository
from .pull_request import FileWriteOutcome, PullRequestResult
from .test_case import GeneratedTest, Priority, TestKind, TestSummary

__all__ = [
    # GitHub
    "FileContent",
    "FileEntry",
    "PullRequestRef",
    "Repository",
    # Pull requests
    "FileWriteOutcome",
    "PullRequestResult",
    # Test cases
    "GeneratedTest",
    "Priority",
    "TestKind",
    "TestSummary",
]
