"""Branch, write generated tests, open a pull request."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

import httpx

from testgen.config import settings
from testgen.entities.github import FileEntry
from testgen.entities.pull_request import FileWriteOutcome, PullRequestResult
from testgen.entities.test_case import GeneratedTest
from testgen.services.github.exceptions import GithubError
from testgen.services.github.github_client import GitHubClient
from testgen.services.pull_request_exceptions import FileWriteError, InvalidDraftError

logger = logging.getLogger(__name__)


class PullRequestService:
    """Realizes "create a branch, write N files into it, open a pull request".

    Best effort and not atomic: a failure after the branch or some files
    were written leaves them in place. Branch creation tolerates an existing
    branch, file writes update files already present on the branch, and an
    open pull request for the branch is returned instead of opening another.
    """

    def __init__(
        self,
        client: GitHubClient,
        tests_directory: str | None = None,
        max_concurrency: int | None = None,
    ):
        self._client = client
        self._tests_directory = (tests_directory or settings.TESTS_DIRECTORY).strip("/")
        self._max_concurrency = max(1, max_concurrency or settings.FILE_WRITE_CONCURRENCY)

    def test_path(self, file_name: str) -> str:
        if not self._tests_directory:
            return file_name
        return f"{self._tests_directory}/{file_name}"

    async def create_test_pull_request(
        self,
        repository: str,
        branch_name: str,
        title: str,
        description: str,
        tests: Sequence[GeneratedTest],
    ) -> PullRequestResult:
        repository = (repository or "").strip()
        branch_name = (branch_name or "").strip()
        title = (title or "").strip()
        _validate_draft(repository, branch_name, title, tests)

        repo = await self._client.get_repository(repository)
        base = repo.default_branch or "main"
        base_sha = await self._client.get_branch_sha(repository, base)

        branch_created = await self._client.create_branch(repository, branch_name, base_sha)
        logger.info(
            "Branch %s %s in %s at %s",
            branch_name,
            "created" if branch_created else "reused",
            repository,
            base_sha[:7],
        )

        outcomes = await self._write_files(repository, branch_name, tests)
        written = sum(1 for outcome in outcomes if outcome.success)
        if written == 0:
            raise FileWriteError(
                f"None of the {len(outcomes)} test files could be written to {branch_name}",
                outcomes,
            )
        if written < len(outcomes):
            logger.warning(
                "Wrote %d of %d test files to %s/%s",
                written,
                len(outcomes),
                repository,
                branch_name,
            )

        reused = True
        pull = await self._client.find_open_pull_request(repository, branch_name)
        if pull is None:
            reused = False
            pull = await self._client.create_pull_request(
                repository,
                head=branch_name,
                base=base,
                title=title,
                body=description or "",
            )
        logger.info(
            "Pull request #%s %s for %s:%s",
            pull.number,
            "reused" if reused else "opened",
            repository,
            branch_name,
        )

        return PullRequestResult(
            number=pull.number,
            title=pull.title or title,
            html_url=pull.html_url,
            branch=branch_name,
            base=base,
            branch_created=branch_created,
            reused=reused,
            files=outcomes,
        )

    async def _write_files(
        self, repository: str, branch: str, tests: Sequence[GeneratedTest]
    ) -> List[FileWriteOutcome]:
        """Write every test under a concurrency bound, one outcome per file.

        Tests sharing an output path are written one after another in list
        order, so the last one wins; distinct paths are written concurrently.
        Outcomes are returned in the order of ``tests``.
        """
        semaphore = asyncio.Semaphore(self._max_concurrency)
        by_path: Dict[str, List[int]] = {}
        for index, test in enumerate(tests):
            by_path.setdefault(self.test_path(test.file_name), []).append(index)

        outcomes: List[Optional[FileWriteOutcome]] = [None] * len(tests)

        async def _write(path: str, test: GeneratedTest) -> FileWriteOutcome:
            async with semaphore:
                try:
                    await self._client.put_file(
                        repository,
                        path,
                        content=test.code,
                        message=f"Add {test.summary.title}",
                        branch=branch,
                    )
                except (GithubError, httpx.HTTPError) as exc:
                    logger.warning("Failed to write %s to %s: %s", path, branch, exc)
                    return FileWriteOutcome(
                        path=path, file_name=test.file_name, success=False, error=str(exc)
                    )
            return FileWriteOutcome(path=path, file_name=test.file_name, success=True)

        async def _write_path(path: str, indexes: List[int]) -> None:
            for index in indexes:
                outcomes[index] = await _write(path, tests[index])

        await asyncio.gather(*(_write_path(path, indexes) for path, indexes in by_path.items()))
        return [outcome for outcome in outcomes if outcome is not None]


def _validate_draft(
    repository: str, branch_name: str, title: str, tests: Sequence[GeneratedTest]
) -> None:
    missing = [
        field
        for field, value in (
            ("repository", repository),
            ("branchName", branch_name),
            ("title", title),
            ("tests", tests),
        )
        if not value
    ]
    if missing:
        raise InvalidDraftError(f"Missing required fields: {', '.join(missing)}")


def build_draft_defaults(
    files: Iterable[FileEntry],
    tests: Sequence[GeneratedTest],
    now: Optional[datetime] = None,
) -> dict:
    """Default branch name, title and description for a pull request draft."""
    now = now or datetime.now()
    paths = [file.path for file in files]
    # Git ref names may not contain ':'
    branch_name = f"add-tests-{now.strftime('%Y-%m-%d-%H%M')}"
    title = f"Add test cases for {len(paths)} files"

    lines = ["This PR adds comprehensive test cases for the following files:", ""]
    lines.extend(f"- {path}" for path in paths)
    lines.extend(["", "Generated test cases include:"])
    lines.extend(f"- {test.summary.title} ({test.summary.framework})" for test in tests)
    lines.extend(["", f"Total test files: {len(tests)}"])

    return {
        "branch_name": branch_name,
        "title": title,
        "description": "\n".join(lines),
    }
