from __future__ import annotations

import base64
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from testgen.config import settings
from testgen.entities.github import FileContent, FileEntry, PullRequestRef, Repository
from testgen.services.github.exceptions import (
    GithubApiError,
    GithubNoCredentialError,
    GithubNotAFileError,
)


API_PREVIEW_HEADERS = {
    "Accept": "application/vnd.github+json",
}

logger = logging.getLogger(__name__)


def _contents_path(full_name: str, path: str = "") -> str:
    path = path.strip("/")
    if not path:
        return f"/repos/{full_name}/contents"
    return f"/repos/{full_name}/contents/{quote(path, safe='/')}"


class GitHubClient:
    """Async GitHub REST client bound to one user's OAuth token.

    One attempt per call: no retries, no rate-limit handling. Non-success
    responses raise GithubApiError with the upstream status.
    """

    def __init__(
        self,
        token: str | None,
        api_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize GitHubClient.

        Args:
            token: GitHub OAuth token of the current session (may be None)
            api_url: GitHub API URL (defaults to api.github.com)
            transport: Optional httpx transport, used by tests
            timeout: Per-request timeout in seconds
        """
        self._token = token
        self._api_url = (api_url or settings.GITHUB_API_URL).rstrip("/")
        self._rest = httpx.AsyncClient(
            base_url=self._api_url,
            timeout=timeout or settings.GITHUB_REQUEST_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._rest.aclose()

    def _headers(self) -> Dict[str, str]:
        if not self._token:
            raise GithubNoCredentialError("No GitHub token available")
        headers = {
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        headers.update(API_PREVIEW_HEADERS)
        return headers

    def _handle_response(self, response: httpx.Response) -> Any:
        if response.is_success:
            if response.status_code == 204 or not response.content:
                return None
            return response.json()

        message = ""
        try:
            payload = response.json()
            if isinstance(payload, dict):
                message = payload.get("message") or ""
                errors = payload.get("errors") or []
                details = [e.get("message") for e in errors if isinstance(e, dict) and e.get("message")]
                if details:
                    message = f"{message}: {'; '.join(details)}" if message else "; ".join(details)
        except ValueError:
            message = response.text[:200]

        logger.debug(
            "GitHub %s %s -> %s %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            message,
        )
        raise GithubApiError(response.status_code, message)

    async def request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Issue one authenticated request and return the decoded JSON body."""
        headers = self._headers()
        response = await self._rest.request(method, endpoint, headers=headers, **kwargs)
        return self._handle_response(response)

    async def get_authenticated_user(self) -> Dict[str, Any]:
        return await self.request("GET", "/user")

    async def list_repositories(self, limit: int | None = None) -> List[Repository]:
        """Repositories of the authenticated user, most recently updated first."""
        params = {
            "sort": "updated",
            "per_page": limit or settings.REPOSITORY_LIST_LIMIT,
        }
        repos = await self.request("GET", "/user/repos", params=params)
        if not isinstance(repos, list):
            return []
        return [Repository.model_validate(repo) for repo in repos]

    async def get_repository(self, full_name: str) -> Repository:
        data = await self.request("GET", f"/repos/{full_name}")
        return Repository.model_validate(data)

    async def list_directory(self, full_name: str, path: str = "") -> List[FileEntry]:
        data = await self.request("GET", _contents_path(full_name, path))
        if isinstance(data, dict):
            # Path resolved to a single file
            return [FileEntry.model_validate(data)]
        return [FileEntry.model_validate(item) for item in data or []]

    async def get_file(self, full_name: str, path: str, ref: str | None = None) -> FileContent:
        """Fetch one file and decode its base64 payload to text."""
        params = {"ref": ref} if ref else None
        data = await self.request("GET", _contents_path(full_name, path), params=params)
        if not isinstance(data, dict) or data.get("type") != "file":
            raise GithubNotAFileError(path)

        raw = base64.b64decode(data.get("content") or "")
        return FileContent(
            name=data.get("name") or path.rsplit("/", 1)[-1],
            path=data.get("path") or path,
            content=raw.decode("utf-8", errors="replace"),
            size=data.get("size"),
        )

    async def get_file_sha(self, full_name: str, path: str, ref: str) -> Optional[str]:
        """Blob SHA of an existing file on a branch, or None if absent."""
        try:
            data = await self.request(
                "GET", _contents_path(full_name, path), params={"ref": ref}
            )
        except GithubApiError as exc:
            if exc.not_found:
                return None
            raise
        if isinstance(data, dict) and data.get("type") == "file":
            return data.get("sha")
        return None

    async def get_branch_sha(self, full_name: str, branch: str) -> str:
        data = await self.request("GET", f"/repos/{full_name}/git/ref/heads/{branch}")
        return data["object"]["sha"]

    async def create_branch(self, full_name: str, branch: str, sha: str) -> bool:
        """Create refs/heads/<branch> at sha.

        Returns False instead of failing when the branch already exists, so a
        workflow can be re-entered with a previously used branch name.
        """
        try:
            await self.request(
                "POST",
                f"/repos/{full_name}/git/refs",
                json={"ref": f"refs/heads/{branch}", "sha": sha},
            )
        except GithubApiError as exc:
            if exc.already_exists:
                logger.info("Branch %s already exists in %s, reusing it", branch, full_name)
                return False
            raise
        return True

    async def put_file(
        self,
        full_name: str,
        path: str,
        content: str,
        message: str,
        branch: str,
    ) -> Dict[str, Any]:
        """Create or update a file on a branch."""
        body: Dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        sha = await self.get_file_sha(full_name, path, branch)
        if sha:
            body["sha"] = sha
        return await self.request("PUT", _contents_path(full_name, path), json=body)

    async def create_pull_request(
        self,
        full_name: str,
        head: str,
        base: str,
        title: str,
        body: str = "",
    ) -> PullRequestRef:
        data = await self.request(
            "POST",
            f"/repos/{full_name}/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
        return PullRequestRef.from_api(data)

    async def find_open_pull_request(
        self, full_name: str, head_branch: str
    ) -> Optional[PullRequestRef]:
        owner = full_name.split("/", 1)[0]
        pulls = await self.request(
            "GET",
            f"/repos/{full_name}/pulls",
            params={"state": "open", "head": f"{owner}:{head_branch}"},
        )
        if isinstance(pulls, list) and pulls:
            return PullRequestRef.from_api(pulls[0])
        return None
