"""Shared fixtures: a scripted GitHub API behind httpx.MockTransport."""

import base64
import json
from typing import Callable, Dict, List, Tuple

import httpx
import pytest

from testgen.entities.test_case import GeneratedTest, TestSummary
from testgen.services.github import GitHubClient

Route = Tuple[str, str]


class FakeGitHub:
    """Answers GitHub REST calls from a (method, path) -> handler table."""

    def __init__(self) -> None:
        self.routes: Dict[Route, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, payload=None, handler=None):
        if handler is None:

            def handler(request: httpx.Request, _status=status, _payload=payload):
                return httpx.Response(_status, json=_payload)

        self.routes[(method.upper(), path)] = handler
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [
            r for r in self.requests if r.method == method.upper() and r.url.path == path
        ]

    def client(self, token: str | None = "gho_test") -> GitHubClient:
        return GitHubClient(
            token,
            api_url="https://api.github.test",
            transport=httpx.MockTransport(self),
        )


def encode_content(text: str) -> str:
    # GitHub wraps base64 payloads at 60 columns
    raw = base64.b64encode(text.encode()).decode()
    return "\n".join(raw[i : i + 60] for i in range(0, len(raw), 60))


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content.decode())


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def make_summary():
    def _make(path: str = "src/utils.ts", tag: str = "functions", framework: str = "Jest"):
        return TestSummary(
            id=f"{path}-{tag}",
            title=f"{path.rsplit('/', 1)[-1]} - {tag}",
            description="generated",
            framework=framework,
            type="Unit Test",
            file=path,
            priority="High",
        )

    return _make


@pytest.fixture
def make_generated(make_summary):
    def _make(path: str = "src/utils.ts", tag: str = "functions", code: str = "// test"):
        summary = make_summary(path, tag)
        name = path.rsplit("/", 1)[-1].rsplit(".", 1)[0]
        return GeneratedTest(summary=summary, code=code, file_name=f"{name}.test.js")

    return _make
