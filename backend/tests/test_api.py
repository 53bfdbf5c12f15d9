"""HTTP surface tests through FastAPI's TestClient."""

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import encode_content, json_body
from testgen.api import auth as auth_api
from testgen.config import settings
from testgen.main import app
from testgen.middleware.auth import get_github_client, get_optional_github_client
from testgen.services.auth import create_session_token
from testgen.services.github import GithubOAuthError, exchange_code_for_token

REPO = "octo/widgets"


@pytest.fixture
def api():
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def authed(api, fake_github):
    """A signed-in TestClient whose GitHub calls go to fake_github."""

    async def _client():
        async with fake_github.client() as client:
            yield client

    app.dependency_overrides[get_github_client] = _client
    app.dependency_overrides[get_optional_github_client] = _client
    api.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token("gho_test"))
    return api


def file_payload(path: str, text: str) -> dict:
    return {
        "name": path.rsplit("/", 1)[-1],
        "path": path,
        "type": "file",
        "size": len(text),
        "content": encode_content(text),
    }


class TestHealth:
    def test_health(self, api):
        assert api.get("/api/health").json() == {"status": "ok"}

    def test_request_id_header(self, api):
        response = api.get("/api/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"


class TestAuth:
    def test_status_without_cookie(self, api, fake_github):
        response = api.get("/api/auth/status")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}
        assert fake_github.requests == []

    def test_status_with_accepted_token(self, authed, fake_github):
        fake_github.add("GET", "/user", payload={"login": "octocat"})

        body = authed.get("/api/auth/status").json()

        assert body == {"authenticated": True, "user": {"login": "octocat"}}

    def test_status_with_rejected_token(self, authed, fake_github):
        fake_github.add("GET", "/user", status=401, payload={"message": "Bad credentials"})

        assert authed.get("/api/auth/status").json() == {"authenticated": False}

    def test_start_requires_oauth_configuration(self, api, monkeypatch):
        monkeypatch.setattr(settings, "GITHUB_CLIENT_ID", None)

        response = api.get("/api/auth/start", follow_redirects=False)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_start_redirects_to_github(self, api, monkeypatch):
        monkeypatch.setattr(settings, "GITHUB_CLIENT_ID", "client-id")
        monkeypatch.setattr(settings, "GITHUB_CLIENT_SECRET", "client-secret")

        response = api.get("/api/auth/start", follow_redirects=False)

        assert response.status_code == 307
        location = response.headers["location"]
        assert location.startswith(settings.GITHUB_AUTHORIZE_URL)
        assert "client_id=client-id" in location
        assert "scope=read%3Auser+user%3Aemail+repo" in location

    def test_callback_without_code(self, api):
        response = api.get("/api/auth/callback", follow_redirects=False)

        assert response.headers["location"].endswith("/?error=no_code")
        assert "set-cookie" not in response.headers


    def test_callback_stores_token(self, api, monkeypatch):
        async def exchange(code):
            assert code == "abc"
            return "gho_new"

        monkeypatch.setattr(auth_api, "exchange_code_for_token", exchange)

        response = api.get("/api/auth/callback?code=abc", follow_redirects=False)

        assert response.headers["location"] == f"{settings.FRONTEND_BASE_URL.rstrip('/')}/"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
        assert "gho_new" not in cookie

    def test_callback_without_token(self, api, monkeypatch):
        async def exchange(code):
            raise GithubOAuthError("bad_verification_code")

        monkeypatch.setattr(auth_api, "exchange_code_for_token", exchange)

        response = api.get("/api/auth/callback?code=stale", follow_redirects=False)

        assert response.headers["location"].endswith("/?error=token_failed")

    def test_callback_with_unreadable_token_response(self, api, monkeypatch):
        monkeypatch.setattr(settings, "GITHUB_CLIENT_ID", "client-id")
        monkeypatch.setattr(settings, "GITHUB_CLIENT_SECRET", "client-secret")
        html = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))

        async def exchange(code):
            return await exchange_code_for_token(code, transport=html)

        monkeypatch.setattr(auth_api, "exchange_code_for_token", exchange)

        response = api.get("/api/auth/callback?code=x", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"].endswith("/?error=callback_failed")
        assert "set-cookie" not in response.headers

    def test_logout_clears_cookie(self, authed):
        response = authed.post("/api/auth/logout")

        assert response.json() == {"success": True}
        assert "Max-Age=0" in response.headers["set-cookie"]


class TestRepositories:
    def test_requires_credential(self, api):
        response = api.get("/api/repos")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_forged_cookie_is_not_a_credential(self, api):
        api.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-jwt")

        assert api.get("/api/repos").status_code == 401

    def test_list(self, authed, fake_github):
        fake_github.add(
            "GET", "/user/repos", payload=[{"id": 1, "name": "widgets", "full_name": REPO}]
        )

        body = authed.get("/api/repos").json()

        assert [repo["full_name"] for repo in body["repositories"]] == [REPO]

    def test_upstream_failure_is_generic(self, authed, fake_github):
        fake_github.add("GET", "/user/repos", status=502, payload={"message": "secret detail"})

        response = authed.get("/api/repos")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "UPSTREAM_ERROR"
        assert "secret detail" not in response.text

    def test_supported_only_filters_listing(self, authed, fake_github):
        fake_github.add(
            "GET",
            f"/repos/{REPO}/contents/src",
            payload=[
                {"name": "Widget.tsx", "path": "src/Widget.tsx", "type": "file"},
                {"name": "notes.md", "path": "src/notes.md", "type": "file"},
                {"name": "lib", "path": "src/lib", "type": "dir"},
            ],
        )

        all_files = authed.get(f"/api/repos/{REPO}/files?path=src").json()["files"]
        supported = authed.get(f"/api/repos/{REPO}/files?path=src&supported_only=true").json()

        assert len(all_files) == 3
        assert [entry["name"] for entry in supported["files"]] == ["Widget.tsx"]

    def test_file_content(self, authed, fake_github):
        fake_github.add(
            "GET", f"/repos/{REPO}/contents/app.py", payload=file_payload("app.py", "x = 1\n")
        )

        body = authed.get(f"/api/repos/{REPO}/file?path=app.py").json()

        assert body["content"] == "x = 1\n"

    def test_file_content_on_directory(self, authed, fake_github):
        fake_github.add("GET", f"/repos/{REPO}/contents/src", payload=[])

        response = authed.get(f"/api/repos/{REPO}/file?path=src")

        assert response.status_code == 400


class TestGeneration:
    def test_summaries_require_files(self, authed):
        response = authed.post("/api/tests/summaries", json={"files": [], "repository": REPO})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No files provided"

    def test_summaries(self, authed, fake_github):
        source = "async function load() { return fetch('/api'); }\n"
        fake_github.add(
            "GET", f"/repos/{REPO}/contents/src/load.js", payload=file_payload("src/load.js", source)
        )

        response = authed.post(
            "/api/tests/summaries",
            json={
                "repository": REPO,
                "files": [
                    {"name": "load.js", "path": "src/load.js", "type": "file"},
                    {"name": "README.md", "path": "README.md", "type": "file"},
                ],
            },
        )

        body = response.json()
        assert response.status_code == 200
        assert body["totalFiles"] == 2
        assert [s["id"] for s in body["summaries"]] == [
            "src/load.js-functions",
            "src/load.js-async",
            "src/load.js-api",
        ]
        # README.md is not analyzable and is never fetched
        assert fake_github.calls("GET", f"/repos/{REPO}/contents/README.md") == []

    def test_summaries_skip_directories(self, authed, fake_github):
        source = "export const answer = 42;\n"
        fake_github.add(
            "GET", f"/repos/{REPO}/contents/src/answer.js", payload=file_payload("src/answer.js", source)
        )

        response = authed.post(
            "/api/tests/summaries",
            json={
                "repository": REPO,
                "files": [
                    {"name": "lib.js", "path": "src/lib.js", "type": "dir"},
                    {"name": "answer.js", "path": "src/answer.js", "type": "file"},
                ],
            },
        )

        assert response.status_code == 200
        assert [s["file"] for s in response.json()["summaries"]] == ["src/answer.js"]
        assert fake_github.calls("GET", f"/repos/{REPO}/contents/src/lib.js") == []

    def test_code(self, authed, fake_github, make_summary):
        fake_github.add(
            "GET",
            f"/repos/{REPO}/contents/src/utils.ts",
            payload=file_payload("src/utils.ts", "export function add(a, b) { return a + b; }\n"),
        )
        summary = make_summary("src/utils.ts", "functions")

        response = authed.post(
            "/api/tests/code", json={"repository": REPO, "summary": summary.model_dump()}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["fileName"] == "utils.test.js"
        assert "add" in body["testCode"]


class TestPullRequests:
    def draft(self, make_generated, **overrides):
        draft = {
            "repository": REPO,
            "branchName": "add-tests",
            "title": "Add tests",
            "description": "Generated",
            "tests": [make_generated().model_dump(by_alias=True)],
        }
        draft.update(overrides)
        return draft

    def test_invalid_draft(self, authed, fake_github, make_generated):
        response = authed.post("/api/pulls", json=self.draft(make_generated, tests=[]))

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DRAFT"
        assert fake_github.requests == []

    def test_requires_credential(self, api, make_generated):
        assert api.post("/api/pulls", json=self.draft(make_generated)).status_code == 401

    def test_create(self, authed, fake_github, make_generated):
        fake_github.add(
            "GET",
            f"/repos/{REPO}",
            payload={"id": 1, "name": "widgets", "full_name": REPO, "default_branch": "main"},
        )
        fake_github.add(
            "GET", f"/repos/{REPO}/git/ref/heads/main", payload={"object": {"sha": "base123"}}
        )
        fake_github.add("POST", f"/repos/{REPO}/git/refs", status=201, payload={})
        fake_github.add(
            "PUT", f"/repos/{REPO}/contents/tests/utils.test.js", status=201, payload={}
        )
        fake_github.add("GET", f"/repos/{REPO}/pulls", payload=[])
        fake_github.add(
            "POST",
            f"/repos/{REPO}/pulls",
            status=201,
            payload={
                "number": 5,
                "title": "Add tests",
                "html_url": "https://github.com/octo/widgets/pull/5",
                "head": {"ref": "add-tests"},
                "base": {"ref": "main"},
            },
        )
        duplicate = make_generated().model_dump(by_alias=True)
        draft = self.draft(make_generated)
        draft["tests"].append(duplicate)

        response = authed.post("/api/pulls", json=draft)

        assert response.status_code == 200
        pull = response.json()["pullRequest"]
        assert pull["number"] == 5
        assert pull["html_url"].endswith("/pull/5")
        assert [f["fileName"] for f in pull["files"]] == ["utils.test.js"]
        put = fake_github.calls("PUT", f"/repos/{REPO}/contents/tests/utils.test.js")
        assert len(put) == 1
        assert json_body(put[0])["branch"] == "add-tests"

    def test_all_writes_failing(self, authed, fake_github, make_generated):
        fake_github.add(
            "GET",
            f"/repos/{REPO}",
            payload={"id": 1, "name": "widgets", "full_name": REPO, "default_branch": "main"},
        )
        fake_github.add(
            "GET", f"/repos/{REPO}/git/ref/heads/main", payload={"object": {"sha": "base123"}}
        )
        fake_github.add("POST", f"/repos/{REPO}/git/refs", status=201, payload={})

        response = authed.post("/api/pulls", json=self.draft(make_generated))

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["message"] == "Failed to create pull request"
        assert error["details"][0]["field"] == "tests/utils.test.js"

    def test_draft_defaults(self, authed, make_generated):
        response = authed.post(
            "/api/pulls/draft",
            json={
                "files": [{"name": "utils.ts", "path": "src/utils.ts"}],
                "tests": [make_generated().model_dump(by_alias=True)],
            },
        )

        body = response.json()
        assert body["branchName"].startswith("add-tests-")
        assert body["title"] == "Add test cases for 1 files"
