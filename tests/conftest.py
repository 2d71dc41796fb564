"""Pytest configuration and fixtures."""

from typing import Any, Callable

import httpx
import pytest

from github_site_stats.config import Config, set_config


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(
        username="octocat",
        github_token="test_token",
        github_api_url="https://api.github.com",
    )
    set_config(config)
    return config


def make_repo(
    name: str,
    stars: int = 0,
    forks: int = 0,
    size: int = 0,
    language: str | None = None,
    updated: str = "2024-01-01T00:00:00Z",
    fork: bool = False,
    topics: list[str] | None = None,
) -> dict[str, Any]:
    """Build a repository record shaped like the REST API's."""
    return {
        "name": name,
        "description": f"{name} description",
        "html_url": f"https://github.com/octocat/{name}",
        "stargazers_count": stars,
        "forks_count": forks,
        "size": size,
        "language": language,
        "updated_at": updated,
        "fork": fork,
        "topics": topics or [],
    }


def make_event(
    event_type: str,
    created: str = "2024-05-01T12:00:00Z",
    repo: str = "octocat/hello-world",
    payload: dict | None = None,
) -> dict[str, Any]:
    """Build an event record shaped like the Events API's."""
    return {
        "type": event_type,
        "repo": {"name": repo},
        "created_at": created,
        "payload": payload or {},
    }


USER_DATA = {
    "login": "octocat",
    "name": "The Octocat",
    "bio": "A test user",
    "location": "San Francisco",
    "followers": 100,
    "following": 5,
    "public_repos": 3,
    "public_gists": 8,
    "avatar_url": "https://avatars.githubusercontent.com/u/583231",
    "html_url": "https://github.com/octocat",
    "created_at": "2011-01-25T18:44:36Z",
}


class FakeGitHub:
    """Minimal stand-in for the GitHub REST API behind an httpx.MockTransport."""

    def __init__(self):
        self.user: dict[str, Any] = dict(USER_DATA)
        self.repos: list[dict[str, Any]] = []
        self.events: list[dict[str, Any]] = []
        self.failures: dict[str, int] = {}  # path -> status code
        self.malformed: set[str] = set()  # paths answering 200 with a non-JSON body
        self.requests: list[httpx.Request] = []

    def fail(self, path: str, status_code: int) -> None:
        self.failures[path] = status_code

    def break_body(self, path: str) -> None:
        self.malformed.add(path)

    def count(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.failures:
            return httpx.Response(self.failures[path], json={"message": "failure"})
        if path in self.malformed:
            return httpx.Response(200, content=b"<html>oops</html>")

        if path == "/users/octocat":
            return httpx.Response(200, json=self.user)
        if path == "/users/octocat/repos":
            per_page = int(request.url.params.get("per_page", 30))
            page = int(request.url.params.get("page", 1))
            start = (page - 1) * per_page
            return httpx.Response(200, json=self.repos[start : start + per_page])
        if path == "/users/octocat/events/public":
            per_page = int(request.url.params.get("per_page", 30))
            return httpx.Response(200, json=self.events[:per_page])

        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_github() -> FakeGitHub:
    """A fake GitHub API with one user and no repositories or events."""
    return FakeGitHub()


@pytest.fixture
def repo_factory() -> Callable[..., dict[str, Any]]:
    return make_repo


@pytest.fixture
def event_factory() -> Callable[..., dict[str, Any]]:
    return make_event
