from __future__ import annotations

from typing import Any

import pytest

from daily_digest.github_api import API_URL, GitHubClient
from daily_digest.models import Credentials


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, malformed: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._malformed = malformed

    def json(self) -> Any:
        if self._malformed:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Stand-in for ``requests.Session`` keyed by API path."""

    def __init__(self) -> None:
        self.routes: dict[str, FakeResponse | Exception] = {}
        self.calls: list[dict[str, Any]] = []

    def add(
        self,
        path: str,
        payload: Any = None,
        status: int = 200,
        error: Exception | None = None,
        malformed: bool = False,
    ) -> None:
        self.routes[path] = error or FakeResponse(status, payload, malformed=malformed)

    def get(self, url: str, headers=None, params=None, timeout=None) -> FakeResponse:
        path = url.removeprefix(API_URL)
        self.calls.append({"path": path, "headers": headers, "params": params, "timeout": timeout})

        route = self.routes.get(path)
        if route is None:
            return FakeResponse(404, {"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> GitHubClient:
    return GitHubClient(Credentials(token="ghp_test", user="octocat"), session=session)
