from __future__ import annotations

import logging
from typing import Any

import requests

from daily_digest.models import Credentials

logger = logging.getLogger(__name__)

API_URL = "https://api.github.com"
ACCEPT_HEADER = "application/vnd.github.v3+json"
DEFAULT_TIMEOUT = 30


class ApiRequestError(RuntimeError):
    """A GitHub API request failed or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubClient:
    def __init__(
        self,
        credentials: Credentials,
        session: requests.Session | None = None,
        base_url: str = API_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.credentials = credentials
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def user(self) -> str:
        return self.credentials.user

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"token {self.credentials.token}",
            "Accept": ACCEPT_HEADER,
        }

    def repo_path(self, repo: str) -> str:
        # Bare names belong to the configured account.
        full_name = repo if "/" in repo else f"{self.user}/{repo}"
        return f"/repos/{full_name}"

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)

        try:
            response = self.session.get(
                url,
                headers=self.headers,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ApiRequestError(f"Request to {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise ApiRequestError(
                f"GitHub API error ({response.status_code}) for {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ApiRequestError(f"Malformed JSON body from {url}") from exc
