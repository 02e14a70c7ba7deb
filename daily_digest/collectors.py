"""Per-category activity collectors for one repository and one day."""

from __future__ import annotations

import logging
from typing import Any

from daily_digest.github_api import ApiRequestError, GitHubClient
from daily_digest.models import Commit, Issue, PullRequest
from daily_digest.window import ActivityWindow

logger = logging.getLogger(__name__)


def get_closed_issues(client: GitHubClient, repo: str, window: ActivityWindow) -> list[Issue]:
    # The API is trusted to honor the filter; nothing is re-checked here.
    data = client.get_json(
        f"{client.repo_path(repo)}/issues",
        params={"state": "closed", "creator": client.user, "since": window.since},
    )
    return [
        Issue(title=str(item.get("title") or ""), html_url=str(item.get("html_url") or ""))
        for item in _as_list(data, "issues")
    ]


def get_merged_prs(client: GitHubClient, repo: str, window: ActivityWindow) -> list[PullRequest]:
    data = client.get_json(
        f"{client.repo_path(repo)}/pulls",
        params={"state": "closed", "since": window.since},
    )

    merged: list[PullRequest] = []
    for item in _as_list(data, "pulls"):
        author = str(_mapping(item, "user", "pulls").get("login") or "")
        merged_at = item.get("merged_at")
        if not merged_at or author != client.user:
            continue
        merged.append(
            PullRequest(
                title=str(item.get("title") or ""),
                html_url=str(item.get("html_url") or ""),
                merged_at=str(merged_at),
                author=author,
            )
        )
    return merged


def get_todays_commits(client: GitHubClient, repo: str, window: ActivityWindow) -> list[Commit]:
    data = client.get_json(
        f"{client.repo_path(repo)}/commits",
        params={"author": client.user, "since": window.since},
    )
    return [
        Commit(
            sha=str(item.get("sha") or ""),
            message=str(_mapping(item, "commit", "commits").get("message") or ""),
            html_url=str(item.get("html_url") or ""),
        )
        for item in _as_list(data, "commits")
    ]


def get_modified_files(client: GitHubClient, repo: str, sha: str) -> list[str]:
    """Return the file paths touched by one commit, or ``[]`` if the lookup fails."""
    try:
        detail = client.get_json(f"{client.repo_path(repo)}/commits/{sha}")
    except ApiRequestError as exc:
        logger.error("Error fetching files for commit %s in %s: %s", sha, repo, exc)
        return []

    files = detail.get("files") if isinstance(detail, dict) else None
    if not isinstance(files, list):
        return []

    return [
        str(file_obj.get("filename"))
        for file_obj in files
        if isinstance(file_obj, dict) and file_obj.get("filename")
    ]


def _as_list(data: Any, kind: str) -> list[dict[str, Any]]:
    if not isinstance(data, list):
        raise ApiRequestError(f"Unexpected payload for {kind}; expected a JSON list")
    if not all(isinstance(item, dict) for item in data):
        raise ApiRequestError(f"Unexpected payload for {kind}; expected a list of objects")
    return data


def _mapping(item: dict[str, Any], key: str, kind: str) -> dict[str, Any]:
    value = item.get(key) or {}
    if not isinstance(value, dict):
        raise ApiRequestError(f"Unexpected '{key}' field in {kind} payload; expected an object")
    return value
