from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RepoSpec:
    name: str
    label: str


@dataclass(frozen=True)
class Credentials:
    token: str
    user: str


@dataclass(frozen=True)
class Issue:
    title: str
    html_url: str


@dataclass(frozen=True)
class PullRequest:
    title: str
    html_url: str
    merged_at: str | None
    author: str


@dataclass
class Commit:
    sha: str
    message: str
    html_url: str
    files: list[str] = field(default_factory=list)

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def summary(self) -> str:
        lines = self.message.strip().splitlines()
        return lines[0] if lines else ""


@dataclass
class RepositoryReport:
    name: str
    label: str
    issues: list[Issue] = field(default_factory=list)
    pull_requests: list[PullRequest] = field(default_factory=list)
    commits: list[Commit] = field(default_factory=list)
