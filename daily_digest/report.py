from __future__ import annotations

from datetime import date
from pathlib import Path

from daily_digest.models import Commit, RepositoryReport

REPORT_TITLE = "# Daily Activity Report"
NONE_PLACEHOLDER = "- None"
NO_FILES_PLACEHOLDER = "- No modified files found."


def render_report(reports: list[RepositoryReport], generated_on: date) -> str:
    lines = [REPORT_TITLE, "", f"Date: {generated_on.isoformat()}"]

    for report in reports:
        lines.extend(["", f"## Repository: {report.label} ({report.name})"])

        lines.extend(["", f"### Closed Issues - {report.label}", ""])
        if report.issues:
            lines.extend(f"- [{issue.title}]({issue.html_url})" for issue in report.issues)
        else:
            lines.append(NONE_PLACEHOLDER)

        lines.extend(["", f"### Merged Pull Requests - {report.label}", ""])
        if report.pull_requests:
            lines.extend(f"- [{pr.title}]({pr.html_url})" for pr in report.pull_requests)
        else:
            lines.append(NONE_PLACEHOLDER)

        lines.extend(["", f"### Commits - {report.label}"])
        if report.commits:
            for commit in report.commits:
                lines.extend(["", *_render_commit(commit)])
        else:
            lines.extend(["", NONE_PLACEHOLDER])

    lines.append("")
    return "\n".join(lines)


def _render_commit(commit: Commit) -> list[str]:
    lines = [
        f"#### Commit: `{commit.summary}`",
        f"- [View commit {commit.short_sha}]({commit.html_url})",
    ]
    if commit.files:
        lines.append("- Modified files:")
        lines.extend(f"  - {path}" for path in commit.files)
    else:
        lines.append(NO_FILES_PLACEHOLDER)
    lines.extend(["", "---"])
    return lines


def write_report(output_path: Path, content: str) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path
