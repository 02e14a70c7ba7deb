from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from daily_digest.collectors import (
    get_closed_issues,
    get_merged_prs,
    get_modified_files,
    get_todays_commits,
)
from daily_digest.config import ConfigError, load_credentials, load_repo_specs
from daily_digest.github_api import DEFAULT_TIMEOUT, ApiRequestError, GitHubClient
from daily_digest.models import RepoSpec, RepositoryReport
from daily_digest.report import render_report, write_report
from daily_digest.window import ActivityWindow, today_window

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile today's GitHub activity into a Markdown report")
    parser.add_argument("--config", default="config.json", help="JSON or YAML repository list")
    parser.add_argument("--output", default="report.md", help="Report path (overwritten each run)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every API request")
    return parser


def collect_repository(
    client: GitHubClient,
    spec: RepoSpec,
    window: ActivityWindow,
) -> RepositoryReport:
    issues = get_closed_issues(client, spec.name, window)
    pull_requests = get_merged_prs(client, spec.name, window)
    commits = get_todays_commits(client, spec.name, window)

    for commit in commits:
        commit.files = get_modified_files(client, spec.name, commit.sha)

    return RepositoryReport(
        name=spec.name,
        label=spec.label,
        issues=issues,
        pull_requests=pull_requests,
        commits=commits,
    )


def collect_reports(
    client: GitHubClient,
    specs: list[RepoSpec],
    window: ActivityWindow,
) -> list[RepositoryReport]:
    reports: list[RepositoryReport] = []

    for spec in specs:
        logger.info("Fetching data for %s...", spec.name)
        try:
            reports.append(collect_repository(client, spec, window))
        except ApiRequestError as exc:
            logger.error("Error fetching data for %s: %s", spec.name, exc)

    return reports


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_dotenv()

    try:
        credentials = load_credentials()
        specs = load_repo_specs(args.config)
    except (FileNotFoundError, ConfigError) as exc:
        print(f"Configuration error: {exc}")
        return 1

    window = today_window()
    client = GitHubClient(credentials, timeout=args.timeout)
    reports = collect_reports(client, specs, window)

    output_path = write_report(Path(args.output), render_report(reports, window.day))

    print(f"Wrote report to {output_path}")
    print(f"Repositories reported: {len(reports)}/{len(specs)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
