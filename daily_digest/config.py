from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from daily_digest.models import Credentials, RepoSpec

TOKEN_ENV = "GITHUB_TOKEN"
USER_ENV = "GITHUB_USER"


class ConfigError(ValueError):
    """Raised when required startup configuration is missing or invalid."""


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    env = os.environ if environ is None else environ

    token = (env.get(TOKEN_ENV) or "").strip()
    user = (env.get(USER_ENV) or "").strip()

    missing = [name for name, value in ((TOKEN_ENV, token), (USER_ENV, user)) if not value]
    if missing:
        raise ConfigError(
            f"Missing required environment variable(s): {', '.join(missing)}. "
            "Check your .env file."
        )

    return Credentials(token=token, user=user)


def load_repo_specs(config_path: str | Path) -> list[RepoSpec]:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    elif suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as fh:
            try:
                data = yaml.safe_load(fh) or []
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    else:
        raise ConfigError(f"Unsupported config format for {path}. Expected .json or .yaml/.yml")

    rows = _extract_rows(data)
    return _rows_to_specs(rows, str(path))


def _extract_rows(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data

    if isinstance(data, dict):
        repos = data.get("repos")
        if isinstance(repos, list):
            return repos

    raise ConfigError("Config must be either a list of repos or a mapping with 'repos'")


def _rows_to_specs(rows: list[Any], source: str) -> list[RepoSpec]:
    specs: list[RepoSpec] = []
    for idx, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise ConfigError(f"Invalid repo entry at {source}:{idx}; expected mapping")

        name = str(row.get("name") or "").strip()
        if not name:
            raise ConfigError(f"Invalid repo entry at {source}:{idx}; expected non-empty 'name'")

        label = str(row.get("label") or "").strip() or name
        specs.append(RepoSpec(name=name, label=label))

    return specs
