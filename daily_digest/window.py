from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class ActivityWindow:
    start: datetime
    end: datetime

    @property
    def day(self) -> date:
        return self.start.date()

    @property
    def since(self) -> str:
        return self.start.strftime("%Y-%m-%dT%H:%M:%SZ")


def today_window(now: datetime | None = None) -> ActivityWindow:
    """Window from midnight UTC of the current day through ``now``."""
    current = _to_utc(now or datetime.now(timezone.utc))
    start = current.replace(hour=0, minute=0, second=0, microsecond=0)
    return ActivityWindow(start=start, end=current)


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
