"""Calendar-day helpers.

Dates are handled as plain calendar values and rendered as ``YYYY-MM-DD``
keys. Only "today" depends on a clock and a timezone.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calgooo.services.goals import GoalService


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def date_window(end: date, days: int) -> list[date]:
    """Return ``days`` consecutive dates ending at ``end``, oldest first."""
    if days <= 0:
        return []
    start = end - timedelta(days=days - 1)
    return [start + timedelta(days=offset) for offset in range(days)]


def parse_day_key(raw: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` key, returning None when malformed."""
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def _resolve_zone(name: str | None) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


@dataclass
class Calendar:
    """Resolves today's date in the onboarding or default timezone."""

    goal_service: GoalService
    default_timezone: str = "UTC"
    clock: Callable[[], datetime] = field(default=utc_now)

    def timezone(self) -> ZoneInfo:
        """Return the active timezone."""
        return (
            _resolve_zone(self.goal_service.get_timezone())
            or _resolve_zone(self.default_timezone)
            or ZoneInfo("UTC")
        )

    def today(self) -> date:
        """Return the current calendar date."""
        return self.clock().astimezone(self.timezone()).date()

    def today_key(self) -> str:
        """Return the current calendar date as a key."""
        return self.today().isoformat()
