"""Streak and consistency scoring."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from calgooo.domain.macros import MacroSet
from calgooo.domain.streaks import (
    STREAK_TIERS,
    DayClassification,
    StreakStats,
    StreakSummary,
)
from calgooo.services.calendar import Calendar, date_window

logger = logging.getLogger(__name__)

DEFAULT_WEEKS = 12
MIN_WEEKS = 1
MAX_WEEKS = 26

# (max relative calorie deviation, score), loosest first.
SCORE_THRESHOLDS: tuple[tuple[float, int], ...] = (
    (0.25, 1),
    (0.12, 2),
    (0.08, 3),
    (0.05, 4),
)
MAX_SCORE = 4


class StreakRepository(Protocol):
    """Read and write access to the data streak scoring depends on."""

    def get_meal_totals(self, day: str) -> MacroSet:
        """Return aggregated macros for a date, zero when nothing was logged."""

    def get_override(self, day: str) -> bool | None:
        """Return the manual override for a date, if any."""

    def set_override(self, day: str, hit: bool) -> None:
        """Store a manual override for a date."""

    def get_goal(self) -> MacroSet:
        """Return the current macro goal."""


def classify_day(
    day: str, goal: MacroSet, totals: MacroSet, override: bool | None
) -> DayClassification:
    """Decide whether a date counts as a hit and how close it was to goal."""
    hit = effective_hit(totals, override)
    if not hit:
        return DayClassification(date=day, hit=False, score=0)

    diff = abs(totals.calories_kcal - goal.calories_kcal) / max(
        1, goal.calories_kcal
    )
    score = 1
    # Every satisfied bound overwrites the previous one; a hit never scores 0.
    for limit, value in SCORE_THRESHOLDS:
        if diff <= limit:
            score = value
    score = round(min(MAX_SCORE, max(0, score)))
    return DayClassification(date=day, hit=True, score=score)


def effective_hit(totals: MacroSet, override: bool | None) -> bool:
    """Return the override when set, otherwise whether any calories were logged."""
    if override is not None:
        return override
    return totals.calories_kcal > 0


def aggregate_streaks(days: list[DayClassification]) -> StreakStats:
    """Compute streak counters for chronologically ordered days."""
    best = 0
    cur = 0
    for day in days:
        cur = cur + 1 if day.hit else 0
        best = max(best, cur)

    current = 0
    for day in reversed(days):
        if not day.hit:
            break
        current += 1

    return StreakStats(
        current_streak=current,
        best_streak=best,
        hits_7=_count_hits(days[-7:]),
        hits_30=_count_hits(days[-30:]),
        earned_tiers=[tier for tier in STREAK_TIERS if tier <= best],
    )


def _count_hits(days: list[DayClassification]) -> int:
    return sum(1 for day in days if day.hit)


def parse_weeks(raw: object) -> int:
    """Normalize a requested week count into the supported range."""
    weeks = _to_number(raw)
    if weeks is None:
        return DEFAULT_WEEKS
    return min(MAX_WEEKS, max(MIN_WEEKS, math.floor(weeks + 0.5)))


def _to_number(raw: object) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        number = float(raw)
    elif isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            number = float(raw)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass
class StreakService:
    """Builds streak summaries and records overrides."""

    repository: StreakRepository
    calendar: Calendar

    def classify(self, day: str) -> DayClassification:
        """Classify a single date against the current goal."""
        return classify_day(
            day,
            self.repository.get_goal(),
            self.repository.get_meal_totals(day),
            self.repository.get_override(day),
        )

    def compute_summary(self, weeks_param: object = None) -> StreakSummary:
        """Return the streak report for the requested number of weeks."""
        weeks = parse_weeks(weeks_param)
        window = date_window(self.calendar.today(), weeks * 7)
        goal = self.repository.get_goal()
        days = []
        for day in window:
            key = day.isoformat()
            days.append(
                classify_day(
                    key,
                    goal,
                    self.repository.get_meal_totals(key),
                    self.repository.get_override(key),
                )
            )
        return StreakSummary(
            start=window[0].isoformat(),
            end=window[-1].isoformat(),
            weeks=weeks,
            goal_calories_kcal=round(goal.calories_kcal),
            days=days,
            stats=aggregate_streaks(days),
        )

    def set_override(self, day: str, hit: bool | None = None) -> bool:
        """Force a date's hit value, toggling the effective value when hit is None."""
        if hit is None:
            current = effective_hit(
                self.repository.get_meal_totals(day),
                self.repository.get_override(day),
            )
            hit = not current
        self.repository.set_override(day, hit)
        logger.info("Streak override set", extra={"date": day, "hit": hit})
        return hit

    def mark_today(self) -> str:
        """Mark today as a hit and return its key."""
        today = self.calendar.today_key()
        self.set_override(today, True)
        return today
