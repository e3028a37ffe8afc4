"""Domain models for streak scoring."""

from dataclasses import dataclass

STREAK_TIERS: tuple[int, ...] = (7, 14, 30, 60, 90, 120)


@dataclass(frozen=True)
class DayClassification:
    """Hit and quality score for a single calendar date."""

    date: str
    hit: bool
    score: int


@dataclass(frozen=True)
class StreakStats:
    """Counters derived from a window of classified days."""

    current_streak: int
    best_streak: int
    hits_7: int
    hits_30: int
    earned_tiers: list[int]


@dataclass(frozen=True)
class StreakSummary:
    """Streak report for a rolling window ending today."""

    start: str
    end: str
    weeks: int
    goal_calories_kcal: int
    days: list[DayClassification]
    stats: StreakStats
