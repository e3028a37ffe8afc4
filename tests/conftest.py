"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from calgooo.adapters.memory_store import InMemoryStore
from calgooo.config import Settings
from calgooo.containers import AppContainer, build_container
from calgooo.domain.macros import MacroSet
from calgooo.services.calendar import Calendar
from calgooo.services.goals import GoalService
from calgooo.services.streaks import StreakRepository
from calgooo.services.uploads import FileStorage

FIXED_NOW = datetime(2024, 3, 10, 15, 30, tzinfo=UTC)


def fixed_clock(now: datetime = FIXED_NOW) -> Callable[[], datetime]:
    """Return a clock that always reports the given instant."""

    def clock() -> datetime:
        return now

    return clock


@dataclass
class FakeStreakRepository(StreakRepository):
    """Streak repository with fabricated totals and overrides."""

    calories: dict[str, int] = field(default_factory=dict)
    overrides: dict[str, bool] = field(default_factory=dict)
    goal: MacroSet = field(default_factory=lambda: MacroSet(calories_kcal=2000))
    reads: list[str] = field(default_factory=list)

    def get_meal_totals(self, day: str) -> MacroSet:
        self.reads.append(day)
        return MacroSet(calories_kcal=self.calories.get(day, 0))

    def get_override(self, day: str) -> bool | None:
        return self.overrides.get(day)

    def set_override(self, day: str, hit: bool) -> None:
        self.overrides[day] = hit

    def get_goal(self) -> MacroSet:
        return self.goal


@dataclass
class InMemoryFileStorage(FileStorage):
    """File storage that keeps bytes in a dict."""

    files: dict[str, bytes] = field(default_factory=dict)

    def save(self, filename: str, content: bytes) -> None:
        self.files[filename] = content


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(upload_dir=tmp_path / "uploads", max_upload_bytes=1024)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def calendar(store: InMemoryStore) -> Calendar:
    return Calendar(
        goal_service=GoalService(store),
        default_timezone="UTC",
        clock=fixed_clock(),
    )


@pytest.fixture
def container(
    settings: Settings, store: InMemoryStore, calendar: Calendar
) -> AppContainer:
    return build_container(settings, store=store, calendar=calendar)
