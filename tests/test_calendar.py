"""Tests for calendar helpers."""

from datetime import UTC, date, datetime

from calgooo.adapters.memory_store import InMemoryStore
from calgooo.services.calendar import Calendar, date_window, parse_day_key
from calgooo.services.goals import GoalService
from tests.conftest import fixed_clock


def test_date_window_is_oldest_first_and_inclusive() -> None:
    window = date_window(date(2024, 3, 2), 3)

    assert window == [date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2)]


def test_date_window_empty_for_non_positive_days() -> None:
    assert date_window(date(2024, 3, 2), 0) == []


def test_parse_day_key() -> None:
    assert parse_day_key("2024-03-10") == date(2024, 3, 10)
    assert parse_day_key("2024-02-30") is None
    assert parse_day_key("yesterday") is None


def test_today_uses_onboarding_timezone() -> None:
    goal_service = GoalService(InMemoryStore())
    calendar = Calendar(
        goal_service=goal_service,
        clock=fixed_clock(datetime(2024, 3, 10, 23, 30, tzinfo=UTC)),
    )

    assert calendar.today_key() == "2024-03-10"

    goal_service.bootstrap("maintain", "Asia/Tokyo")

    assert calendar.today_key() == "2024-03-11"


def test_invalid_timezone_falls_back_to_default() -> None:
    goal_service = GoalService(InMemoryStore())
    goal_service.bootstrap("maintain", "Not/AZone")
    calendar = Calendar(
        goal_service=goal_service,
        default_timezone="America/Los_Angeles",
        clock=fixed_clock(datetime(2024, 3, 10, 3, 0, tzinfo=UTC)),
    )

    assert calendar.today() == date(2024, 3, 9)
