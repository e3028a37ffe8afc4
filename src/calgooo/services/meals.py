"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from calgooo.domain.macros import MacroSet, Meal

logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meals keyed by date."""

    def add_meal(self, meal: Meal) -> None:
        """Store a meal under its date."""

    def list_meals(self, day: str) -> list[Meal]:
        """Return the meals logged for a date."""


@dataclass
class MealLogService:
    """Service that records meals and reports daily totals."""

    repository: MealLogRepository

    def log_meal(  # noqa: PLR0913
        self,
        day: str,
        meal_type: str,
        title: str | None,
        image_absolute_url: str | None,
        macros: object,
    ) -> tuple[Meal, MacroSet]:
        """Persist a meal and return it with the date's running totals."""
        meal = Meal(
            id=f"meal_{uuid4().hex}",
            date=day,
            type=meal_type,
            title=title or "Meal",
            image_absolute_url=image_absolute_url or None,
            macros=MacroSet.from_raw(macros),
            created_at=datetime.now(tz=UTC),
        )
        self.repository.add_meal(meal)
        totals = aggregate_totals(self.repository.list_meals(day))
        logger.info(
            "Meal logged",
            extra={"date": day, "meal_id": meal.id, "calories": totals.calories_kcal},
        )
        return meal, totals

    def list_meals(self, day: str) -> tuple[list[Meal], MacroSet]:
        """Return meals for a date, newest first, with their totals."""
        meals = sorted(
            self.repository.list_meals(day),
            key=lambda meal: meal.created_at,
            reverse=True,
        )
        return meals, aggregate_totals(meals)


def aggregate_totals(meals: list[Meal]) -> MacroSet:
    """Sum the macros of the given meals."""
    total = MacroSet()
    for meal in meals:
        total = total + meal.macros
    return total
