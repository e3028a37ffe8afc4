"""Onboarding and goal plan service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calgooo.domain.macros import MacroSet
from calgooo.domain.plans import GoalPlan, build_goals

logger = logging.getLogger(__name__)


class GoalRepository(Protocol):
    """Persistence interface for the process-wide goal plan."""

    def get_plan(self) -> GoalPlan | None:
        """Return the stored plan, if onboarding happened."""

    def save_plan(self, plan: GoalPlan) -> None:
        """Replace the stored plan."""

    def get_goal(self) -> MacroSet:
        """Return the current goal, or the maintain plan before onboarding."""


@dataclass
class GoalService:
    """Service for onboarding and goal lookups."""

    repository: GoalRepository

    def bootstrap(self, goal: str | None, timezone: str | None) -> GoalPlan:
        """Create and store a plan for the given goal."""
        plan = GoalPlan(goal=goal, goals=build_goals(goal), timezone=timezone)
        self.repository.save_plan(plan)
        logger.info(
            "Goal plan bootstrapped",
            extra={"goal": goal, "calories": plan.goals.calories_kcal},
        )
        return plan

    def get_goal(self) -> MacroSet:
        """Return the current goal."""
        return self.repository.get_goal()

    def get_timezone(self) -> str | None:
        """Return the timezone supplied during onboarding."""
        plan = self.repository.get_plan()
        return plan.timezone if plan else None
