"""In-memory store for the single-user demo."""

from dataclasses import dataclass, field

from calgooo.domain.macros import MacroSet, Meal
from calgooo.domain.plans import GoalPlan, build_goals
from calgooo.domain.uploads import UploadRecord
from calgooo.services.goals import GoalRepository
from calgooo.services.meals import MealLogRepository, aggregate_totals
from calgooo.services.streaks import StreakRepository
from calgooo.services.uploads import UploadRepository


@dataclass
class InMemoryStore(
    MealLogRepository, GoalRepository, StreakRepository, UploadRepository
):
    """Process-local state: meals, overrides, goal plan and uploads."""

    meals_by_date: dict[str, list[Meal]] = field(default_factory=dict)
    overrides: dict[str, bool] = field(default_factory=dict)
    uploads: list[UploadRecord] = field(default_factory=list)
    plan: GoalPlan | None = None

    def add_meal(self, meal: Meal) -> None:
        """Store a meal as the newest entry of its date."""
        self.meals_by_date.setdefault(meal.date, []).insert(0, meal)

    def list_meals(self, day: str) -> list[Meal]:
        """Return a copy of the meals for a date."""
        return list(self.meals_by_date.get(day, []))

    def get_meal_totals(self, day: str) -> MacroSet:
        """Return summed macros for a date."""
        return aggregate_totals(self.meals_by_date.get(day, []))

    def get_override(self, day: str) -> bool | None:
        """Return the override for a date, if set."""
        return self.overrides.get(day)

    def set_override(self, day: str, hit: bool) -> None:
        """Store an override for a date."""
        self.overrides[day] = hit

    def get_plan(self) -> GoalPlan | None:
        """Return the onboarding plan."""
        return self.plan

    def save_plan(self, plan: GoalPlan) -> None:
        """Replace the onboarding plan."""
        self.plan = plan

    def get_goal(self) -> MacroSet:
        """Return the current goal or the maintain defaults."""
        if self.plan is None:
            return build_goals(None)
        return self.plan.goals

    def add_upload(self, record: UploadRecord) -> None:
        """Store upload metadata as the newest entry."""
        self.uploads.insert(0, record)

    def list_uploads(self, limit: int) -> list[UploadRecord]:
        """Return the newest uploads."""
        return self.uploads[:limit]
