"""Onboarding plan models."""

from dataclasses import dataclass

from calgooo.domain.macros import MacroSet


@dataclass(frozen=True)
class GoalPlan:
    """Macro plan fabricated during onboarding."""

    goal: str | None
    goals: MacroSet
    timezone: str | None = None


def build_goals(goal: str | None) -> MacroSet:
    """Fabricate macro targets for an onboarding goal."""
    if goal == "gain":
        calories = 2600
    elif goal == "lose":
        calories = 1800
    else:
        calories = 2200
    return MacroSet(
        calories_kcal=calories,
        protein_g=120 if goal == "gain" else 100,
        carbs_g=275,
        fat_g=70,
        fiber_g=30,
    )
