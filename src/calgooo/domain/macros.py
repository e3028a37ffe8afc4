"""Macro domain models."""

import math
from dataclasses import dataclass
from datetime import datetime


def round_macro(value: object) -> int:
    """Round a raw macro value half up, treating junk as zero."""
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return 0
    try:
        number = float(value)
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, math.floor(number + 0.5))


@dataclass(frozen=True)
class MacroSet:
    """Integer macro counters."""

    calories_kcal: int = 0
    protein_g: int = 0
    carbs_g: int = 0
    fat_g: int = 0
    fiber_g: int = 0

    @classmethod
    def from_raw(cls, raw: object) -> "MacroSet":
        """Build a macro set from a camelCase payload, ignoring non-objects."""
        data = raw if isinstance(raw, dict) else {}
        return cls(
            calories_kcal=round_macro(data.get("caloriesKcal")),
            protein_g=round_macro(data.get("proteinG")),
            carbs_g=round_macro(data.get("carbsG")),
            fat_g=round_macro(data.get("fatG")),
            fiber_g=round_macro(data.get("fiberG")),
        )

    def __add__(self, other: "MacroSet") -> "MacroSet":
        return MacroSet(
            calories_kcal=self.calories_kcal + other.calories_kcal,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
        )

    def to_dict(self) -> dict[str, int]:
        """Return the camelCase representation used by the API."""
        return {
            "caloriesKcal": self.calories_kcal,
            "proteinG": self.protein_g,
            "carbsG": self.carbs_g,
            "fatG": self.fat_g,
            "fiberG": self.fiber_g,
        }


@dataclass(frozen=True)
class Meal:
    """A logged meal for one calendar date."""

    id: str
    date: str
    type: str
    title: str
    image_absolute_url: str | None
    macros: MacroSet
    created_at: datetime
