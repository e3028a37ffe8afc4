"""Pydantic models for request payloads."""

from typing import Any

from pydantic import BaseModel


class BootstrapRequest(BaseModel):
    """Onboarding payload."""

    goal: str | None = None
    timezone: str | None = None


class MealCreateRequest(BaseModel):
    """Meal logging payload; required fields are checked by the handler."""

    date: str | None = None
    type: str | None = None
    title: str | None = None
    imageAbsoluteUrl: str | None = None
    macros: Any = None


class OverrideRequest(BaseModel):
    """Streak override payload; omitting hit toggles the day."""

    hit: bool | None = None
