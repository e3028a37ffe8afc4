"""Models for image uploads and scan results."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class UploadRecord:
    """Stored image metadata."""

    id: str
    filename: str
    url: str
    absolute_url: str
    created_at: datetime


class SuggestionMacros(BaseModel):
    """Macros attached to a scan suggestion."""

    caloriesKcal: int = Field(ge=0)
    proteinG: int = Field(ge=0)
    carbsG: int = Field(ge=0)
    fatG: int = Field(ge=0)
    fiberG: int = Field(ge=0)


class ScanSuggestion(BaseModel):
    """Single food suggestion returned for a scanned image."""

    id: str
    foodName: str
    serving: str
    confidence: float = Field(ge=0.0, le=1.0)
    macros: SuggestionMacros
