"""Food scan service returning canned suggestions."""

from dataclasses import dataclass

from calgooo.domain.uploads import ScanSuggestion, UploadRecord
from calgooo.services.streaks import StreakService
from calgooo.services.uploads import UploadService

DEMO_SUGGESTIONS: list[dict[str, object]] = [
    {
        "id": "s1",
        "foodName": "Chicken & Rice Bowl",
        "serving": "1 bowl (350g)",
        "confidence": 0.86,
        "macros": {
            "caloriesKcal": 520,
            "proteinG": 38,
            "carbsG": 62,
            "fatG": 12,
            "fiberG": 4,
        },
    },
    {
        "id": "s2",
        "foodName": "Greek Yogurt + Banana",
        "serving": "1 cup + 1 medium",
        "confidence": 0.74,
        "macros": {
            "caloriesKcal": 260,
            "proteinG": 18,
            "carbsG": 36,
            "fatG": 4,
            "fiberG": 3,
        },
    },
    {
        "id": "s3",
        "foodName": "Protein Shake",
        "serving": "1 scoop + water",
        "confidence": 0.63,
        "macros": {
            "caloriesKcal": 180,
            "proteinG": 25,
            "carbsG": 6,
            "fatG": 2,
            "fiberG": 1,
        },
    },
]


@dataclass
class ScanService:
    """Stores a scanned image and returns food suggestions."""

    upload_service: UploadService
    streak_service: StreakService

    def analyze(
        self, original_name: str | None, content: bytes, base_url: str
    ) -> tuple[UploadRecord, list[ScanSuggestion]]:
        """Save the image, mark today as a hit and return suggestions."""
        record = self.upload_service.save_image(original_name, content, base_url)
        self.streak_service.mark_today()
        suggestions = [ScanSuggestion.model_validate(raw) for raw in DEMO_SUGGESTIONS]
        return record, suggestions
