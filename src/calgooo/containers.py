"""Dependency container wiring for the application."""

from dataclasses import dataclass

from calgooo.adapters.local_file_storage import LocalFileStorage
from calgooo.adapters.memory_store import InMemoryStore
from calgooo.config import Settings
from calgooo.services.calendar import Calendar
from calgooo.services.goals import GoalService
from calgooo.services.meals import MealLogService
from calgooo.services.scan import ScanService
from calgooo.services.streaks import StreakService
from calgooo.services.uploads import UploadService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryStore
    calendar: Calendar
    goal_service: GoalService
    meal_log_service: MealLogService
    streak_service: StreakService
    upload_service: UploadService
    scan_service: ScanService


def build_container(
    settings: Settings | None = None,
    store: InMemoryStore | None = None,
    calendar: Calendar | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or InMemoryStore()
    goal_service = GoalService(resolved_store)
    resolved_calendar = calendar or Calendar(
        goal_service=goal_service,
        default_timezone=resolved_settings.default_timezone,
    )
    streak_service = StreakService(
        repository=resolved_store, calendar=resolved_calendar
    )
    upload_service = UploadService(
        repository=resolved_store,
        storage=LocalFileStorage.create(resolved_settings.upload_dir),
        max_bytes=resolved_settings.max_upload_bytes,
    )
    return AppContainer(
        settings=resolved_settings,
        store=resolved_store,
        calendar=resolved_calendar,
        goal_service=goal_service,
        meal_log_service=MealLogService(resolved_store),
        streak_service=streak_service,
        upload_service=upload_service,
        scan_service=ScanService(
            upload_service=upload_service, streak_service=streak_service
        ),
    )
