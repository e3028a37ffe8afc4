"""Tests for upload and scan services."""

from datetime import UTC, datetime

import pytest

from calgooo.adapters.local_file_storage import LocalFileStorage
from calgooo.adapters.memory_store import InMemoryStore
from calgooo.services.calendar import Calendar
from calgooo.services.goals import GoalService
from calgooo.services.scan import ScanService
from calgooo.services.streaks import StreakService
from calgooo.services.uploads import UploadService, build_filename, parse_limit
from tests.conftest import InMemoryFileStorage, fixed_clock


def _upload_service(
    store: InMemoryStore, storage: InMemoryFileStorage
) -> UploadService:
    return UploadService(repository=store, storage=storage, max_bytes=16)


def test_build_filename_keeps_suffix() -> None:
    now = datetime(2024, 3, 10, tzinfo=UTC)

    png = build_filename("plate.png", now)
    fallback = build_filename(None, now)

    assert png.startswith(f"img_{int(now.timestamp() * 1000)}_")
    assert png.endswith(".png")
    assert fallback.endswith(".jpg")
    assert build_filename("plate.png", now) != png


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 20), ("", 20), ("5", 5), ("500", 100), ("0", 0), ("-2", 0), ("x", 20)],
)
def test_parse_limit(raw: object, expected: int) -> None:
    assert parse_limit(raw) == expected


def test_save_image_records_upload() -> None:
    store = InMemoryStore()
    storage = InMemoryFileStorage()
    service = _upload_service(store, storage)

    record = service.save_image("meal.jpg", b"jpeg-bytes", "http://testserver/")

    assert storage.files[record.filename] == b"jpeg-bytes"
    assert record.url == f"/uploads/{record.filename}"
    assert record.absolute_url == f"http://testserver/uploads/{record.filename}"
    assert service.list_recent() == [record]


def test_save_image_rejects_large_files() -> None:
    store = InMemoryStore()
    storage = InMemoryFileStorage()
    service = _upload_service(store, storage)

    with pytest.raises(ValueError):
        service.save_image("meal.jpg", b"x" * 17, "http://testserver/")

    assert storage.files == {}
    assert store.uploads == []


def test_list_recent_is_newest_first() -> None:
    store = InMemoryStore()
    service = _upload_service(store, InMemoryFileStorage())
    first = service.save_image("a.jpg", b"a", "http://testserver")
    second = service.save_image("b.jpg", b"b", "http://testserver")

    assert service.list_recent() == [second, first]
    assert service.list_recent("1") == [second]


def test_local_file_storage_writes_bytes(tmp_path) -> None:
    storage = LocalFileStorage.create(tmp_path / "nested" / "uploads")

    storage.save("img_1.jpg", b"data")

    assert (tmp_path / "nested" / "uploads" / "img_1.jpg").read_bytes() == b"data"


def test_scan_marks_today_and_returns_suggestions() -> None:
    store = InMemoryStore()
    calendar = Calendar(goal_service=GoalService(store), clock=fixed_clock())
    streak_service = StreakService(repository=store, calendar=calendar)
    scan_service = ScanService(
        upload_service=_upload_service(store, InMemoryFileStorage()),
        streak_service=streak_service,
    )

    record, suggestions = scan_service.analyze("meal.jpg", b"img", "http://testserver")

    assert store.uploads == [record]
    assert store.get_override("2024-03-10") is True
    assert [s.foodName for s in suggestions] == [
        "Chicken & Rice Bowl",
        "Greek Yogurt + Banana",
        "Protein Shake",
    ]
    assert suggestions[0].macros.caloriesKcal == 520
    assert streak_service.classify("2024-03-10").hit is True
