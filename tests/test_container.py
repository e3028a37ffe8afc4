"""Tests for container wiring."""

from calgooo.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.streak_service.repository is container.store
    assert container.scan_service.streak_service is container.streak_service
    assert settings.upload_dir.is_dir()


def test_container_shares_goal_with_calendar(settings) -> None:
    container = build_container(settings)

    container.goal_service.bootstrap("lose", "Asia/Tokyo")

    assert container.calendar.timezone().key == "Asia/Tokyo"
    assert container.store.get_goal().calories_kcal == 1800
