"""Tests for container wiring and settings."""

import asyncio

from health_tracker.config import Settings
from health_tracker.containers import build_container


def test_build_container_wires_providers(settings) -> None:
    container = build_container(settings)

    estimation = container.estimation_service
    assert estimation.community_db.page_size == settings.open_food_facts_page_size
    assert container.summary_service.baseline_kcal == settings.baseline_kcal
    asyncio.run(container.close_resources())


def test_blank_api_key_is_absent() -> None:
    assert Settings(api_ninjas_key="   ").api_ninjas_key is None
    assert Settings(api_ninjas_key=" abc ").api_ninjas_key == "abc"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_NINJAS_KEY", "from-env")
    monkeypatch.setenv("BASELINE_KCAL", "2000")

    settings = Settings()

    assert settings.api_ninjas_key == "from-env"
    assert settings.baseline_kcal == 2000
