"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from health_tracker.adapters.api_ninjas_client import HttpxApiNinjasClient
from health_tracker.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from health_tracker.config import Settings
from health_tracker.services.community_db import CommunityDbProvider
from health_tracker.services.estimation import EstimationService
from health_tracker.services.exact_match import ExactMatchProvider
from health_tracker.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    estimation_service: EstimationService
    summary_service: SummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    api_ninjas_client = HttpxApiNinjasClient.create(
        base_url=resolved_settings.api_ninjas_url,
        user_agent=resolved_settings.user_agent,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    open_food_facts_client = HttpxOpenFoodFactsClient.create(
        search_url=resolved_settings.open_food_facts_url,
        user_agent=resolved_settings.user_agent,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    estimation_service = EstimationService(
        exact_match=ExactMatchProvider(
            client=api_ninjas_client, debug=resolved_settings.debug
        ),
        community_db=CommunityDbProvider(
            client=open_food_facts_client,
            page_size=resolved_settings.open_food_facts_page_size,
            debug=resolved_settings.debug,
        ),
    )

    async def close_resources() -> None:
        await api_ninjas_client.close()
        await open_food_facts_client.close()

    return AppContainer(
        settings=resolved_settings,
        estimation_service=estimation_service,
        summary_service=SummaryService(baseline_kcal=resolved_settings.baseline_kcal),
        close_resources=close_resources,
    )
