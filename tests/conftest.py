"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from health_tracker.adapters.api_ninjas_client import ApiNinjasClient
from health_tracker.adapters.open_food_facts_client import OpenFoodFactsClient
from health_tracker.config import Settings
from health_tracker.containers import AppContainer
from health_tracker.services.community_db import CommunityDbProvider
from health_tracker.services.estimation import EstimationService
from health_tracker.services.exact_match import ExactMatchProvider
from health_tracker.services.summary import SummaryService


@dataclass
class FakeApiNinjasClient(ApiNinjasClient):
    """Fake API Ninjas client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: [
            {
                "name": "chicken breast",
                "calories": 165,
                "protein_g": 31,
                "carbohydrates_total_g": 0,
                "fat_total_g": 3.6,
            }
        ]
    )
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def fetch_nutrition(self, query: str, api_key: str) -> object:
        self.calls.append((query, api_key))
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: {
            "products": [
                {
                    "product_name": "Chicken breast fillets",
                    "nutriments": {
                        "energy-kcal_100g": 165,
                        "proteins_100g": 31,
                        "carbohydrates_100g": 0,
                        "fat_100g": 3.6,
                    },
                    "serving_size": "150 g",
                }
            ]
        }
    )
    error: Exception | None = None
    calls: list[tuple[str, int]] = field(default_factory=list)

    async def search_products(self, query: str, page_size: int = 5) -> object:
        self.calls.append((query, page_size))
        if self.error is not None:
            raise self.error
        return self.payload


def product(
    nutriments: dict[str, object] | None = None, **fields: object
) -> dict[str, object]:
    """Build an Open Food Facts product record."""
    return {"nutriments": nutriments or {}, **fields}


@pytest.fixture
def settings() -> Settings:
    return Settings(api_ninjas_key="ninjas-key")


@pytest.fixture
def api_ninjas_client() -> FakeApiNinjasClient:
    return FakeApiNinjasClient()


@pytest.fixture
def open_food_facts_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def estimation_service(
    api_ninjas_client: FakeApiNinjasClient,
    open_food_facts_client: FakeOpenFoodFactsClient,
) -> EstimationService:
    return EstimationService(
        exact_match=ExactMatchProvider(client=api_ninjas_client),
        community_db=CommunityDbProvider(client=open_food_facts_client),
    )


@pytest.fixture
def container(
    settings: Settings, estimation_service: EstimationService
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        estimation_service=estimation_service,
        summary_service=SummaryService(baseline_kcal=settings.baseline_kcal),
        close_resources=close_resources,
    )
