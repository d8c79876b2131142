"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from health_tracker.adapters.api_ninjas_client import HttpxApiNinjasClient
from health_tracker.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from health_tracker.services.community_db import CommunityDbProvider
from health_tracker.services.exact_match import ExactMatchProvider


def test_api_ninjas_client_sends_key_and_user_agent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"calories": 105}])

    client = HttpxApiNinjasClient(
        base_url="https://ninjas.test/v1/nutrition",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    payload = asyncio.run(client.fetch_nutrition("1 banana", "secret"))

    assert payload == [{"calories": 105}]
    request = seen[0]
    assert request.method == "GET"
    assert request.url.params["query"] == "1 banana"
    assert request.headers["X-Api-Key"] == "secret"
    assert request.headers["User-Agent"] == "HealthTracker/test"


def test_api_ninjas_client_raises_for_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(502))
    client = HttpxApiNinjasClient(
        base_url="https://ninjas.test/v1/nutrition",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_nutrition("banana", "secret"))


def test_exact_match_without_key_issues_no_requests() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    client = HttpxApiNinjasClient(
        base_url="https://ninjas.test/v1/nutrition",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    result = asyncio.run(ExactMatchProvider(client=client).query("banana", None))

    assert result is None
    assert seen == []


def test_exact_match_treats_unparseable_body_as_absent() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(200, content=b"<html>oops</html>")
    )
    client = HttpxApiNinjasClient(
        base_url="https://ninjas.test/v1/nutrition",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=transport),
    )

    result = asyncio.run(ExactMatchProvider(client=client).query("banana", "key"))

    assert result is None


def test_open_food_facts_client_search_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"products": []})

    client = HttpxOpenFoodFactsClient(
        search_url="https://off.test/cgi/search.pl",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    payload = asyncio.run(client.search_products("oat milk", page_size=5))

    assert payload == {"products": []}
    params = seen[0].url.params
    assert params["search_terms"] == "oat milk"
    assert params["search_simple"] == "1"
    assert params["action"] == "process"
    assert params["json"] == "1"
    assert params["page_size"] == "5"
    assert seen[0].headers["User-Agent"] == "HealthTracker/test"


def test_community_db_over_http_scales_product() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "products": [
                    {"product_name": "Water", "nutriments": {}},
                    {
                        "product_name": "Oat drink",
                        "nutriments": {"energy_100g": 192, "carbohydrates_100g": 6.6},
                        "quantity": "1 L",
                        "serving_size": "250 ml",
                    },
                ]
            },
        )

    client = HttpxOpenFoodFactsClient(
        search_url="https://off.test/cgi/search.pl",
        user_agent="HealthTracker/test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    result = asyncio.run(CommunityDbProvider(client=client).query("oat milk"))

    assert result is not None
    assert result.kcal == 46
    assert result.macros.carbs_g == 6.6
