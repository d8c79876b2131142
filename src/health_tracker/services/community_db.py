"""Community product database lookup backed by Open Food Facts."""

import logging
from dataclasses import dataclass

from health_tracker.adapters.open_food_facts_client import OpenFoodFactsClient
from health_tracker.domain.nutrition import ProviderNutrients
from health_tracker.services.parsing import (
    extract_grams,
    extract_multipack_grams,
    positive_number,
    round_half_up,
    to_number,
)
from health_tracker.services.upstream import (
    UPSTREAM_ERRORS,
    status_code_from_exception,
)

DEFAULT_PORTION_G = 100.0
KJ_PER_KCAL = 4.184

_USABLE_NUTRIENT_KEYS = (
    "energy-kcal_100g",
    "energy_100g",
    "proteins_100g",
    "carbohydrates_100g",
    "fat_100g",
)

_logger = logging.getLogger(__name__)


@dataclass
class CommunityDbProvider:
    """Picks a product from a text search and scales it to an inferred portion."""

    client: OpenFoodFactsClient
    page_size: int = 5
    debug: bool = False

    async def query(self, query: str) -> ProviderNutrients | None:
        """Return portion-scaled nutrients, or None when no product is usable."""
        try:
            payload = await self.client.search_products(
                query, page_size=self.page_size
            )
        except UPSTREAM_ERRORS as exc:
            _logger.warning(
                "Community-db search failed (status=%s): %s",
                status_code_from_exception(exc),
                exc,
            )
            return None

        product = select_product(_products_from(payload))
        result = None if product is None else scale_product(query, product)
        if self.debug:
            _logger.info(
                "Community-db search: query=%s hit=%s", query, result is not None
            )
        return result


def _products_from(payload: object) -> list[dict[str, object]]:
    if not isinstance(payload, dict):
        return []
    products = payload.get("products")
    if not isinstance(products, list):
        return []
    return [product for product in products if isinstance(product, dict)]


def _nutriments(product: dict[str, object]) -> dict[str, object]:
    nutriments = product.get("nutriments")
    return nutriments if isinstance(nutriments, dict) else {}


def has_usable_nutriments(product: dict[str, object]) -> bool:
    """Return True when any recognized energy or macro field is non-zero."""
    nutriments = _nutriments(product)
    return any(to_number(nutriments.get(key)) > 0 for key in _USABLE_NUTRIENT_KEYS)


def select_product(
    products: list[dict[str, object]],
) -> dict[str, object] | None:
    """Pick the first usable product, else re-check the first one."""
    if not products:
        return None
    candidate = next(
        (product for product in products if has_usable_nutriments(product)),
        products[0],
    )
    # Only reached unusable when no product qualified.
    if not has_usable_nutriments(candidate):
        return None
    return candidate


def kcal_per_100g(nutriments: dict[str, object]) -> float:
    """Return kcal per 100 g, converting from kJ when kcal is missing."""
    kcal = to_number(nutriments.get("energy-kcal_100g"))
    if kcal > 0:
        return kcal
    kilojoules = to_number(nutriments.get("energy_100g"))
    if kilojoules > 0:
        return round_half_up(kilojoules / KJ_PER_KCAL)
    return 0.0


def infer_portion_grams(query: str, product: dict[str, object]) -> float:
    """Infer the consumed grams, first match wins.

    1. a gram amount in the query text
    2. a gram amount in the product ``serving_size``
    3. a positive ``product_quantity``
    4. the product ``quantity`` text, multipack (``3 x 60 g``) first
    5. :data:`DEFAULT_PORTION_G`

    A zero gram amount counts as no match.
    """
    grams = _positive(extract_grams(query))
    if grams is not None:
        return grams

    serving_size = product.get("serving_size")
    if isinstance(serving_size, str):
        grams = _positive(extract_grams(serving_size))
        if grams is not None:
            return grams

    grams = positive_number(product.get("product_quantity"))
    if grams is not None:
        return grams

    quantity = product.get("quantity")
    if isinstance(quantity, str):
        grams = _positive(extract_multipack_grams(quantity))
        if grams is None:
            grams = _positive(extract_grams(quantity))
        if grams is not None:
            return grams

    return DEFAULT_PORTION_G


def _positive(grams: float | None) -> float | None:
    return grams if grams is not None and grams > 0 else None


def scale_product(
    query: str, product: dict[str, object]
) -> ProviderNutrients | None:
    """Scale per-100 g values to the inferred portion."""
    nutriments = _nutriments(product)
    kcal_100g = kcal_per_100g(nutriments)
    if kcal_100g <= 0:
        return None

    carbs_100g = to_number(nutriments.get("carbohydrates_100g")) or to_number(
        nutriments.get("carbohydrates_total_g")
    )
    factor = infer_portion_grams(query, product) / 100
    return ProviderNutrients.build(
        kcal=round_half_up(kcal_100g * factor),
        protein_g=round_half_up(
            to_number(nutriments.get("proteins_100g")) * factor, 2
        ),
        carbs_g=round_half_up(carbs_100g * factor, 2),
        fat_g=round_half_up(to_number(nutriments.get("fat_100g")) * factor, 2),
    )
