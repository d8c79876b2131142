"""Exact-match nutrition lookup backed by API Ninjas."""

import logging
from dataclasses import dataclass

from health_tracker.adapters.api_ninjas_client import ApiNinjasClient
from health_tracker.domain.nutrition import ProviderNutrients
from health_tracker.services.parsing import to_number
from health_tracker.services.upstream import (
    UPSTREAM_ERRORS,
    status_code_from_exception,
)

_logger = logging.getLogger(__name__)


@dataclass
class ExactMatchProvider:
    """Sums matched items from the exact-match API into one result."""

    client: ApiNinjasClient
    debug: bool = False

    async def query(
        self, query: str, api_key: str | None
    ) -> ProviderNutrients | None:
        """Return summed nutrients, or None when the source has nothing usable."""
        if not api_key:
            _logger.debug("Exact-match lookup skipped: no API key configured")
            return None

        try:
            payload = await self.client.fetch_nutrition(query, api_key)
        except UPSTREAM_ERRORS as exc:
            _logger.warning(
                "Exact-match lookup failed (status=%s): %s",
                status_code_from_exception(exc),
                exc,
            )
            return None

        result = sum_matched_items(payload)
        if self.debug:
            _logger.info(
                "Exact-match lookup: query=%s hit=%s", query, result is not None
            )
        return result


def sum_matched_items(payload: object) -> ProviderNutrients | None:
    """Sum calories and macros across every matched item."""
    if not isinstance(payload, list) or not payload:
        return None

    kcal = protein_g = carbs_g = fat_g = 0.0
    for item in payload:
        if not isinstance(item, dict):
            continue
        kcal += to_number(item.get("calories"))
        protein_g += to_number(item.get("protein_g"))
        carbs_g += to_number(item.get("carbohydrates_total_g"))
        fat_g += to_number(item.get("fat_total_g"))

    return ProviderNutrients.build(
        kcal=kcal, protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g
    )
