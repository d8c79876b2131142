"""Nutrition estimation across upstream providers."""

from dataclasses import dataclass

from health_tracker.domain.nutrition import NutritionEstimate, Provenance
from health_tracker.services.community_db import CommunityDbProvider
from health_tracker.services.exact_match import ExactMatchProvider


@dataclass
class EstimationService:
    """Tries the exact-match API, then the community database.

    Providers are queried one after another and the second is skipped once
    the first returns data. When neither has data the result is zeroed and
    tagged ``none``; falling back to local estimation is left to callers.
    """

    exact_match: ExactMatchProvider
    community_db: CommunityDbProvider

    async def estimate(self, query: str, api_key: str | None) -> NutritionEstimate:
        """Return the highest-priority estimate available for the query."""
        exact = await self.exact_match.query(query, api_key)
        if exact is not None:
            return NutritionEstimate.from_provider(
                query, exact, Provenance.EXACT_MATCH_API
            )

        community = await self.community_db.query(query)
        if community is not None:
            return NutritionEstimate.from_provider(
                query, community, Provenance.COMMUNITY_DB
            )

        return NutritionEstimate.empty(query)
