"""Nutrition domain models."""

import math
from dataclasses import dataclass
from enum import StrEnum


class Provenance(StrEnum):
    """Source that produced a nutrition estimate."""

    LOCAL_TABLE = "local-table"
    LOCAL_HEURISTIC = "local-heuristic"
    LOCAL_GENERIC = "local-generic"
    EXACT_MATCH_API = "exact-match-api"
    COMMUNITY_DB = "community-db"
    NONE = "none"


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient grams for a food item."""

    protein_g: float
    carbs_g: float
    fat_g: float

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a quantity factor."""
        return MacroProfile(
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
        )


ZERO_MACROS = MacroProfile(protein_g=0.0, carbs_g=0.0, fat_g=0.0)


@dataclass(frozen=True)
class FoodReferenceEntry:
    """Canonical food with known values per reference unit."""

    match_key: str
    kcal: float
    macros: MacroProfile
    unit_label: str


@dataclass(frozen=True)
class ProviderNutrients:
    """Totals returned by an upstream provider.

    Only built through :meth:`build`, which refuses non-positive energy so
    zero placeholders from noisy upstream data never pass as a result.
    """

    kcal: float
    macros: MacroProfile

    @classmethod
    def build(
        cls, kcal: float, protein_g: float, carbs_g: float, fat_g: float
    ) -> "ProviderNutrients | None":
        """Return nutrients, or None unless kcal is positive and all are finite."""
        values = (kcal, protein_g, carbs_g, fat_g)
        if kcal <= 0 or not all(math.isfinite(value) for value in values):
            return None
        return cls(
            kcal=kcal,
            macros=MacroProfile(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g),
        )


@dataclass(frozen=True)
class NutritionEstimate:
    """Estimate for a free-text food description."""

    description: str
    kcal: float
    macros: MacroProfile
    provenance: Provenance

    @classmethod
    def from_provider(
        cls, description: str, nutrients: ProviderNutrients, provenance: Provenance
    ) -> "NutritionEstimate":
        """Tag provider nutrients with their source."""
        return cls(
            description=description,
            kcal=nutrients.kcal,
            macros=nutrients.macros,
            provenance=provenance,
        )

    @classmethod
    def empty(cls, description: str) -> "NutritionEstimate":
        """Return the zeroed result reported when no source had data."""
        return cls(
            description=description,
            kcal=0.0,
            macros=ZERO_MACROS,
            provenance=Provenance.NONE,
        )
