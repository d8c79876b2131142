"""Offline nutrition estimation from the built-in reference foods."""

import math

from health_tracker.domain.nutrition import NutritionEstimate, Provenance
from health_tracker.domain.reference import (
    GENERIC_KCAL,
    GENERIC_MACROS,
    KEYWORD_HEURISTICS,
    REFERENCE_TABLE,
)
from health_tracker.services.parsing import extract_quantity


def estimate_locally(description: str) -> NutritionEstimate:
    """Estimate nutrition without network access.

    Tries the reference table first (scaled by the first standalone number in
    the text), then keyword heuristics, then a generic estimate. Never fails.
    """
    normalized = description.strip().lower()

    for entry in REFERENCE_TABLE:
        if entry.match_key in normalized:
            quantity = extract_quantity(normalized)
            factor = 1.0 if quantity is None else quantity
            if not math.isfinite(entry.kcal * factor):
                factor = 1.0
            return NutritionEstimate(
                description=description,
                kcal=entry.kcal * factor,
                macros=entry.macros.scaled(factor),
                provenance=Provenance.LOCAL_TABLE,
            )

    for keyword, kcal, macros in KEYWORD_HEURISTICS:
        if keyword in normalized:
            return NutritionEstimate(
                description=description,
                kcal=kcal,
                macros=macros,
                provenance=Provenance.LOCAL_HEURISTIC,
            )

    return NutritionEstimate(
        description=description,
        kcal=GENERIC_KCAL,
        macros=GENERIC_MACROS,
        provenance=Provenance.LOCAL_GENERIC,
    )
