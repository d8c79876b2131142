"""Daily energy balance over caller-supplied entries."""

from dataclasses import dataclass

from health_tracker.domain.summary import DailySummary, DayEntries
from health_tracker.services.parsing import round_half_up


@dataclass
class SummaryService:
    """Aggregates a day's entries into totals and a net balance."""

    baseline_kcal: float

    def summarize(
        self, entries: DayEntries, baseline_kcal: float | None = None
    ) -> DailySummary:
        """Return totals where net = food - (baseline + exercise)."""
        baseline = self.baseline_kcal if baseline_kcal is None else baseline_kcal
        food_kcal = sum(round_half_up(food.kcal) for food in entries.food)
        exercise_kcal = sum(session.kcal or 0 for session in entries.exercise)
        return DailySummary(
            food_kcal=food_kcal,
            protein_g=round_half_up(sum(food.protein_g for food in entries.food), 2),
            carbs_g=round_half_up(sum(food.carbs_g for food in entries.food), 2),
            fat_g=round_half_up(sum(food.fat_g for food in entries.food), 2),
            exercise_kcal=exercise_kcal,
            exercise_minutes=sum(session.minutes for session in entries.exercise),
            water_l=round_half_up(sum(entries.water_ml) / 1000, 2),
            weight_kg=entries.weight_kg,
            baseline_kcal=baseline,
            net_kcal=food_kcal - (baseline + exercise_kcal),
        )
