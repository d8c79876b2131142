"""Domain models for daily summaries."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FoodEntry:
    """Logged food with its estimated energy and macros."""

    description: str
    kcal: float
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0


@dataclass(frozen=True)
class ExerciseEntry:
    """Logged exercise session."""

    activity: str
    minutes: float
    distance_km: float | None = None
    kcal: float | None = None


@dataclass(frozen=True)
class DayEntries:
    """Everything a caller logged for one day."""

    food: list[FoodEntry] = field(default_factory=list)
    exercise: list[ExerciseEntry] = field(default_factory=list)
    water_ml: list[int] = field(default_factory=list)
    weight_kg: float | None = None


@dataclass(frozen=True)
class DailySummary:
    """Aggregated totals and energy balance for one day."""

    food_kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float
    exercise_kcal: float
    exercise_minutes: float
    water_l: float
    weight_kg: float | None
    baseline_kcal: float
    net_kcal: float
