"""Pydantic request and response models for the HTTP API."""

from typing import Annotated

from pydantic import BaseModel, Field

from health_tracker.domain.nutrition import NutritionEstimate
from health_tracker.domain.summary import (
    DailySummary,
    DayEntries,
    ExerciseEntry,
    FoodEntry,
)


class NutritionResponse(BaseModel):
    """Estimate payload returned by the nutrition endpoints."""

    kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float
    source: str

    @classmethod
    def from_estimate(cls, estimate: NutritionEstimate) -> "NutritionResponse":
        """Flatten an estimate into the wire shape."""
        return cls(
            kcal=estimate.kcal,
            protein_g=estimate.macros.protein_g,
            carbs_g=estimate.macros.carbs_g,
            fat_g=estimate.macros.fat_g,
            source=estimate.provenance.value,
        )


class FoodEntryModel(BaseModel):
    """Logged food item."""

    description: str = ""
    kcal: float = Field(ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)


class ExerciseEntryModel(BaseModel):
    """Logged exercise session."""

    activity: str = "Run"
    minutes: float = Field(ge=0)
    distance_km: float | None = Field(default=None, ge=0)
    kcal: float | None = Field(default=None, ge=0)


class SummaryRequest(BaseModel):
    """Entries for one day plus an optional baseline override."""

    food: list[FoodEntryModel] = Field(default_factory=list)
    exercise: list[ExerciseEntryModel] = Field(default_factory=list)
    water_ml: list[Annotated[int, Field(ge=0)]] = Field(default_factory=list)
    weight_kg: float | None = Field(default=None, gt=0)
    baseline_kcal: float | None = Field(default=None, ge=0)

    def to_entries(self) -> DayEntries:
        """Convert to domain entries."""
        return DayEntries(
            food=[FoodEntry(**food.model_dump()) for food in self.food],
            exercise=[
                ExerciseEntry(**session.model_dump()) for session in self.exercise
            ],
            water_ml=list(self.water_ml),
            weight_kg=self.weight_kg,
        )


class DailySummaryResponse(BaseModel):
    """Daily totals and energy balance."""

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

    @classmethod
    def from_summary(cls, summary: DailySummary) -> "DailySummaryResponse":
        """Build the response from a domain summary."""
        return cls(**vars(summary))
