"""Nutrition records: targets, food log entries and daily totals."""

from enum import Enum as PyEnum
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator


class MealType(str, PyEnum):
    """Meal a food entry was logged under."""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class NutritionGoal(BaseModel):
    """Daily nutrition targets derived from a profile snapshot."""

    calories: int = Field(..., gt=0, description="Daily calorie target (kcal)")
    protein_g: int = Field(..., ge=0, description="Protein target in grams")
    carbs_g: int = Field(..., ge=0, description="Carbohydrate target in grams")
    fat_g: int = Field(..., ge=0, description="Fat target in grams")
    fiber_g: int = Field(..., ge=0, description="Fiber target in grams")
    water_ml: int = Field(..., ge=0, description="Water target in millilitres")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "calories": 2237,
                "protein_g": 140,
                "carbs_g": 252,
                "fat_g": 75,
                "fiber_g": 31,
                "water_ml": 2450
            }
        }


class NutrientProfile(BaseModel):
    """Nutrients of a reference food, per 100 g, as returned by the food catalog."""

    name: Optional[str] = Field(None, max_length=255)
    calories_per_100g: float = Field(..., ge=0)
    protein_per_100g: float = Field(0.0, ge=0)
    carbs_per_100g: float = Field(0.0, ge=0)
    fat_per_100g: float = Field(0.0, ge=0)
    fiber_per_100g: Optional[float] = Field(None, ge=0)


class CustomFood(BaseModel):
    """Absolute nutrient values for a food with no catalog entry."""

    name: str = Field(..., min_length=1, max_length=255)
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class FoodEntry(BaseModel):
    """
    One logged food item.

    Either ``food`` plus ``quantity_grams`` (scaled from the per-100 g basis)
    or ``custom`` (taken as-is), never both.
    """

    id: Optional[str] = None
    meal_type: Optional[MealType] = None
    food: Optional[NutrientProfile] = None
    quantity_grams: Optional[float] = Field(
        None, ge=0, validate_default=True, description="Logged quantity in grams"
    )
    custom: Optional[CustomFood] = None

    @field_validator("quantity_grams")
    @classmethod
    def _require_quantity_for_food(cls, value: Optional[float], info: ValidationInfo) -> Optional[float]:
        if value is None and info.data.get("food") is not None:
            raise ValueError("a reference food needs a logged quantity")
        return value

    @model_validator(mode="after")
    def _check_source(self) -> "FoodEntry":
        if self.food is None and self.custom is None:
            raise ValueError("entry needs either a reference food or custom values")
        if self.food is not None and self.custom is not None:
            raise ValueError("entry cannot have both a reference food and custom values")
        return self


class DailyNutritionTotals(BaseModel):
    """Totals over one day's (or one meal's) food entries."""

    total_calories: int = 0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fat: float = 0.0
    entry_count: int = 0

    class Config:
        frozen = True


class NutrientProgress(BaseModel):
    """Consumed amount of one nutrient against its target."""

    consumed: float
    target: float
    remaining: float
    percent: float


class NutritionProgress(BaseModel):
    """A day's totals compared against the profile's nutrition goal."""

    calories: NutrientProgress
    protein: NutrientProgress
    carbs: NutrientProgress
    fat: NutrientProgress
