"""Pydantic schemas for nutrition API operations."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from fitsync.models.nutrition import (
    DailyNutritionTotals,
    FoodEntry,
    MealType,
    NutritionGoal,
    NutritionProgress,
)
from fitsync.models.profile import Profile


class AggregateRequest(BaseModel):
    """Schema for aggregating one day's food log."""

    entries: List[FoodEntry] = Field(default_factory=list, description="The day's food entries")
    profile: Optional[Profile] = Field(
        None, description="When given, totals are compared against the profile's goal"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "entries": [
                    {
                        "meal_type": "breakfast",
                        "food": {
                            "name": "Banana",
                            "calories_per_100g": 89,
                            "protein_per_100g": 1.1,
                            "carbs_per_100g": 22.8,
                            "fat_per_100g": 0.3
                        },
                        "quantity_grams": 150
                    },
                    {
                        "meal_type": "snack",
                        "custom": {"name": "Homemade bar", "calories": 210, "protein": 8, "carbs": 24, "fat": 9}
                    }
                ]
            }
        }


class AggregateResponse(BaseModel):
    """Schema for daily nutrition totals responses."""

    totals: DailyNutritionTotals
    meals: Dict[MealType, DailyNutritionTotals] = Field(default_factory=dict)
    goal: Optional[NutritionGoal] = None
    progress: Optional[NutritionProgress] = None


class NutritionGoalResponse(BaseModel):
    """Schema for nutrition goal responses."""

    profile_id: Optional[str] = None
    goal: NutritionGoal
