"""Split a daily calorie target across meals."""

from typing import Dict, List

from pydantic import BaseModel, Field

from fitsync.models.nutrition import MealType, NutritionGoal
from fitsync.services.rounding import round_int


class MealSuggestion(BaseModel):
    """Calorie budget and example dishes for one meal."""

    meal_type: MealType
    target_calories: int = Field(..., ge=0)
    suggestions: List[str] = Field(default_factory=list)


class MealPlan(BaseModel):
    """Per-meal budgets that add up to the daily target.

    Each meal gets its rounded share; the last meal takes the rounding
    remainder.
    """

    daily_calories: int
    meals: List[MealSuggestion]


class MealPlanner:
    """Distribute a nutrition goal's calories over the day's meals."""

    CALORIE_SHARES = {
        MealType.BREAKFAST: 0.25,
        MealType.LUNCH: 0.35,
        MealType.DINNER: 0.30,
        MealType.SNACK: 0.10,
    }

    SUGGESTIONS: Dict[MealType, List[str]] = {
        MealType.BREAKFAST: [
            "Oatmeal with berries and nuts",
            "Greek yogurt with granola",
            "Scrambled eggs with whole grain toast",
        ],
        MealType.LUNCH: [
            "Grilled chicken salad",
            "Quinoa bowl with vegetables",
            "Turkey and avocado wrap",
        ],
        MealType.DINNER: [
            "Baked salmon with sweet potato",
            "Lean beef stir-fry with brown rice",
            "Lentil curry with naan",
        ],
        MealType.SNACK: [
            "Apple with almond butter",
            "Protein smoothie",
            "Mixed nuts and dried fruit",
        ],
    }

    def plan(self, goal: NutritionGoal) -> MealPlan:
        """Build the meal plan for a nutrition goal, meals in eating order."""
        meal_types = list(self.CALORIE_SHARES)
        budgets = [round_int(goal.calories * self.CALORIE_SHARES[meal_type]) for meal_type in meal_types[:-1]]
        budgets.append(max(0, goal.calories - sum(budgets)))

        meals = [
            MealSuggestion(
                meal_type=meal_type,
                target_calories=budget,
                suggestions=list(self.SUGGESTIONS[meal_type]),
            )
            for meal_type, budget in zip(meal_types, budgets)
        ]
        return MealPlan(daily_calories=goal.calories, meals=meals)
