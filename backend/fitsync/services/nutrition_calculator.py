"""Daily calorie and macronutrient targets.

Energy needs follow the usual chain:

- BMR (Basal Metabolic Rate) from the Mifflin-St Jeor equation
- TDEE (Total Daily Energy Expenditure) = BMR x activity multiplier
- Calorie target = TDEE adjusted for the primary goal
- Macro split as percentages of the calorie target
"""

import logging
from typing import Dict

from fitsync.models.nutrition import NutritionGoal
from fitsync.models.profile import (
    DEFAULT_WATER_ML,
    ActivityLevel,
    BiologicalSex,
    Goal,
    Profile,
)
from fitsync.services.rounding import round_int

logger = logging.getLogger(__name__)


class NutritionGoalCalculator:
    """Compute nutrition targets from body metrics, activity and goals."""

    ACTIVITY_MULTIPLIERS = {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHT: 1.375,
        ActivityLevel.MODERATE: 1.55,
        ActivityLevel.ACTIVE: 1.725,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
    DEFAULT_ACTIVITY_MULTIPLIER = 1.55

    # Calorie multipliers applied to TDEE; weight loss wins over muscle gain
    GOAL_CALORIE_FACTORS = {
        Goal.WEIGHT_LOSS: 0.85,   # 15% deficit
        Goal.MUSCLE_GAIN: 1.15,   # 15% surplus
    }

    # (protein, carbs, fat) as fractions of calories
    DEFAULT_MACRO_SPLIT = (0.25, 0.45, 0.30)
    GOAL_MACRO_SPLITS = {
        Goal.MUSCLE_GAIN: (0.30, 0.45, 0.25),
        Goal.WEIGHT_LOSS: (0.35, 0.35, 0.30),
    }

    KCAL_PER_GRAM_PROTEIN = 4
    KCAL_PER_GRAM_CARBS = 4
    KCAL_PER_GRAM_FAT = 9

    FIBER_G_PER_KCAL = 0.014  # 14 g per 1000 kcal
    WATER_ML_PER_KG = 35
    MIN_CALORIES = 1.0

    def goals(self, profile: Profile) -> NutritionGoal:
        """
        Calculate daily nutrition targets for a profile.

        Intermediate values are kept unrounded; every reported target is
        rounded (halves up) only at the end.

        Args:
            profile: Profile snapshot; missing fields fall back to defaults

        Returns:
            NutritionGoal with integer targets
        """
        tdee = self.calculate_tdee(profile)
        goal = self._nutrition_goal(profile)
        calories = tdee * self.GOAL_CALORIE_FACTORS.get(goal, 1.0)
        # Implausible biometrics can drive the equation below zero
        calories = max(calories, self.MIN_CALORIES)
        macros = self.calculate_macro_distribution(calories, goal)

        if profile.weight_kg is not None:
            water_ml = round_int(profile.weight_kg * self.WATER_ML_PER_KG)
        else:
            water_ml = DEFAULT_WATER_ML

        result = NutritionGoal(
            calories=round_int(calories),
            protein_g=round_int(macros["protein"]),
            carbs_g=round_int(macros["carbs"]),
            fat_g=round_int(macros["fat"]),
            fiber_g=round_int(calories * self.FIBER_G_PER_KCAL),
            water_ml=water_ml,
        )
        logger.debug(f"Nutrition goal for profile {profile.id}: {result}")
        return result

    def calculate_bmr(self, profile: Profile) -> float:
        """
        Calculate Basal Metabolic Rate with the Mifflin-St Jeor equation.

        male:         10 x weight + 6.25 x height - 5 x age + 5
        female/other: 10 x weight + 6.25 x height - 5 x age - 161
        """
        weight = profile.resolved_weight_kg
        height = profile.resolved_height_cm
        age = profile.resolved_age
        base = 10 * weight + 6.25 * height - 5 * age

        if profile.resolved_sex == BiologicalSex.MALE:
            return base + 5
        return base - 161

    def get_activity_multiplier(self, profile: Profile) -> float:
        return self.ACTIVITY_MULTIPLIERS.get(profile.activity_level, self.DEFAULT_ACTIVITY_MULTIPLIER)

    def calculate_tdee(self, profile: Profile) -> float:
        """Total Daily Energy Expenditure: BMR scaled by activity."""
        return self.calculate_bmr(profile) * self.get_activity_multiplier(profile)

    def calculate_macro_distribution(self, calories: float, goal) -> Dict[str, float]:
        """Split calories into grams of protein, carbs and fat (unrounded)."""
        protein_pct, carbs_pct, fat_pct = self.GOAL_MACRO_SPLITS.get(goal, self.DEFAULT_MACRO_SPLIT)
        return {
            "protein": calories * protein_pct / self.KCAL_PER_GRAM_PROTEIN,
            "carbs": calories * carbs_pct / self.KCAL_PER_GRAM_CARBS,
            "fat": calories * fat_pct / self.KCAL_PER_GRAM_FAT,
        }

    def _nutrition_goal(self, profile: Profile):
        # Endurance and general goals have no nutrition-specific rule
        for goal in (Goal.WEIGHT_LOSS, Goal.MUSCLE_GAIN):
            if goal in profile.goals:
                return goal
        return None
