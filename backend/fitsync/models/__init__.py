"""Domain records consumed and produced by the personalization engine."""

from fitsync.models.profile import (
    ActivityLevel,
    BiologicalSex,
    FitnessLevel,
    Goal,
    Profile,
)
from fitsync.models.plan import (
    Exercise,
    ExercisePrescription,
    GeneratedPlan,
    PlanMetadata,
    PlanStructure,
)
from fitsync.models.nutrition import (
    CustomFood,
    DailyNutritionTotals,
    FoodEntry,
    MealType,
    NutrientProfile,
    NutritionGoal,
    NutritionProgress,
)
from fitsync.models.progress import AdjustmentDecision, AdjustmentType, ProgressSignal

__all__ = [
    "ActivityLevel",
    "BiologicalSex",
    "FitnessLevel",
    "Goal",
    "Profile",
    "Exercise",
    "ExercisePrescription",
    "GeneratedPlan",
    "PlanMetadata",
    "PlanStructure",
    "CustomFood",
    "DailyNutritionTotals",
    "FoodEntry",
    "MealType",
    "NutrientProfile",
    "NutritionGoal",
    "NutritionProgress",
    "AdjustmentDecision",
    "AdjustmentType",
    "ProgressSignal",
]
