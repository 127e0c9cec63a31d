"""Services package for the personalization engine."""

from fitsync.services.fitness_score import FitnessScoreCalculator
from fitsync.services.plan_generator import PlanGenerator, PlanStructureGenerator
from fitsync.services.prescription_engine import ExercisePrescriptionEngine
from fitsync.services.adaptation_service import AdaptationService
from fitsync.services.nutrition_calculator import NutritionGoalCalculator
from fitsync.services.nutrition_aggregator import NutritionAggregator
from fitsync.services.meal_planner import MealPlanner

__all__ = [
    "FitnessScoreCalculator",
    "PlanGenerator",
    "PlanStructureGenerator",
    "ExercisePrescriptionEngine",
    "AdaptationService",
    "NutritionGoalCalculator",
    "NutritionAggregator",
    "MealPlanner",
]
