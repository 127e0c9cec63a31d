"""FastAPI dependency providers for the engine services.

Every request gets fresh, stateless service instances; nothing is shared
between calls.
"""

from fastapi import Depends

from fitsync.services.adaptation_service import AdaptationService
from fitsync.services.fitness_score import FitnessScoreCalculator
from fitsync.services.meal_planner import MealPlanner
from fitsync.services.nutrition_aggregator import NutritionAggregator
from fitsync.services.nutrition_calculator import NutritionGoalCalculator
from fitsync.services.plan_generator import PlanGenerator, PlanStructureGenerator
from fitsync.services.prescription_engine import ExercisePrescriptionEngine


def get_score_calculator() -> FitnessScoreCalculator:
    return FitnessScoreCalculator()


def get_structure_generator() -> PlanStructureGenerator:
    return PlanStructureGenerator()


def get_prescription_engine() -> ExercisePrescriptionEngine:
    return ExercisePrescriptionEngine()


def get_plan_generator(
    score_calculator: FitnessScoreCalculator = Depends(get_score_calculator),
    structure_generator: PlanStructureGenerator = Depends(get_structure_generator),
    prescription_engine: ExercisePrescriptionEngine = Depends(get_prescription_engine),
) -> PlanGenerator:
    return PlanGenerator(
        score_calculator=score_calculator,
        structure_generator=structure_generator,
        prescription_engine=prescription_engine,
    )


def get_adaptation_service() -> AdaptationService:
    return AdaptationService()


def get_goal_calculator() -> NutritionGoalCalculator:
    return NutritionGoalCalculator()


def get_nutrition_aggregator() -> NutritionAggregator:
    return NutritionAggregator()


def get_meal_planner() -> MealPlanner:
    return MealPlanner()
