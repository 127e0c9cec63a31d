"""Pydantic schemas package for API request/response models."""

from fitsync.schemas.plans import (
    AdjustPlanRequest,
    AdjustPlanResponse,
    FitnessScoreResponse,
    GeneratePlanRequest,
    PlanStructureRequest,
    PrescribeRequest,
)
from fitsync.schemas.nutrition import (
    AggregateRequest,
    AggregateResponse,
    NutritionGoalResponse,
)

__all__ = [
    # Plan schemas
    "AdjustPlanRequest",
    "AdjustPlanResponse",
    "FitnessScoreResponse",
    "GeneratePlanRequest",
    "PlanStructureRequest",
    "PrescribeRequest",
    # Nutrition schemas
    "AggregateRequest",
    "AggregateResponse",
    "NutritionGoalResponse",
]
