"""Pydantic schemas for plan generation and adjustment API operations."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from fitsync.models.plan import Exercise, ExercisePrescription
from fitsync.models.profile import Profile
from fitsync.models.progress import AdjustmentDecision, ProgressSignal


# ============== Fitness Score Schemas ==============

class FitnessScoreResponse(BaseModel):
    """Schema for fitness score API responses."""

    profile_id: Optional[str] = Field(None, description="Profile identifier")
    score: float = Field(..., ge=0, le=5, description="Fitness score")


# ============== Plan Schemas ==============

class PlanStructureRequest(BaseModel):
    """Schema for requesting a plan structure."""

    profile: Profile = Field(..., description="Profile snapshot")
    fitness_score: Optional[float] = Field(
        None, ge=0, le=5, description="Precomputed fitness score; calculated when omitted"
    )


class PrescribeRequest(BaseModel):
    """Schema for prescribing sets/reps/rest for one session."""

    profile: Profile = Field(..., description="Profile snapshot")
    candidate_exercises: List[Exercise] = Field(
        default_factory=list, description="Exercises selected for the session"
    )


class GeneratePlanRequest(BaseModel):
    """Schema for generating a complete personalized plan."""

    profile: Profile = Field(..., description="Profile snapshot")
    exercise_catalog: List[Exercise] = Field(
        default_factory=list, description="Candidate exercises in preference order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "profile": {
                    "id": "7f9c2b1e",
                    "name": "Alex",
                    "fitness_level": "intermediate",
                    "goals": ["muscle_gain"],
                    "total_workouts": 60,
                    "streak_days": 10
                },
                "exercise_catalog": [
                    {"id": "bench-001", "name": "Bench Press", "muscle_groups": ["chest", "triceps"]},
                    {"id": "curl-001", "name": "Biceps Curl", "muscle_groups": ["biceps"]},
                    {"id": "plank-001", "name": "Plank", "muscle_groups": ["core"], "is_time_based": True}
                ]
            }
        }


# ============== Adjustment Schemas ==============

class AdjustPlanRequest(BaseModel):
    """Schema for a weekly difficulty review."""

    exercises: List[Dict[str, Any]] = Field(
        default_factory=list, description="Stored prescriptions of the plan, validated by the engine"
    )
    progress: ProgressSignal = Field(..., description="Adherence over the review window")

    class Config:
        json_schema_extra = {
            "example": {
                "exercises": [
                    {
                        "exercise_id": "bench-001",
                        "sets": 3,
                        "reps": 8,
                        "rest_seconds": 75,
                        "order_index": 1
                    }
                ],
                "progress": {
                    "workouts_completed": 9,
                    "workouts_planned": 10,
                    "average_difficulty_rating": 2
                }
            }
        }


class AdjustPlanResponse(BaseModel):
    """Schema for difficulty review responses."""

    decision: AdjustmentDecision
    adjusted: bool = Field(..., description="Whether any prescription changed")
    exercises: List[ExercisePrescription] = Field(default_factory=list)
