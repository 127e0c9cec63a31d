"""Workout plan records produced by the plan generator."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Exercise(BaseModel):
    """Candidate exercise as supplied by the exercise catalog."""

    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., min_length=1, max_length=255, description="Exercise name")
    muscle_groups: List[str] = Field(default_factory=list, description="Targeted muscle groups")
    is_time_based: bool = Field(False, description="Held for time instead of counted in reps")

    @field_validator("muscle_groups")
    @classmethod
    def _normalize_muscle_groups(cls, value: List[str]) -> List[str]:
        return [group.strip().lower() for group in value if group and group.strip()]


class PlanStructure(BaseModel):
    """Weekly shape of a plan. Recomputed on demand, never patched."""

    duration_weeks: int = Field(..., ge=1, description="Plan length in weeks")
    workouts_per_week: int = Field(..., ge=1, le=7, description="Sessions per week")
    exercises_per_workout: int = Field(..., ge=1, description="Exercises per session")
    rest_days: int = Field(..., ge=0, le=6, description="Days without a session")

    class Config:
        frozen = True


class ExercisePrescription(BaseModel):
    """Sets, reps and rest assigned to one exercise slot in a plan."""

    exercise_id: str = Field(..., description="Catalog identifier of the exercise")
    exercise_name: Optional[str] = Field(None, description="Exercise name for display")
    sets: int = Field(..., ge=1, description="Number of sets")
    reps: Optional[int] = Field(None, ge=1, description="Reps per set, None for time-based exercises")
    rest_seconds: int = Field(..., ge=30, description="Rest between sets in seconds")
    order_index: int = Field(..., ge=1, description="1-based position within the session")
    notes: str = Field("", description="Generated form guidance, display only")

    class Config:
        json_schema_extra = {
            "example": {
                "exercise_id": "squat-001",
                "exercise_name": "Goblet Squat",
                "sets": 2,
                "reps": 6,
                "rest_seconds": 90,
                "order_index": 1,
                "notes": "Customized for beginner level. Focus on proper form over speed. Start with bodyweight if needed."
            }
        }


class PlanMetadata(BaseModel):
    """Descriptive fields stored alongside a generated plan."""

    name: str
    description: str
    difficulty: str
    duration_weeks: int = Field(..., ge=1)
    tags: List[str] = Field(default_factory=list)
    is_ai_generated: bool = True


class GeneratedPlan(BaseModel):
    """A freshly generated plan, ready for the caller to persist."""

    profile_id: Optional[str] = None
    fitness_score: float = Field(..., ge=0, le=5)
    metadata: PlanMetadata
    structure: PlanStructure
    exercises: List[ExercisePrescription] = Field(default_factory=list)
