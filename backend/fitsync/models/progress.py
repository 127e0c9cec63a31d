"""Progress signals and the difficulty decisions derived from them."""

from enum import Enum as PyEnum
from typing import Optional

from pydantic import BaseModel, Field


class AdjustmentType(str, PyEnum):
    """Outcome of a difficulty review."""
    INCREASE = "increase"
    DECREASE = "decrease"
    MAINTAIN = "maintain"


class ProgressSignal(BaseModel):
    """
    Training adherence over one review window.

    Counts are not range-checked here: the adjuster clamps them, since a
    misbehaving tracker should not block the weekly review.
    """

    workouts_completed: int = Field(0, description="Sessions completed in the window")
    workouts_planned: int = Field(0, description="Sessions planned in the window")
    average_difficulty_rating: Optional[float] = Field(
        None, description="Mean perceived difficulty, 1 (easy) to 5 (hard)"
    )


class AdjustmentDecision(BaseModel):
    """Deltas to apply to every prescription of a plan."""

    type: AdjustmentType
    sets_change: int = 0
    reps_change: int = 0
    rest_change: int = 0
    consistency: float = Field(..., ge=0)
    difficulty_rating: float
    rationale: str

    class Config:
        frozen = True

    @property
    def should_adjust(self) -> bool:
        return self.type != AdjustmentType.MAINTAIN
