"""Profile snapshot consumed by every calculator in the engine."""

import math
from enum import Enum as PyEnum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

# Defaults substituted when a profile field is missing or out of range
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_AGE = 30
DEFAULT_WATER_ML = 2500


class FitnessLevel(str, PyEnum):
    """Self-reported training experience."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Goal(str, PyEnum):
    """Training goals a user can select."""
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    ENDURANCE = "endurance"
    GENERAL = "general"


class ActivityLevel(str, PyEnum):
    """Daily activity outside of planned workouts."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class BiologicalSex(str, PyEnum):
    """Only used as a parameter of the BMR equation."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


DEFAULT_SEX = BiologicalSex.FEMALE

# First goal in this order that the profile holds decides goal-specific rules
GOAL_PRIORITY = (Goal.WEIGHT_LOSS, Goal.MUSCLE_GAIN, Goal.ENDURANCE)


def _enum_or_none(enum_cls, value: Any):
    """Map a raw value onto ``enum_cls``, returning None when it is unknown."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


class Profile(BaseModel):
    """
    Read-only snapshot of the attributes the engine needs.

    Unknown enum strings resolve to None rather than failing, so each
    calculator can substitute its own documented default. Non-positive body
    metrics are treated as missing and negative counters as zero.
    """

    id: Optional[str] = Field(None, description="Profile identifier")
    name: Optional[str] = Field(None, max_length=255, description="Display name")

    # Biometrics
    weight_kg: Optional[float] = Field(None, description="Body weight in kg")
    height_cm: Optional[float] = Field(None, description="Height in cm")
    age: Optional[int] = Field(None, description="Age in years")
    sex: Optional[BiologicalSex] = Field(None, description="Biological sex for the BMR formula")

    # Training profile
    fitness_level: Optional[FitnessLevel] = Field(None, description="Training experience")
    goals: List[Goal] = Field(default_factory=list, description="Selected goals")
    activity_level: Optional[ActivityLevel] = Field(None, description="Daily activity level")

    # Cumulative counters
    total_workouts: int = Field(0, description="Completed workouts to date")
    streak_days: int = Field(0, description="Current streak in days")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "7f9c2b1e",
                "name": "Alex",
                "weight_kg": 70,
                "height_cm": 170,
                "age": 30,
                "sex": "female",
                "fitness_level": "beginner",
                "goals": ["weight_loss"],
                "activity_level": "moderate",
                "total_workouts": 12,
                "streak_days": 3
            }
        }

    @field_validator("fitness_level", mode="before")
    @classmethod
    def _resolve_fitness_level(cls, value: Any) -> Optional[FitnessLevel]:
        return _enum_or_none(FitnessLevel, value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _resolve_activity_level(cls, value: Any) -> Optional[ActivityLevel]:
        return _enum_or_none(ActivityLevel, value)

    @field_validator("sex", mode="before")
    @classmethod
    def _resolve_sex(cls, value: Any) -> Optional[BiologicalSex]:
        return _enum_or_none(BiologicalSex, value)

    @field_validator("goals", mode="before")
    @classmethod
    def _resolve_goals(cls, value: Any) -> List[Goal]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        goals: List[Goal] = []
        for raw in value:
            goal = _enum_or_none(Goal, raw)
            if goal is not None and goal not in goals:
                goals.append(goal)
        return goals

    @field_validator("weight_kg", "height_cm", "age", mode="before")
    @classmethod
    def _drop_non_positive(cls, value: Any) -> Any:
        if value is None:
            return None
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
        return value if math.isfinite(number) and number > 0 else None

    @field_validator("total_workouts", "streak_days", mode="before")
    @classmethod
    def _clamp_counter(cls, value: Any) -> int:
        if value is None:
            return 0
        try:
            return max(0, int(value))
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"expected a whole number, got {value!r}") from e

    @property
    def resolved_weight_kg(self) -> float:
        return self.weight_kg if self.weight_kg is not None else DEFAULT_WEIGHT_KG

    @property
    def resolved_height_cm(self) -> float:
        return self.height_cm if self.height_cm is not None else DEFAULT_HEIGHT_CM

    @property
    def resolved_age(self) -> int:
        return self.age if self.age is not None else DEFAULT_AGE

    @property
    def resolved_sex(self) -> BiologicalSex:
        return self.sex if self.sex is not None else DEFAULT_SEX

    @property
    def primary_goal(self) -> Optional[Goal]:
        """The goal that drives goal-specific rules, or None for general fitness."""
        for goal in GOAL_PRIORITY:
            if goal in self.goals:
                return goal
        return None
