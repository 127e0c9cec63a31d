import logging
from typing import List, Optional, Sequence, Union

from fitsync.models.plan import Exercise, GeneratedPlan, PlanMetadata, PlanStructure
from fitsync.models.profile import FitnessLevel, Goal, Profile
from fitsync.services.fitness_score import FitnessScoreCalculator
from fitsync.services.prescription_engine import ExercisePrescriptionEngine

logger = logging.getLogger(__name__)


class PlanStructureGenerator:
    """Decide plan length, weekly frequency and session size"""

    DEFAULT_DURATION_WEEKS = 8
    DEFAULT_WORKOUTS_PER_WEEK = 3
    DEFAULT_EXERCISES_PER_WORKOUT = 6

    # Only the highest-priority goal applies; goals are never stacked
    GOAL_OVERRIDES = {
        Goal.WEIGHT_LOSS: {
            "duration_weeks": 12,
            "workouts_per_week": 4,
        },
        Goal.MUSCLE_GAIN: {
            "duration_weeks": 16,
            "workouts_per_week": 4,
            "exercises_per_workout": 8,
        },
        Goal.ENDURANCE: {
            "duration_weeks": 10,
            "workouts_per_week": 5,
        },
    }

    HIGH_SCORE_THRESHOLD = 4.0
    HIGH_SCORE_EXTRA_WORKOUTS = 1
    HIGH_SCORE_EXTRA_EXERCISES = 2
    DAYS_PER_WEEK = 7

    def structure(self, profile: Profile, fitness_score: float) -> PlanStructure:
        """
        Generate the plan structure for a profile

        Args:
            profile: Profile snapshot
            fitness_score: Score from FitnessScoreCalculator

        Returns:
            PlanStructure with rest_days = 7 - workouts_per_week
        """
        values = {
            "duration_weeks": self.DEFAULT_DURATION_WEEKS,
            "workouts_per_week": self.DEFAULT_WORKOUTS_PER_WEEK,
            "exercises_per_workout": self.DEFAULT_EXERCISES_PER_WORKOUT,
        }

        goal = profile.primary_goal
        if goal is not None:
            values.update(self.GOAL_OVERRIDES[goal])

        if fitness_score >= self.HIGH_SCORE_THRESHOLD:
            values["workouts_per_week"] += self.HIGH_SCORE_EXTRA_WORKOUTS
            values["exercises_per_workout"] += self.HIGH_SCORE_EXTRA_EXERCISES

        workouts_per_week = max(1, min(self.DAYS_PER_WEEK, values["workouts_per_week"]))

        return PlanStructure(
            duration_weeks=values["duration_weeks"],
            workouts_per_week=workouts_per_week,
            exercises_per_workout=values["exercises_per_workout"],
            rest_days=max(0, self.DAYS_PER_WEEK - workouts_per_week),
        )


class PlanGenerator:
    """Generate personalized workout plans from a profile and exercise catalog"""

    def __init__(
        self,
        score_calculator: Optional[FitnessScoreCalculator] = None,
        structure_generator: Optional[PlanStructureGenerator] = None,
        prescription_engine: Optional[ExercisePrescriptionEngine] = None,
    ):
        self.score_calculator = score_calculator or FitnessScoreCalculator()
        self.structure_generator = structure_generator or PlanStructureGenerator()
        self.prescription_engine = prescription_engine or ExercisePrescriptionEngine()

    def generate_plan(
        self,
        profile: Profile,
        exercise_catalog: Sequence[Union[Exercise, dict]]
    ) -> GeneratedPlan:
        """
        Generate a complete plan: score, structure, metadata and prescriptions

        The first ``exercises_per_workout`` catalog entries, in catalog order,
        become the session's exercises.

        Args:
            profile: Profile snapshot
            exercise_catalog: Candidate exercises, already filtered upstream

        Returns:
            GeneratedPlan for the caller to persist
        """
        fitness_score = self.score_calculator.score(profile)
        structure = self.structure_generator.structure(profile, fitness_score)
        candidates = list(exercise_catalog)[:structure.exercises_per_workout]
        exercises = self.prescription_engine.prescribe(candidates, profile)

        plan = GeneratedPlan(
            profile_id=profile.id,
            fitness_score=fitness_score,
            metadata=self.build_metadata(profile, structure),
            structure=structure,
            exercises=exercises,
        )

        logger.info(
            f"Generated {structure.duration_weeks}-week plan for profile {profile.id}: "
            f"{structure.workouts_per_week}x/week, {len(exercises)} exercises, score={fitness_score}"
        )
        return plan

    def build_metadata(self, profile: Profile, structure: PlanStructure) -> PlanMetadata:
        """Name, description and tags for a generated plan"""
        level = (profile.fitness_level or FitnessLevel.BEGINNER).value
        goal_names = [goal.value for goal in profile.goals]
        focus = ", ".join(goal_names) if goal_names else "general fitness"
        owner = profile.name or "you"

        return PlanMetadata(
            name=f"AI Custom Plan for {owner}",
            description=f"Personalized {level} plan targeting {focus}",
            difficulty=level,
            duration_weeks=structure.duration_weeks,
            tags=self._build_tags(goal_names, level),
        )

    def _build_tags(self, goal_names: List[str], level: str) -> List[str]:
        tags = []
        for tag in goal_names + [level, "ai-generated"]:
            if tag not in tags:
                tags.append(tag)
        return tags
