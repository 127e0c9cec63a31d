"""Sets, reps and rest for each exercise in a session."""

import logging
from typing import Iterable, List, Optional, Union

from fitsync.exceptions import coerce_record
from fitsync.models.plan import Exercise, ExercisePrescription
from fitsync.models.profile import FitnessLevel, Profile
from fitsync.services.rounding import round_int

logger = logging.getLogger(__name__)


class ExercisePrescriptionEngine:
    """Assign level-appropriate volume and rest to candidate exercises"""

    SETS = {
        FitnessLevel.BEGINNER: 2,
        FitnessLevel.INTERMEDIATE: 3,
        FitnessLevel.ADVANCED: 4,
    }
    DEFAULT_SETS = 3

    REST_SECONDS = {
        FitnessLevel.BEGINNER: 90,
        FitnessLevel.INTERMEDIATE: 75,
        FitnessLevel.ADVANCED: 60,
    }
    DEFAULT_REST_SECONDS = 75

    REP_MULTIPLIERS = {
        FitnessLevel.BEGINNER: 0.8,
        FitnessLevel.INTERMEDIATE: 1.0,
        FitnessLevel.ADVANCED: 1.2,
    }
    DEFAULT_REP_MULTIPLIER = 1.0

    # Exercises hitting any of these groups are programmed as strength work
    COMPOUND_MUSCLE_GROUPS = frozenset({"chest", "back", "legs", "shoulders"})
    COMPOUND_BASE_REPS = 8
    ISOLATION_BASE_REPS = 12

    def prescribe(
        self,
        candidate_exercises: Iterable[Union[Exercise, dict]],
        profile: Profile
    ) -> List[ExercisePrescription]:
        """
        Build one prescription per candidate exercise, in input order.

        Selecting and truncating candidates to the session size is the
        caller's job; an empty candidate list yields an empty prescription.

        Args:
            candidate_exercises: Exercises (or their catalog dicts) for one session
            profile: Profile snapshot

        Returns:
            Prescriptions with order_index 1..n

        Raises:
            EngineValidationError: If a candidate record is malformed
        """
        level = profile.fitness_level
        prescriptions = []

        for index, candidate in enumerate(candidate_exercises):
            exercise = coerce_record(Exercise, candidate, f"candidate_exercises[{index}]")
            prescriptions.append(ExercisePrescription(
                exercise_id=exercise.id,
                exercise_name=exercise.name,
                sets=self.calculate_sets(level),
                reps=None if exercise.is_time_based else self.calculate_reps(exercise.muscle_groups, level),
                rest_seconds=self.calculate_rest(level),
                order_index=index + 1,
                notes=self.generate_notes(level),
            ))

        logger.debug(f"Prescribed {len(prescriptions)} exercises for level {level}")
        return prescriptions

    def calculate_sets(self, level: Optional[FitnessLevel]) -> int:
        """Sets per exercise for a fitness level."""
        return self.SETS.get(level, self.DEFAULT_SETS)

    def calculate_rest(self, level: Optional[FitnessLevel]) -> int:
        """Rest between sets in seconds for a fitness level."""
        return self.REST_SECONDS.get(level, self.DEFAULT_REST_SECONDS)

    def calculate_reps(self, muscle_groups: Iterable[str], level: Optional[FitnessLevel]) -> int:
        """
        Reps per set.

        Compound/strength exercises start from 8 reps, isolation/endurance
        exercises from 12; the base is scaled by the level multiplier.
        """
        groups = {group.lower() for group in muscle_groups}
        is_compound = bool(groups & self.COMPOUND_MUSCLE_GROUPS)
        base_reps = self.COMPOUND_BASE_REPS if is_compound else self.ISOLATION_BASE_REPS
        multiplier = self.REP_MULTIPLIERS.get(level, self.DEFAULT_REP_MULTIPLIER)
        return max(1, round_int(base_reps * multiplier))

    def generate_notes(self, level: Optional[FitnessLevel]) -> str:
        """Form guidance shown next to the exercise."""
        level = level or FitnessLevel.BEGINNER
        notes = [
            f"Customized for {level.value} level",
            "Focus on proper form over speed",
        ]
        if level == FitnessLevel.BEGINNER:
            notes.append("Start with bodyweight if needed")
        elif level == FitnessLevel.ADVANCED:
            notes.append("Consider adding progressive overload")
        return ". ".join(notes) + "."
