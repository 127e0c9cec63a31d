"""Bounded fitness score from training level and history."""

import logging

from fitsync.models.profile import FitnessLevel, Profile

logger = logging.getLogger(__name__)


class FitnessScoreCalculator:
    """Map a profile onto a score between 1.0 and 5.0."""

    LEVEL_BASE_SCORE = {
        FitnessLevel.BEGINNER: 1.0,
        FitnessLevel.INTERMEDIATE: 2.0,
        FitnessLevel.ADVANCED: 3.0,
    }
    DEFAULT_BASE_SCORE = 1.0
    MAX_SCORE = 5.0

    # (threshold, bonus) pairs; a bonus applies when the counter exceeds the threshold
    WORKOUT_BONUSES = ((50, 1.0), (100, 1.0))
    STREAK_BONUSES = ((7, 0.5), (30, 0.5))

    def score(self, profile: Profile) -> float:
        """
        Calculate the fitness score for a profile.

        Level sets the base, workout history and streak add bonuses, and the
        result is capped at 5.0. The lowest reachable value is the beginner
        base of 1.0.

        Args:
            profile: Profile snapshot

        Returns:
            Score in [1.0, 5.0]
        """
        score = self.LEVEL_BASE_SCORE.get(profile.fitness_level, self.DEFAULT_BASE_SCORE)

        for threshold, bonus in self.WORKOUT_BONUSES:
            if profile.total_workouts > threshold:
                score += bonus

        for threshold, bonus in self.STREAK_BONUSES:
            if profile.streak_days > threshold:
                score += bonus

        score = min(score, self.MAX_SCORE)
        logger.debug(
            f"Fitness score {score} for profile {profile.id} "
            f"(level={profile.fitness_level}, workouts={profile.total_workouts}, streak={profile.streak_days})"
        )
        return score
