import logging
from typing import Iterable, List, Union

from pydantic import BaseModel, Field

from fitsync.exceptions import coerce_record
from fitsync.models.plan import ExercisePrescription
from fitsync.models.progress import AdjustmentDecision, AdjustmentType, ProgressSignal

logger = logging.getLogger(__name__)


class AdaptationResult(BaseModel):
    """Decision plus the prescriptions it produced."""

    decision: AdjustmentDecision
    adjusted: bool
    exercises: List[ExercisePrescription] = Field(default_factory=list)


class AdaptationService:
    """Adapt plan difficulty based on adherence and perceived effort"""

    # Thresholds for adaptation triggers
    INCREASE_MIN_CONSISTENCY = 0.9
    INCREASE_MAX_DIFFICULTY = 3    # strictly below
    DECREASE_MAX_CONSISTENCY = 0.6
    DECREASE_MIN_DIFFICULTY = 4    # strictly above

    DEFAULT_DIFFICULTY_RATING = 3.0
    MIN_DIFFICULTY_RATING = 1.0
    MAX_DIFFICULTY_RATING = 5.0

    # (sets, reps, rest seconds) deltas per decision
    INCREASE_DELTAS = (1, 2, -15)
    DECREASE_DELTAS = (-1, -2, 15)

    # Floors applied after every adjustment
    MIN_SETS = 1
    MIN_REPS = 1
    MIN_REST_SECONDS = 30

    RATIONALES = {
        AdjustmentType.INCREASE: "Great progress! Increasing intensity to challenge you more.",
        AdjustmentType.DECREASE: "Adjusting plan for better sustainability and consistency.",
        AdjustmentType.MAINTAIN: "Current plan difficulty is optimal for your progress.",
    }

    def calculate_consistency(self, signal: ProgressSignal) -> float:
        """
        Completed / planned sessions for the review window.

        Negative counts are clamped to zero and an empty window counts as
        zero consistency.
        """
        completed = max(0, signal.workouts_completed)
        planned = max(0, signal.workouts_planned)
        if planned == 0:
            return 0.0
        return completed / planned

    def resolve_difficulty(self, signal: ProgressSignal) -> float:
        """Average difficulty rating clamped to 1-5, defaulting to 3"""
        rating = signal.average_difficulty_rating
        if rating is None:
            return self.DEFAULT_DIFFICULTY_RATING
        return min(self.MAX_DIFFICULTY_RATING, max(self.MIN_DIFFICULTY_RATING, rating))

    def analyze_progress(self, signal: ProgressSignal) -> AdjustmentDecision:
        """
        Decide whether to increase, decrease or maintain difficulty

        Rules, checked in order:
        - consistency >= 0.9 and rating < 3: increase (+1 set, +2 reps, -15s rest)
        - consistency <= 0.6 or rating > 4: decrease (-1 set, -2 reps, +15s rest)
        - otherwise: maintain

        The decision only depends on the signal, so repeated calls agree.
        """
        consistency = self.calculate_consistency(signal)
        rating = self.resolve_difficulty(signal)

        if consistency >= self.INCREASE_MIN_CONSISTENCY and rating < self.INCREASE_MAX_DIFFICULTY:
            decision_type = AdjustmentType.INCREASE
            sets_change, reps_change, rest_change = self.INCREASE_DELTAS
        elif consistency <= self.DECREASE_MAX_CONSISTENCY or rating > self.DECREASE_MIN_DIFFICULTY:
            decision_type = AdjustmentType.DECREASE
            sets_change, reps_change, rest_change = self.DECREASE_DELTAS
        else:
            decision_type = AdjustmentType.MAINTAIN
            sets_change, reps_change, rest_change = 0, 0, 0

        return AdjustmentDecision(
            type=decision_type,
            sets_change=sets_change,
            reps_change=reps_change,
            rest_change=rest_change,
            consistency=consistency,
            difficulty_rating=rating,
            rationale=self.RATIONALES[decision_type],
        )

    def apply_adjustment(
        self,
        prescriptions: Iterable[Union[ExercisePrescription, dict]],
        decision: AdjustmentDecision
    ) -> List[ExercisePrescription]:
        """
        Apply a decision's deltas to a plan's prescriptions

        Returns updated copies; the inputs are left untouched. Sets and reps
        never drop below 1 and rest never below 30 seconds. Time-based
        exercises (no reps) keep reps unset.

        Raises:
            EngineValidationError: If a stored prescription is malformed
        """
        adjusted = []
        for index, raw in enumerate(prescriptions):
            prescription = coerce_record(ExercisePrescription, raw, f"prescriptions[{index}]")
            if not decision.should_adjust:
                adjusted.append(prescription)
                continue

            reps = prescription.reps
            if reps is not None:
                reps = max(self.MIN_REPS, reps + decision.reps_change)

            adjusted.append(prescription.model_copy(update={
                "sets": max(self.MIN_SETS, prescription.sets + decision.sets_change),
                "reps": reps,
                "rest_seconds": max(self.MIN_REST_SECONDS, prescription.rest_seconds + decision.rest_change),
            }))

        return adjusted

    def adapt_plan(
        self,
        prescriptions: Iterable[Union[ExercisePrescription, dict]],
        signal: ProgressSignal
    ) -> AdaptationResult:
        """
        Review one signal window and adjust the plan's prescriptions

        The caller persists the returned prescriptions and must not replay
        the same signal window against them.
        """
        decision = self.analyze_progress(signal)
        exercises = self.apply_adjustment(prescriptions, decision)

        logger.info(
            f"Difficulty review: {decision.type.value} "
            f"(consistency={decision.consistency:.2f}, rating={decision.difficulty_rating}) "
            f"for {len(exercises)} exercises"
        )
        return AdaptationResult(
            decision=decision,
            adjusted=decision.should_adjust,
            exercises=exercises,
        )
