import pytest

from fitsync.exceptions import EngineValidationError
from fitsync.models.plan import ExercisePrescription
from fitsync.models.progress import AdjustmentType, ProgressSignal
from fitsync.services.adaptation_service import AdaptationService

service = AdaptationService()


def signal(completed, planned, rating=None):
    return ProgressSignal(
        workouts_completed=completed,
        workouts_planned=planned,
        average_difficulty_rating=rating,
    )


def prescription(sets=3, reps=8, rest=75, order=1):
    return ExercisePrescription(
        exercise_id=f"ex-{order}",
        sets=sets,
        reps=reps,
        rest_seconds=rest,
        order_index=order,
    )


def test_consistent_and_easy_increases():
    decision = service.analyze_progress(signal(9, 10, 2))

    assert decision.type == AdjustmentType.INCREASE
    assert decision.consistency == 0.9
    assert (decision.sets_change, decision.reps_change, decision.rest_change) == (1, 2, -15)
    assert decision.rationale


@pytest.mark.parametrize("completed,planned,rating", [
    (6, 10, 3),    # consistency at the 0.6 boundary
    (2, 10, 1),
    (10, 10, 4.5),  # too hard despite full adherence
    (0, 0, 2),      # empty window counts as zero consistency
])
def test_decrease(completed, planned, rating):
    assert service.analyze_progress(signal(completed, planned, rating)).type == AdjustmentType.DECREASE


@pytest.mark.parametrize("completed,planned,rating", [
    (9, 10, 3),
    (8, 10, 2),
    (10, 10, 4),
    (7, 10, None),
])
def test_maintain(completed, planned, rating):
    decision = service.analyze_progress(signal(completed, planned, rating))

    assert decision.type == AdjustmentType.MAINTAIN
    assert not decision.should_adjust
    assert (decision.sets_change, decision.reps_change, decision.rest_change) == (0, 0, 0)


def test_increase_is_checked_before_decrease():
    # Full adherence and easy rating: increase wins even though no decrease rule fires
    assert service.analyze_progress(signal(10, 10, 1)).type == AdjustmentType.INCREASE


def test_missing_rating_defaults_to_three():
    decision = service.analyze_progress(signal(10, 10))
    assert decision.difficulty_rating == 3.0
    assert decision.type == AdjustmentType.MAINTAIN


def test_malformed_counts_are_clamped():
    decision = service.analyze_progress(signal(-3, -5, 2))

    assert decision.consistency == 0.0
    assert decision.type == AdjustmentType.DECREASE


def test_out_of_range_rating_is_clamped():
    assert service.analyze_progress(signal(9, 10, -4)).difficulty_rating == 1.0
    assert service.analyze_progress(signal(9, 10, 12)).difficulty_rating == 5.0


def test_decision_is_repeatable():
    window = signal(9, 10, 2)
    assert service.analyze_progress(window) == service.analyze_progress(window)


def test_apply_increase():
    decision = service.analyze_progress(signal(9, 10, 2))
    original = prescription(sets=3, reps=8, rest=75)

    (adjusted,) = service.apply_adjustment([original], decision)

    assert (adjusted.sets, adjusted.reps, adjusted.rest_seconds) == (4, 10, 60)
    assert (original.sets, original.reps, original.rest_seconds) == (3, 8, 75)


def test_increase_respects_rest_floor():
    decision = service.analyze_progress(signal(10, 10, 1))
    (adjusted,) = service.apply_adjustment([prescription(rest=40)], decision)
    assert adjusted.rest_seconds == 30


def test_repeated_decrease_is_bounded():
    decision = service.analyze_progress(signal(1, 10, 5))
    exercises = [prescription(sets=4, reps=10, rest=60, order=1), prescription(sets=2, reps=3, rest=30, order=2)]

    for _ in range(10):
        exercises = service.apply_adjustment(exercises, decision)
        for exercise in exercises:
            assert exercise.sets >= 1
            assert exercise.reps >= 1
            assert exercise.rest_seconds >= 30

    assert [(e.sets, e.reps, e.rest_seconds) for e in exercises] == [(1, 1, 210), (1, 1, 180)]


def test_time_based_prescription_keeps_null_reps():
    decision = service.analyze_progress(signal(9, 10, 2))
    (adjusted,) = service.apply_adjustment([prescription(reps=None)], decision)

    assert adjusted.reps is None
    assert adjusted.sets == 4


def test_maintain_leaves_prescriptions_unchanged():
    decision = service.analyze_progress(signal(8, 10, 3))
    exercises = [prescription(), prescription(order=2)]

    assert service.apply_adjustment(exercises, decision) == exercises


def test_adapt_plan_accepts_stored_dicts():
    stored = [{"exercise_id": "bench", "sets": 3, "reps": 8, "rest_seconds": 75, "order_index": 1}]
    result = service.adapt_plan(stored, signal(9, 10, 2))

    assert result.adjusted
    assert result.decision.type == AdjustmentType.INCREASE
    assert result.exercises[0].sets == 4


def test_malformed_stored_prescription_names_the_field():
    stored = [{"exercise_id": "bench", "sets": 3, "reps": 8, "order_index": 1}]

    with pytest.raises(EngineValidationError) as exc_info:
        service.adapt_plan(stored, signal(9, 10, 2))

    assert exc_info.value.field == "prescriptions[0].rest_seconds"
