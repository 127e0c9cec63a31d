"""Workout plan API router: structure, prescriptions, generation and adjustment."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fitsync.config import Settings, get_settings
from fitsync.dependencies import (
    get_adaptation_service,
    get_plan_generator,
    get_prescription_engine,
    get_score_calculator,
    get_structure_generator,
)
from fitsync.models.plan import ExercisePrescription, GeneratedPlan, PlanStructure
from fitsync.schemas.plans import (
    AdjustPlanRequest,
    AdjustPlanResponse,
    GeneratePlanRequest,
    PlanStructureRequest,
    PrescribeRequest,
)
from fitsync.services.adaptation_service import AdaptationService
from fitsync.services.fitness_score import FitnessScoreCalculator
from fitsync.services.plan_generator import PlanGenerator, PlanStructureGenerator
from fitsync.services.prescription_engine import ExercisePrescriptionEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/structure", response_model=PlanStructure)
async def get_plan_structure(
    request: PlanStructureRequest,
    score_calculator: FitnessScoreCalculator = Depends(get_score_calculator),
    structure_generator: PlanStructureGenerator = Depends(get_structure_generator),
) -> PlanStructure:
    """
    Decide plan length, weekly frequency and session size.

    The fitness score is calculated from the profile when not supplied.
    """
    fitness_score = request.fitness_score
    if fitness_score is None:
        fitness_score = score_calculator.score(request.profile)

    return structure_generator.structure(request.profile, fitness_score)


@router.post("/prescribe", response_model=List[ExercisePrescription])
async def prescribe_exercises(
    request: PrescribeRequest,
    prescription_engine: ExercisePrescriptionEngine = Depends(get_prescription_engine),
) -> List[ExercisePrescription]:
    """
    Assign sets, reps and rest to the exercises of one session.
    """
    return prescription_engine.prescribe(request.candidate_exercises, request.profile)


@router.post("/generate", response_model=GeneratedPlan, status_code=status.HTTP_201_CREATED)
async def generate_plan(
    request: GeneratePlanRequest,
    plan_generator: PlanGenerator = Depends(get_plan_generator),
    settings: Settings = Depends(get_settings),
) -> GeneratedPlan:
    """
    Generate a complete personalized plan.

    Scores the profile, derives the plan structure and prescribes the first
    exercises of the catalog. The plan is returned, not stored.
    """
    if len(request.exercise_catalog) > settings.MAX_CANDIDATE_EXERCISES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Exercise catalog exceeds {settings.MAX_CANDIDATE_EXERCISES} entries",
        )

    logger.info(f"Generating plan for profile {request.profile.id}")
    return plan_generator.generate_plan(request.profile, request.exercise_catalog)


@router.post("/adjust", response_model=AdjustPlanResponse)
async def adjust_plan(
    request: AdjustPlanRequest,
    adaptation_service: AdaptationService = Depends(get_adaptation_service),
) -> AdjustPlanResponse:
    """
    Review adherence and perceived difficulty and adjust prescriptions.

    Returns the decision with its rationale and the adjusted prescriptions.
    The caller is responsible for storing them once per review window.
    """
    result = adaptation_service.adapt_plan(request.exercises, request.progress)
    return AdjustPlanResponse(
        decision=result.decision,
        adjusted=result.adjusted,
        exercises=result.exercises,
    )
