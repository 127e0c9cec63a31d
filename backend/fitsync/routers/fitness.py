"""Fitness score API router."""

from fastapi import APIRouter, Depends

from fitsync.dependencies import get_score_calculator
from fitsync.models.profile import Profile
from fitsync.schemas.plans import FitnessScoreResponse
from fitsync.services.fitness_score import FitnessScoreCalculator

router = APIRouter()


@router.post("/score", response_model=FitnessScoreResponse)
async def get_fitness_score(
    profile: Profile,
    score_calculator: FitnessScoreCalculator = Depends(get_score_calculator),
) -> FitnessScoreResponse:
    """
    Calculate the fitness score (1-5) for a profile.
    """
    return FitnessScoreResponse(
        profile_id=profile.id,
        score=score_calculator.score(profile),
    )
