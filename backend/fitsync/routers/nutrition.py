"""Nutrition API router: daily targets, meal split and food log totals."""

import logging

from fastapi import APIRouter, Depends

from fitsync.dependencies import get_goal_calculator, get_meal_planner, get_nutrition_aggregator
from fitsync.models.profile import Profile
from fitsync.schemas.nutrition import AggregateRequest, AggregateResponse, NutritionGoalResponse
from fitsync.services.meal_planner import MealPlan, MealPlanner
from fitsync.services.nutrition_aggregator import NutritionAggregator
from fitsync.services.nutrition_calculator import NutritionGoalCalculator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/goals", response_model=NutritionGoalResponse)
async def get_nutrition_goals(
    profile: Profile,
    goal_calculator: NutritionGoalCalculator = Depends(get_goal_calculator),
) -> NutritionGoalResponse:
    """
    Calculate daily calorie, macro, fiber and water targets for a profile.
    """
    return NutritionGoalResponse(
        profile_id=profile.id,
        goal=goal_calculator.goals(profile),
    )


@router.post("/meal-plan", response_model=MealPlan)
async def get_meal_plan(
    profile: Profile,
    goal_calculator: NutritionGoalCalculator = Depends(get_goal_calculator),
    meal_planner: MealPlanner = Depends(get_meal_planner),
) -> MealPlan:
    """
    Split the profile's daily calorie target across breakfast, lunch, dinner and snacks.
    """
    return meal_planner.plan(goal_calculator.goals(profile))


@router.post("/aggregate", response_model=AggregateResponse)
async def aggregate_food_log(
    request: AggregateRequest,
    aggregator: NutritionAggregator = Depends(get_nutrition_aggregator),
    goal_calculator: NutritionGoalCalculator = Depends(get_goal_calculator),
) -> AggregateResponse:
    """
    Recompute a day's nutrition totals from its food entries.

    Also returns per-meal totals and, when a profile is supplied, progress
    against the profile's nutrition goal.
    """
    totals = aggregator.aggregate(request.entries)
    response = AggregateResponse(
        totals=totals,
        meals=aggregator.aggregate_by_meal(request.entries),
    )

    if request.profile is not None:
        goal = goal_calculator.goals(request.profile)
        response.goal = goal
        response.progress = aggregator.compare(totals, goal)

    logger.info(f"Aggregated {totals.entry_count} food entries: {totals.total_calories} kcal")
    return response
