"""Daily nutrition totals from a food log.

Totals are always recomputed from the full set of entries. Summation uses
``math.fsum``, which is exactly rounded and therefore independent of entry
order, so the same entries always produce bit-identical totals.
"""

import logging
import math
from typing import Dict, Iterable, List, Tuple, Union

from fitsync.exceptions import coerce_record
from fitsync.models.nutrition import (
    DailyNutritionTotals,
    FoodEntry,
    MealType,
    NutrientProgress,
    NutritionGoal,
    NutritionProgress,
)
from fitsync.services.rounding import round_half_up, round_int

logger = logging.getLogger(__name__)

Contribution = Tuple[float, float, float, float]


class NutritionAggregator:
    """Reduce logged food entries into calorie and macro totals."""

    def aggregate(self, food_entries: Iterable[Union[FoodEntry, dict]]) -> DailyNutritionTotals:
        """
        Sum the contributions of every entry.

        Reference foods are scaled from their per-100 g basis by the logged
        quantity; custom entries count as-is. Calories are rounded to an
        integer, macros to one decimal place.

        Raises:
            EngineValidationError: If an entry is malformed (e.g. negative quantity)
        """
        entries = self._validate(food_entries)
        return self._totals([self.contribution(entry) for entry in entries])

    def aggregate_by_meal(
        self,
        food_entries: Iterable[Union[FoodEntry, dict]]
    ) -> Dict[MealType, DailyNutritionTotals]:
        """Totals per meal; entries without a meal type are left out."""
        entries = self._validate(food_entries)
        grouped: Dict[MealType, List[Contribution]] = {}
        for entry in entries:
            if entry.meal_type is not None:
                grouped.setdefault(entry.meal_type, []).append(self.contribution(entry))

        return {
            meal_type: self._totals(grouped[meal_type])
            for meal_type in MealType
            if meal_type in grouped
        }

    def contribution(self, entry: FoodEntry) -> Contribution:
        """(calories, protein, carbs, fat) contributed by one entry."""
        if entry.custom is not None:
            custom = entry.custom
            return (custom.calories, custom.protein, custom.carbs, custom.fat)

        food = entry.food
        multiplier = entry.quantity_grams / 100
        return (
            food.calories_per_100g * multiplier,
            food.protein_per_100g * multiplier,
            food.carbs_per_100g * multiplier,
            food.fat_per_100g * multiplier,
        )

    def compare(self, totals: DailyNutritionTotals, goal: NutritionGoal) -> NutritionProgress:
        """Compare a day's totals against the nutrition goal."""
        return NutritionProgress(
            calories=self._progress(totals.total_calories, goal.calories),
            protein=self._progress(totals.total_protein, goal.protein_g),
            carbs=self._progress(totals.total_carbs, goal.carbs_g),
            fat=self._progress(totals.total_fat, goal.fat_g),
        )

    def _validate(self, food_entries: Iterable[Union[FoodEntry, dict]]) -> List[FoodEntry]:
        return [
            coerce_record(FoodEntry, entry, f"food_entries[{index}]")
            for index, entry in enumerate(food_entries)
        ]

    def _totals(self, contributions: List[Contribution]) -> DailyNutritionTotals:
        if contributions:
            calories, protein, carbs, fat = (math.fsum(values) for values in zip(*contributions))
        else:
            calories = protein = carbs = fat = 0.0

        totals = DailyNutritionTotals(
            total_calories=round_int(calories),
            total_protein=round_half_up(protein, 1),
            total_carbs=round_half_up(carbs, 1),
            total_fat=round_half_up(fat, 1),
            entry_count=len(contributions),
        )
        logger.debug(f"Aggregated {len(contributions)} food entries: {totals}")
        return totals

    def _progress(self, consumed: float, target: float) -> NutrientProgress:
        percent = consumed / target * 100 if target > 0 else 0.0
        return NutrientProgress(
            consumed=consumed,
            target=target,
            remaining=round_half_up(max(0.0, target - consumed), 1),
            percent=round_half_up(percent, 1),
        )
