import itertools

import pytest
from pydantic import ValidationError

from fitsync.exceptions import EngineValidationError
from fitsync.models.nutrition import CustomFood, FoodEntry, MealType, NutrientProfile, NutritionGoal
from fitsync.services.nutrition_aggregator import NutritionAggregator

aggregator = NutritionAggregator()


def reference_entry(calories, quantity, protein=0.0, carbs=0.0, fat=0.0, meal_type=None):
    return FoodEntry(
        meal_type=meal_type,
        food=NutrientProfile(
            calories_per_100g=calories,
            protein_per_100g=protein,
            carbs_per_100g=carbs,
            fat_per_100g=fat,
        ),
        quantity_grams=quantity,
    )


def custom_entry(calories, protein=0.0, carbs=0.0, fat=0.0, meal_type=None):
    return FoodEntry(
        meal_type=meal_type,
        custom=CustomFood(name="Custom", calories=calories, protein=protein, carbs=carbs, fat=fat),
    )


def test_reference_entries_scale_by_quantity():
    totals = aggregator.aggregate([reference_entry(89, 150), reference_entry(52, 100)])

    assert totals.total_calories == 186
    assert totals.entry_count == 2


def test_custom_entries_are_not_scaled():
    totals = aggregator.aggregate([custom_entry(250, protein=10, carbs=30, fat=8.25)])

    assert totals.total_calories == 250
    assert totals.total_protein == 10.0
    assert totals.total_fat == 8.3


def test_macros_rounded_to_one_decimal():
    totals = aggregator.aggregate([reference_entry(89, 150, protein=1.1, carbs=22.8, fat=0.4)])

    assert totals.total_protein == 1.7
    assert totals.total_carbs == 34.2
    assert totals.total_fat == 0.6


def test_empty_log():
    totals = aggregator.aggregate([])

    assert totals.total_calories == 0
    assert totals.total_protein == 0.0
    assert totals.entry_count == 0


def test_aggregate_is_idempotent_and_order_independent():
    entries = [
        reference_entry(89, 150, protein=1.1, carbs=22.8, fat=0.3),
        reference_entry(52, 100, protein=0.3, carbs=13.8, fat=0.2),
        reference_entry(165, 133.3, protein=31, fat=3.6),
        custom_entry(0.1, protein=0.1, carbs=0.2, fat=0.3),
    ]
    expected = aggregator.aggregate(entries)

    assert aggregator.aggregate(entries) == expected
    for permutation in itertools.permutations(entries):
        assert aggregator.aggregate(list(permutation)) == expected


def test_negative_quantity_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        reference_entry(89, -10)
    assert "quantity_grams" in str(exc_info.value)

    with pytest.raises(EngineValidationError) as exc_info:
        aggregator.aggregate([{"food": {"calories_per_100g": 89}, "quantity_grams": -10}])
    assert exc_info.value.field == "food_entries[0].quantity_grams"


def test_reference_food_requires_quantity():
    with pytest.raises(EngineValidationError) as exc_info:
        aggregator.aggregate([
            {"food": {"calories_per_100g": 89}, "quantity_grams": 150},
            {"food": {"calories_per_100g": 250}},
        ])
    assert exc_info.value.field == "food_entries[1].quantity_grams"

    with pytest.raises(ValidationError):
        FoodEntry(food=NutrientProfile(calories_per_100g=250), quantity_grams=None)

    assert aggregator.aggregate([custom_entry(120)]).total_calories == 120


def test_entry_needs_exactly_one_source():
    with pytest.raises(EngineValidationError) as exc_info:
        aggregator.aggregate([{"quantity_grams": 100}])
    assert exc_info.value.field == "food_entries[0]"

    with pytest.raises(ValidationError):
        FoodEntry(
            food=NutrientProfile(calories_per_100g=50),
            custom=CustomFood(name="Both"),
            quantity_grams=100,
        )


def test_aggregate_by_meal():
    entries = [
        reference_entry(89, 150, meal_type=MealType.BREAKFAST),
        custom_entry(300, meal_type=MealType.DINNER),
        custom_entry(120, meal_type=MealType.DINNER),
        custom_entry(80),
    ]
    meals = aggregator.aggregate_by_meal(entries)

    assert list(meals) == [MealType.BREAKFAST, MealType.DINNER]
    assert meals[MealType.BREAKFAST].total_calories == 134
    assert meals[MealType.DINNER].total_calories == 420
    assert meals[MealType.DINNER].entry_count == 2


def test_compare_against_goal():
    goal = NutritionGoal(calories=2000, protein_g=100, carbs_g=250, fat_g=60, fiber_g=28, water_ml=2450)
    totals = aggregator.aggregate([custom_entry(1500, protein=120, carbs=100, fat=30)])

    progress = aggregator.compare(totals, goal)

    assert progress.calories.remaining == 500
    assert progress.calories.percent == 75.0
    assert progress.protein.remaining == 0
    assert progress.protein.percent == 120.0
    assert progress.fat.percent == 50.0
