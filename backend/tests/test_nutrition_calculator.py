import itertools

import pytest

from fitsync.models.profile import Profile
from fitsync.services.nutrition_calculator import NutritionGoalCalculator
from conftest import make_profile

calculator = NutritionGoalCalculator()


def test_bmr_and_tdee_for_reference_profile(profile):
    assert calculator.calculate_bmr(profile) == pytest.approx(1451.5)
    assert calculator.calculate_tdee(profile) == pytest.approx(2249.825)


def test_male_bmr():
    assert calculator.calculate_bmr(make_profile(sex="male")) == pytest.approx(1617.5)


def test_other_sex_uses_female_equation():
    assert calculator.calculate_bmr(make_profile(sex="other")) == pytest.approx(1451.5)


def test_goals_without_goal(profile):
    goal = calculator.goals(profile)

    assert goal.calories == 2250
    assert goal.protein_g == 141
    assert goal.carbs_g == 253
    assert goal.fat_g == 75
    assert goal.fiber_g == 31
    assert goal.water_ml == 2450


def test_weight_loss_goal():
    goal = calculator.goals(make_profile(goals=["weight_loss"]))

    # 15% deficit on the unrounded TDEE
    assert goal.calories == 1912
    calories = 2249.825 * 0.85
    assert goal.protein_g == round(calories * 0.35 / 4)
    assert goal.carbs_g == round(calories * 0.35 / 4)
    assert goal.fat_g == round(calories * 0.30 / 9)


def test_muscle_gain_goal():
    goal = calculator.goals(make_profile(goals=["muscle_gain"]))
    calories = 2249.825 * 1.15

    assert goal.calories == round(calories)
    assert goal.protein_g == round(calories * 0.30 / 4)
    assert goal.carbs_g == round(calories * 0.45 / 4)
    assert goal.fat_g == round(calories * 0.25 / 9)


def test_weight_loss_takes_priority_over_muscle_gain():
    both = calculator.goals(make_profile(goals=["muscle_gain", "weight_loss"]))
    assert both == calculator.goals(make_profile(goals=["weight_loss"]))


def test_endurance_goal_has_no_nutrition_rule(profile):
    assert calculator.goals(make_profile(goals=["endurance"])) == calculator.goals(profile)


@pytest.mark.parametrize("activity,multiplier", [
    ("sedentary", 1.2),
    ("light", 1.375),
    ("moderate", 1.55),
    ("active", 1.725),
    ("very_active", 1.9),
    ("couch", 1.55),
    (None, 1.55),
])
def test_activity_multipliers(activity, multiplier):
    assert calculator.get_activity_multiplier(make_profile(activity_level=activity)) == multiplier


def test_missing_fields_use_defaults():
    goal = calculator.goals(Profile())

    assert goal.calories == 2250
    assert goal.water_ml == 2500


def test_non_positive_weight_counts_as_missing():
    profile = make_profile(weight_kg=0)
    assert profile.weight_kg is None
    assert calculator.goals(profile).water_ml == 2500


@pytest.mark.parametrize("goals", [
    [], ["weight_loss"], ["muscle_gain"], ["endurance"], ["general"],
    ["weight_loss", "muscle_gain"], ["muscle_gain", "endurance"],
])
def test_macros_add_up_to_calories(goals):
    for sex, activity, weight, age in itertools.product(
        ["male", "female"], ["sedentary", "very_active"], [50, 80, 120], [18, 45, 70]
    ):
        profile = make_profile(goals=goals, sex=sex, activity_level=activity, weight_kg=weight, age=age)
        goal = calculator.goals(profile)
        macro_kcal = goal.protein_g * 4 + goal.carbs_g * 4 + goal.fat_g * 9
        assert abs(macro_kcal - goal.calories) <= goal.calories * 0.01
