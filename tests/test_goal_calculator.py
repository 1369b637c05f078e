import pytest

from app.core.errors import ValidationError
from app.services.goal_calculator import (
    Biometrics,
    GoalType,
    basal_metabolic_rate,
    calculate_targets,
    total_daily_energy_expenditure,
)

MALE_30 = Biometrics(gender="male", age=30, height_cm=180, weight_kg=80, activity_level=3)


def macro_kcal(t):
    return t.protein * 4 + t.carbohydrates * 4 + t.fat * 9


def test_bmr_mifflin_st_jeor():
    assert basal_metabolic_rate("male", 30, 180, 80) == pytest.approx(1780)
    assert basal_metabolic_rate("female", 30, 180, 80) == pytest.approx(1614)


@pytest.mark.parametrize(
    "level,factor",
    [(1, 1.2), (2, 1.375), (3, 1.55), (4, 1.725), (5, 1.9)],
)
def test_tdee_activity_factors(level, factor):
    assert total_daily_energy_expenditure(1000, level) == pytest.approx(1000 * factor)


def test_maintain_targets_equal_tdee():
    t = calculate_targets(MALE_30, "maintain")
    assert t.calories == pytest.approx(2759)
    assert t.protein == pytest.approx(2759 * 0.20 / 4)
    assert t.carbohydrates == pytest.approx(2759 * 0.50 / 4)
    assert t.fat == pytest.approx(2759 * 0.30 / 9)


def test_lose_uses_deficit_and_higher_protein():
    t = calculate_targets(MALE_30, GoalType.LOSE)
    assert t.calories == pytest.approx(2259)
    assert t.protein == pytest.approx(2259 * 0.25 / 4)
    assert t.carbohydrates == pytest.approx(2259 * 0.45 / 4)
    assert t.fat == pytest.approx(2259 * 0.30 / 9)
    assert macro_kcal(t) == pytest.approx(t.calories, abs=0.01)


def test_gain_uses_surplus_and_more_carbs():
    t = calculate_targets(MALE_30, "gain")
    assert t.calories == pytest.approx(3259)
    assert t.carbohydrates == pytest.approx(3259 * 0.55 / 4)
    assert t.fat == pytest.approx(3259 * 0.25 / 9)
    assert macro_kcal(t) == pytest.approx(t.calories, abs=0.01)


def test_goal_type_is_case_insensitive():
    assert calculate_targets(MALE_30, " Maintain ").calories == pytest.approx(2759)


@pytest.mark.parametrize("goal", ["bulk", "", None])
def test_unknown_goal_type_rejected(goal):
    with pytest.raises(ValidationError):
        calculate_targets(MALE_30, goal)


@pytest.mark.parametrize(
    "field", ["gender", "age", "height_cm", "weight_kg", "activity_level"]
)
def test_missing_biometric_rejected(field):
    values = {
        "gender": "male",
        "age": 30,
        "height_cm": 180,
        "weight_kg": 80,
        "activity_level": 3,
    }
    values[field] = None
    with pytest.raises(ValidationError) as exc:
        calculate_targets(Biometrics(**values), "maintain")
    assert field in exc.value.message


def test_overrides_replace_only_non_empty_values():
    base = Biometrics(gender=None, age=30, height_cm=180, weight_kg=80, activity_level=3)
    merged = base.with_overrides(gender="female", age=0, weight_kg=70, activity_level=9)
    assert merged.gender == "female"
    assert merged.age == 30
    assert merged.weight_kg == 70
    # out-of-range activity levels are ignored, not applied
    assert merged.activity_level == 3


def test_invalid_gender_rejected():
    bad = Biometrics(gender="other", age=30, height_cm=180, weight_kg=80, activity_level=3)
    with pytest.raises(ValidationError):
        calculate_targets(bad, "maintain")
