"""Daily calorie and macronutrient targets.

BMR comes from the Mifflin-St Jeor equation, TDEE scales it by an activity
factor, and the goal type shifts calories by a fixed 500 kcal/day (about
0.5 kg per week) before they are split into grams of protein, carbohydrates
and fat.
"""
import enum
from dataclasses import dataclass, replace

from app.core.errors import ValidationError

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

ACTIVITY_FACTORS = {
    1: 1.2,    # sedentary
    2: 1.375,  # light exercise 1-3 days/week
    3: 1.55,   # moderate exercise 3-5 days/week
    4: 1.725,  # hard exercise 6-7 days/week
    5: 1.9,    # physical job or twice-daily training
}

DAILY_CALORIE_OFFSET = 500


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class GoalType(str, enum.Enum):
    MAINTAIN = "maintain"
    LOSE = "lose"
    GAIN = "gain"

    @classmethod
    def parse(cls, value) -> "GoalType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError("goal_type must be one of: maintain, lose, gain")


@dataclass(frozen=True)
class MacroSplit:
    protein: float
    carbohydrates: float
    fat: float


MACRO_SPLITS = {
    GoalType.MAINTAIN: MacroSplit(protein=0.20, carbohydrates=0.50, fat=0.30),
    GoalType.LOSE: MacroSplit(protein=0.25, carbohydrates=0.45, fat=0.30),
    GoalType.GAIN: MacroSplit(protein=0.20, carbohydrates=0.55, fat=0.25),
}


@dataclass(frozen=True)
class Biometrics:
    gender: str | None
    age: int | None
    height_cm: float | None
    weight_kg: float | None
    activity_level: int | None

    @classmethod
    def from_user(cls, user) -> "Biometrics":
        return cls(
            gender=user.gender,
            age=user.age,
            height_cm=user.height_cm,
            weight_kg=user.weight_kg,
            activity_level=user.activity_level,
        )

    def with_overrides(
        self,
        gender: str | None = None,
        age: int | None = None,
        height_cm: float | None = None,
        weight_kg: float | None = None,
        activity_level: int | None = None,
    ) -> "Biometrics":
        """Return a copy where every non-empty override replaces the stored value."""
        changes = {}
        if gender:
            changes["gender"] = gender
        if age and age > 0:
            changes["age"] = age
        if height_cm and height_cm > 0:
            changes["height_cm"] = height_cm
        if weight_kg and weight_kg > 0:
            changes["weight_kg"] = weight_kg
        if activity_level in ACTIVITY_FACTORS:
            changes["activity_level"] = activity_level
        return replace(self, **changes)

    def validate(self) -> None:
        missing = [
            name
            for name in ("gender", "age", "height_cm", "weight_kg", "activity_level")
            if not getattr(self, name)
        ]
        if missing:
            raise ValidationError(
                "missing biometrics, complete your profile first: " + ", ".join(missing)
            )
        try:
            Gender(self.gender)
        except ValueError:
            raise ValidationError("gender must be male or female")
        if self.age <= 0 or self.height_cm <= 0 or self.weight_kg <= 0:
            raise ValidationError("age, height_cm and weight_kg must be positive")
        if self.activity_level not in ACTIVITY_FACTORS:
            raise ValidationError("activity_level must be between 1 and 5")


@dataclass(frozen=True)
class GoalTargets:
    calories: float
    protein: float
    carbohydrates: float
    fat: float


def basal_metabolic_rate(gender: str, age: int, height_cm: float, weight_kg: float) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if Gender(gender) is Gender.MALE:
        return base + 5
    return base - 161


def total_daily_energy_expenditure(bmr: float, activity_level: int) -> float:
    return bmr * ACTIVITY_FACTORS[activity_level]


def target_calories(tdee: float, goal_type: GoalType) -> float:
    if goal_type is GoalType.LOSE:
        return tdee - DAILY_CALORIE_OFFSET
    if goal_type is GoalType.GAIN:
        return tdee + DAILY_CALORIE_OFFSET
    return tdee


def split_macros(calories: float, goal_type: GoalType) -> GoalTargets:
    split = MACRO_SPLITS[goal_type]
    return GoalTargets(
        calories=calories,
        protein=calories * split.protein / KCAL_PER_G_PROTEIN,
        carbohydrates=calories * split.carbohydrates / KCAL_PER_G_CARBS,
        fat=calories * split.fat / KCAL_PER_G_FAT,
    )


def calculate_targets(biometrics: Biometrics, goal_type) -> GoalTargets:
    """Compute the daily targets, raising ValidationError on unusable input."""
    goal = GoalType.parse(goal_type)
    biometrics.validate()

    bmr = basal_metabolic_rate(
        biometrics.gender, biometrics.age, biometrics.height_cm, biometrics.weight_kg
    )
    tdee = total_daily_energy_expenditure(bmr, biometrics.activity_level)
    return split_macros(target_calories(tdee, goal), goal)
