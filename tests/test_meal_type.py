from datetime import date

import pytest
from pydantic import ValidationError

from app.models.meal_record import MealType
from app.schemas.nutrition import MealRecordCreate, MealRecordOut, MealRecordUpdate


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("breakfast", MealType.BREAKFAST),
        ("Lunch", MealType.LUNCH),
        (3, MealType.DINNER),
        ("4", MealType.SNACK),
    ],
)
def test_parse_accepts_names_and_codes(raw, expected):
    assert MealType.parse(raw) is expected


@pytest.mark.parametrize("raw", ["brunch", 0, 5, True, 1.5])
def test_parse_rejects_unknown(raw):
    with pytest.raises(ValueError):
        MealType.parse(raw)


def test_schema_reads_code_and_legacy_date_key():
    payload = MealRecordCreate.model_validate({"record_date": "2024-01-01", "meal_type": 2})
    assert payload.meal_type is MealType.LUNCH
    assert payload.date.isoformat() == "2024-01-01"


def test_schema_rejects_bad_meal_type():
    with pytest.raises(ValidationError):
        MealRecordCreate.model_validate({"date": "2024-01-01", "meal_type": "brunch"})


def test_output_always_uses_name():
    out = MealRecordOut.model_validate(
        {
            "id": 1,
            "user_id": 1,
            "meal_type": 4,
            "date": "2024-01-01",
            "created_at": "2024-01-01T08:00:00Z",
            "updated_at": "2024-01-01T08:00:00Z",
        }
    )
    assert out.model_dump(mode="json")["meal_type"] == "snack"


def test_update_date_is_optional_and_aliased():
    assert MealRecordUpdate().date is None
    assert MealRecordUpdate.model_validate({"record_date": "2024-01-02"}).date == date(2024, 1, 2)
    assert MealRecordCreate.model_validate({"date": "2024-01-02", "meal_type": 1}).date == date(2024, 1, 2)
