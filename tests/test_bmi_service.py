from datetime import date

import pytest

from log_manager_api.app.core.errors import ParameterFormat
from log_manager_api.app.core.messages import InfoMessages
from log_manager_api.app.services import bmi_service


def test_calculate_rounds_to_two_decimals():
    assert bmi_service.calculate(65.0, 1.6) == 25.39
    assert bmi_service.calculate(61.3, 1.83) == 18.3
    assert bmi_service.calculate(78.0, 1.8) == 24.07


@pytest.mark.parametrize("weight, height", [(1e308, 1e-3), (70.0, 1e-200)])
def test_calculate_rejects_non_finite_bmi(weight, height):
    with pytest.raises(ParameterFormat):
        bmi_service.calculate(weight, height)


def test_age_counts_full_years_only():
    birthdate = date(1999, 12, 13)
    assert bmi_service.age_at(birthdate, today=date(2022, 12, 12)) == 22
    assert bmi_service.age_at(birthdate, today=date(2022, 12, 13)) == 23


@pytest.mark.parametrize(
    "bmi, age, expected",
    [
        (18.9, 20, InfoMessages.UNDERWEIGHT),
        (19.0, 20, InfoMessages.NORMAL_WEIGHT),
        (24.0, 20, InfoMessages.NORMAL_WEIGHT),
        (24.07, 20, InfoMessages.OVERWEIGHT),
        (24.07, 30, InfoMessages.NORMAL_WEIGHT),
        (29.5, 30, InfoMessages.OVERWEIGHT),
        (30.5, 30, InfoMessages.OBESITY),
        (23.5, 70, InfoMessages.UNDERWEIGHT),
        (28.0, 60, InfoMessages.NORMAL_WEIGHT),
    ],
)
def test_category_depends_on_age(bmi, age, expected):
    assert bmi_service.category(bmi, age) == expected


def test_describe_formats_message():
    message = bmi_service.describe(date(1999, 12, 13), 65.0, 1.6, today=date(2022, 1, 1))
    assert message == "User has a BMI of 25.39 and therewith he has overweight."


def test_describe_normal_weight_for_older_user():
    message = bmi_service.describe(date(1988, 12, 12), 78.0, 1.8, today=date(2021, 6, 1))
    assert message == "User has a BMI of 24.07 and therewith he has normal weight."
