"""
BMI calculation.

BMI = weight_kg / (height_m)²

The weight category depends on age: the "normal" band moves up by one
BMI point per decade of age, starting at 19-24 for people under 25.
Above the band, up to five points count as overweight and anything
beyond as obesity.
"""

import math
from datetime import date
from typing import Optional, Tuple

from ..core.errors import ParameterFormat
from ..core.messages import InfoMessages

# (minimum age, lower bound, upper bound) of the normal BMI band.
# Checked from the oldest bracket down.
_NORMAL_BANDS: Tuple[Tuple[int, float, float], ...] = (
    (65, 24.0, 29.0),
    (55, 23.0, 28.0),
    (45, 22.0, 27.0),
    (35, 21.0, 26.0),
    (25, 20.0, 25.0),
    (0, 19.0, 24.0),
)
_OVERWEIGHT_MARGIN = 5.0


def calculate(weight: float, height: float) -> float:
    """Return the BMI rounded to two decimals.

    Raises ``ParameterFormat`` when the inputs overflow to a non-finite
    value.

    >>> calculate(65.0, 1.6)
    25.39
    """
    try:
        bmi = weight / (height ** 2)
    except (OverflowError, ZeroDivisionError):
        bmi = math.inf
    if not math.isfinite(bmi):
        raise ParameterFormat(
            f"Failed to convert value '{weight}/{height}' of parameter 'bmi': BMI is not a finite number"
        )
    return round(bmi, 2)


def age_at(birthdate: date, today: Optional[date] = None) -> int:
    """Full years between ``birthdate`` and ``today``."""
    today = today or date.today()
    years = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        years -= 1
    return years


def category(bmi: float, age: int) -> str:
    for min_age, lower, upper in _NORMAL_BANDS:
        if age >= min_age:
            break
    if bmi < lower:
        return InfoMessages.UNDERWEIGHT
    if bmi <= upper:
        return InfoMessages.NORMAL_WEIGHT
    if bmi <= upper + _OVERWEIGHT_MARGIN:
        return InfoMessages.OVERWEIGHT
    return InfoMessages.OBESITY


def describe(birthdate: date, weight: float, height: float, today: Optional[date] = None) -> str:
    """Compute the BMI and phrase it together with the weight category."""
    bmi = calculate(weight, height)
    return InfoMessages.BMI_MESSAGE.format(bmi, category(bmi, age_at(birthdate, today)))
