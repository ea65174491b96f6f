"""
Time Converter
==============
Pure conversion between decimal hours (e.g. 2.5) and hour/minute components
(e.g. 2h 30m).

Why is this file needed?
------------------------
1. Precision: Binary floats cannot hold most hour fractions exactly
   (8.35 is really 8.349999...). Minutes are therefore extracted in two
   stages: round to 0.01 h first, split afterwards.
2. Sign handling: Selector columns only show magnitudes. The sign lives in
   its own column, so every extractor here returns non-negative numbers.

Note: This module must stay free of Qt imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
import math
from typing import Optional

from hourpicker.config import MINUTES_PER_HOUR

logger = logging.getLogger(__name__)

# Number of decimal places the hours are rounded to before splitting.
HOURS_DECIMAL_PLACES = 2

# Magnitudes beyond this are saturated; scaling them for rounding would overflow.
MAX_HOURS_MAGNITUDE = 1e12


class Sign(IntEnum):
    """Sign of a duration. Values double as the sign column index."""
    PLUS = 0
    MINUS = 1

    @property
    def factor(self) -> int:
        return -1 if self is Sign.MINUS else 1


@dataclass(frozen=True)
class TimeComponents:
    """A duration as magnitudes plus an explicit sign."""
    sign: Sign
    hour: int
    minute: int


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_hours(decimal_hours: float, places: int = HOURS_DECIMAL_PLACES) -> float:
    """
    Round decimal hours to a fixed number of decimal places.

    Args:
        decimal_hours: Hours in decimal format.
        places: Number of decimal places to keep.

    Returns:
        The rounded value. Ties are rounded away from zero, so 2.345 -> 2.35.
    """
    decimal_hours = saturate_hours(decimal_hours)
    scale = 10 ** places
    return _round_half_away(decimal_hours * scale) / scale


def saturate_hours(decimal_hours: float) -> float:
    """Clamp the magnitude to MAX_HOURS_MAGNITUDE, keeping the sign."""
    if abs(decimal_hours) > MAX_HOURS_MAGNITUDE:
        return math.copysign(MAX_HOURS_MAGNITUDE, decimal_hours)
    return decimal_hours


def is_valid_hours(value: float) -> bool:
    return math.isfinite(value)


def sign_of(decimal_hours: float) -> Sign:
    """Sign of the value. -0.0 counts as negative."""
    return Sign.MINUS if math.copysign(1.0, decimal_hours) < 0 else Sign.PLUS


def components_to_hours(hour: int, minute: int, sign: Sign = Sign.PLUS) -> float:
    """
    Convert hour and minute components into decimal hours.

    The hour part and the minute fraction are computed independently and then
    summed. A negative ``hour`` implies a negative result as well.

    Example:
        components_to_hours(2, 30) -> 2.5
        components_to_hours(-2, 30) -> -2.5
        components_to_hours(2, 30, Sign.MINUS) -> -2.5

    Args:
        hour: Hour component (magnitude, or negative to signal a negative value).
        minute: Minute component in [0, 59].
        sign: Explicit sign of the value.

    Returns:
        Signed decimal hours.
    """
    if hour < 0:
        sign = Sign.MINUS
    hours_part = float(abs(hour))
    minutes_part = minute / MINUTES_PER_HOUR
    return sign.factor * (hours_part + minutes_part)


def hours_to_hour_magnitude(decimal_hours: float) -> int:
    """
    Hour magnitude of a decimal hours value (always positive).

    Example:
        hours_to_hour_magnitude(8.5) -> 8
        hours_to_hour_magnitude(-8.5) -> 8
    """
    return int(abs(decimal_hours))


def hours_to_minute_magnitude(decimal_hours: float) -> int:
    """
    Minute magnitude of a decimal hours value (always positive).

    The value is first rounded to two decimal places, then the hundredths
    are converted into minutes and rounded to the nearest minute.

    Example:
        hours_to_minute_magnitude(8.5) -> 30
        hours_to_minute_magnitude(-8.5) -> 30
        hours_to_minute_magnitude(2.999) -> 0
    """
    hours_rounded = round_hours(abs(decimal_hours))
    hundredths = int(_round_half_away(hours_rounded * 100)) % 100
    # 0.01 h == 0.6 min, at most 0.99 h -> 59.4 min
    return int(_round_half_away(hundredths * 0.6))


def hours_to_components(decimal_hours: float, max_hour: Optional[int] = None) -> TimeComponents:
    """
    Split decimal hours into sign, hour and minute.

    Unlike calling the two magnitude extractors separately, the hour is taken
    from the same rounded value as the minute, so 2.999 becomes 3h 0m
    instead of 2h 0m.

    Args:
        decimal_hours: Hours in decimal format.
        max_hour: If given, the hour magnitude is clamped to this value.

    Returns:
        The normalised components.
    """
    hours_rounded = round_hours(abs(decimal_hours))
    hour = hours_to_hour_magnitude(hours_rounded)
    minute = hours_to_minute_magnitude(hours_rounded)

    if max_hour is not None and hour > max_hour:
        logger.warning(f"Hour magnitude {hour} exceeds maximum {max_hour}, clamping.")
        hour = max_hour

    return TimeComponents(sign=sign_of(decimal_hours), hour=hour, minute=minute)
