import math

import numpy as np
import pytest

from hourpicker.model.time_converter import (
    Sign, TimeComponents, components_to_hours, hours_to_components, hours_to_hour_magnitude,
    hours_to_minute_magnitude, is_valid_hours, round_hours, saturate_hours, sign_of,
    MAX_HOURS_MAGNITUDE
)


class TestComponentsToHours:
    def test_positive(self):
        assert components_to_hours(2, 30) == 2.5

    def test_negative_hour_implies_negative_value(self):
        assert components_to_hours(-2, 30) == -2.5

    def test_explicit_sign(self):
        assert components_to_hours(2, 30, Sign.MINUS) == -2.5

    def test_minute_fraction(self):
        assert components_to_hours(2, 59, Sign.MINUS) == pytest.approx(-2.9833333, abs=1e-7)
        assert components_to_hours(0, 15) == 0.25

    def test_negative_zero_keeps_sign(self):
        value = components_to_hours(0, 0, Sign.MINUS)
        assert value == 0.0
        assert math.copysign(1.0, value) < 0


class TestMagnitudes:
    def test_hour_magnitude_is_positive(self):
        assert hours_to_hour_magnitude(8.5) == 8
        assert hours_to_hour_magnitude(-8.5) == 8

    def test_minute_magnitude_is_positive(self):
        assert hours_to_minute_magnitude(8.5) == 30
        assert hours_to_minute_magnitude(-8.5) == 30

    def test_float_artifacts_do_not_shift_minutes(self):
        # 8.35 is stored as 8.3499999...
        assert hours_to_minute_magnitude(8.35) == 21
        assert hours_to_minute_magnitude(25.4) == 24

    def test_minute_is_rounded_after_two_place_rounding(self):
        # 2.999 -> 3.00 -> 0 minutes, not 59 or 60
        assert hours_to_minute_magnitude(2.999) == 0
        # the raw hour extractor is independent of that rounding
        assert hours_to_hour_magnitude(2.999) == 2

    def test_minute_never_reaches_sixty(self):
        values = np.linspace(-50.0, 50.0, 20001)
        minutes = [hours_to_minute_magnitude(float(v)) for v in values]
        assert min(minutes) == 0
        assert max(minutes) == 59

    def test_minute_sign_independence(self):
        for v in np.linspace(0.0, 30.0, 3001):
            assert hours_to_minute_magnitude(float(v)) == hours_to_minute_magnitude(float(-v))


class TestRounding:
    def test_ties_round_away_from_zero(self):
        assert round_hours(0.125) == 0.13
        assert round_hours(-0.125) == -0.13

    def test_default_two_places(self):
        assert round_hours(2.999) == 3.0
        assert round_hours(2.994) == 2.99


class TestHoursToComponents:
    def test_normalises_rollover_boundary(self):
        # raw extractors give 2h 0m; the combined split keeps hour and minute consistent
        assert hours_to_components(2.999) == TimeComponents(Sign.PLUS, 3, 0)

    def test_negative_value(self):
        assert hours_to_components(-8.25) == TimeComponents(Sign.MINUS, 8, 15)

    def test_negative_zero(self):
        assert hours_to_components(-0.0).sign is Sign.MINUS

    def test_clamps_to_max_hour(self):
        assert hours_to_components(40.5, max_hour=23) == TimeComponents(Sign.PLUS, 23, 30)

    @pytest.mark.parametrize("value, sign", [(1e307, Sign.PLUS), (-1e307, Sign.MINUS)])
    def test_huge_values_saturate(self, value, sign):
        assert saturate_hours(value) == math.copysign(MAX_HOURS_MAGNITUDE, value)
        assert hours_to_components(value, max_hour=23) == TimeComponents(sign, 23, 0)
        assert hours_to_minute_magnitude(value) == 0

    @pytest.mark.parametrize("sign", list(Sign))
    def test_round_trip_over_grid(self, sign):
        max_hour = 30
        for hour in range(max_hour + 1):
            for minute in range(60):
                value = components_to_hours(hour, minute, sign)
                assert hours_to_components(value, max_hour=max_hour) == TimeComponents(sign, hour, minute)
                assert hours_to_hour_magnitude(value) == hour
                assert hours_to_minute_magnitude(value) == minute


def test_sign_of():
    assert sign_of(1.0) is Sign.PLUS
    assert sign_of(0.0) is Sign.PLUS
    assert sign_of(-0.5) is Sign.MINUS
    assert Sign.MINUS.factor == -1


def test_is_valid_hours():
    assert is_valid_hours(2.5)
    assert not is_valid_hours(float("nan"))
    assert not is_valid_hours(float("inf"))
