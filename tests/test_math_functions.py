"""Tests for the angle and distance helpers."""

import math
import pytest

from footprint.utils.math_functions import (
    PI, PI_TIMES_2, adjust_angle_2p, adjust_angle_p, deg_to_rad, distance_between_points,
    error_between_angles, fast_inverse_sqrt, nearest_degree, round_angle_to_degree_precision,
    rad_to_deg, trunc,
)


class TestAdjustAngle:

    def test_pi_is_kept(self):
        assert adjust_angle_p(PI) == pytest.approx(PI)

    def test_minus_pi_maps_to_pi(self):
        assert adjust_angle_p(-PI) == pytest.approx(PI)

    def test_wraps_multiple_turns(self):
        assert adjust_angle_p(PI_TIMES_2 * 3 + 0.5) == pytest.approx(0.5)
        assert adjust_angle_p(-PI_TIMES_2 * 2 - 0.5) == pytest.approx(-0.5)

    def test_range(self):
        for k in range(-720, 721, 7):
            a = adjust_angle_p(math.radians(k))
            assert -PI < a <= PI

    def test_adjust_2p(self):
        assert adjust_angle_2p(-0.5) == pytest.approx(PI_TIMES_2 - 0.5)
        assert adjust_angle_2p(PI_TIMES_2) == pytest.approx(0.0)
        for k in range(-720, 721, 7):
            a = adjust_angle_2p(math.radians(k))
            assert 0.0 <= a < PI_TIMES_2


class TestDegrees:

    def test_nearest_degree(self):
        assert nearest_degree(math.radians(1.4)) == 1
        assert nearest_degree(math.radians(-1.6)) == -2
        assert nearest_degree(PI) == 180
        assert nearest_degree(-PI) == 180
        assert nearest_degree(math.radians(190)) == -170

    @pytest.mark.parametrize("degrees, expected", [
        (0.5, 0), (1.5, 2), (2.5, 2), (-0.5, 0), (-1.5, -2), (179.5, 180), (-179.5, -180),
    ])
    def test_ties_round_to_even(self, degrees, expected):
        assert nearest_degree(math.radians(degrees)) == expected

    def test_conversions(self):
        assert deg_to_rad(180.0) == pytest.approx(PI)
        assert rad_to_deg(-PI / 2) == pytest.approx(-90.0)

    def test_round_to_degree_precision(self):
        assert round_angle_to_degree_precision(math.radians(12.7)) == pytest.approx(math.radians(12))


def test_error_between_angles_crosses_pi():
    assert error_between_angles(math.radians(170), math.radians(-170)) == pytest.approx(math.radians(20))
    assert error_between_angles(math.radians(-170), math.radians(170)) == pytest.approx(math.radians(-20))


def test_distance_between_points():
    assert distance_between_points(0, 0, 3, 4) == pytest.approx(5.0)


def test_trunc_rounds_half_away_from_zero():
    assert trunc(2.5, 0) == 3.0
    assert trunc(-2.5, 0) == -3.0
    assert trunc(1.23456, 2) == pytest.approx(1.23)


@pytest.mark.parametrize("value", [0.25, 1.0, 4.0, 10.0, 12345.0])
def test_fast_inverse_sqrt(value):
    assert fast_inverse_sqrt(value) == pytest.approx(1.0 / math.sqrt(value), rel=2e-3)
