# footprint/utils/math_functions.py
"""
Angle and distance helpers shared by the spatial types and the shapes.

All angles are radians unless the name says otherwise.
"""
import math

import numpy as np

PI = math.pi
PI_TIMES_2 = 2.0 * math.pi
PI_DIV_2 = math.pi / 2.0

_FAST_INV_SQRT_MAGIC = 0x5F3759DF


def adjust_angle_p(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    # remainder() lands in [-pi, pi]; only -pi has to be moved
    wrapped = math.remainder(angle, PI_TIMES_2)
    if wrapped <= -PI:
        wrapped += PI_TIMES_2
    return wrapped


def adjust_angle_2p(angle: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    wrapped = angle % PI_TIMES_2
    if wrapped >= PI_TIMES_2:   # tiny negative inputs round up to 2*pi
        wrapped -= PI_TIMES_2
    return wrapped


def deg_to_rad(angle: float) -> float:
    return math.radians(angle)


def rad_to_deg(angle: float) -> float:
    return math.degrees(angle)


def nearest_degree(angle: float) -> int:
    """
    Integer degree closest to an angle given in radians.
    The angle is wrapped into (-pi, pi] first, so the result is in [-180, 180].
    Exact halves round to the even degree (Python's round()).
    """
    return int(round(rad_to_deg(adjust_angle_p(angle))))


def round_angle_to_degree_precision(angle: float) -> float:
    """Truncate an angle (radians) to whole degrees, still in radians."""
    return math.radians(int(math.degrees(angle)))


def error_between_angles(angle1: float, angle2: float) -> float:
    """Signed difference angle2 - angle1, wrapped into (-pi, pi]."""
    return adjust_angle_p(angle2 - angle1)


def distance_between_points(x: float, y: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x, y2 - y)


def trunc(value: float, decimals: int) -> float:
    """Round `value` to `decimals` decimal places (half away from zero)."""
    factor = 10.0 ** decimals
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def fast_inverse_sqrt(value: float) -> float:
    """
    Approximate 1/sqrt(value) with the single-precision bit trick and one
    Newton step (relative error below 0.2%).
    """
    x = np.array([value], dtype=np.float32)
    half = np.float32(0.5) * x
    bits = x.view(np.int32)
    bits = np.int32(_FAST_INV_SQRT_MAGIC) - (bits >> 1)
    y = bits.view(np.float32)
    y = y * (np.float32(1.5) - half * y * y)
    return float(y[0])
