# footprint/geom/rotation.py
"""
Euler yaw -> pitch -> roll rotation (Z, then Y, then X; yaw outermost).

The composed matrix is R = Rz(yaw) @ Ry(pitch) @ Rx(roll). `rotate_xyz`
applies the same matrix in closed form for single points, which is what the
spatial types use; `rotation_matrix` returns it as a numpy array for callers
that work with whole sets of points.
"""
import math

import numpy as np


def rotate_xy(x, y, angle):
    """Rotate (x, y) about the origin by `angle` (yaw-only rotation)."""
    c, s = math.cos(angle), math.sin(angle)
    return x * c - y * s, x * s + y * c


def rotate_xyz(x, y, z, yaw, pitch, roll):
    """Rotate (x, y, z) about the origin by the composed yaw/pitch/roll matrix."""
    sy, cy = math.sin(yaw), math.cos(yaw)
    sp, cp = math.sin(pitch), math.cos(pitch)
    sr, cr = math.sin(roll), math.cos(roll)
    return (
        x * (cy * cp) + y * (cy * sp * sr - sy * cr) + z * (cy * sp * cr + sy * sr),
        x * (sy * cp) + y * (sy * sp * sr + cy * cr) + z * (sy * sp * cr - cy * sr),
        x * (-sp) + y * (cp * sr) + z * (cp * cr),
    )


def rotation_matrix(yaw: float, pitch: float = 0.0, roll: float = 0.0) -> np.ndarray:
    cy, sy = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cr, sr = math.cos(roll), math.sin(roll)
    Rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])
    Ry = np.array([[cp, 0.0, sp], [0.0, 1.0, 0.0], [-sp, 0.0, cp]])
    Rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
    return Rz @ Ry @ Rx


def rotation_matrix_2d(yaw: float) -> np.ndarray:
    c, s = math.cos(yaw), math.sin(yaw)
    return np.array([[c, -s], [s, c]])


def direction(yaw: float, pitch: float = 0.0):
    """
    Unit vector of a bearing: `yaw` around Z from +X, `pitch` as elevation
    over the XY plane (positive up). Equals rotate_xyz(1, 0, 0, yaw, -pitch, 0).
    """
    cp = math.cos(pitch)
    return cp * math.cos(yaw), cp * math.sin(yaw), math.sin(pitch)
