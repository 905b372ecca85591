# footprint/geom/vectors.py
"""Directions and displacements (same layout as points, different meaning)."""
import math
from dataclasses import dataclass

import numpy as np

from footprint.geom.points import _RoundedValue
from footprint.geom.rotation import rotate_xy, rotate_xyz
from footprint.utils.math_functions import fast_inverse_sqrt

# squared lengths within this band around 1 are treated as already unitary
UNIT_TOLERANCE = 0.01


def _inverse_length(squared: float) -> float:
    """1/sqrt(squared): float32 estimate refined by one float64 Newton step."""
    inv = fast_inverse_sqrt(squared)
    return inv * (1.5 - 0.5 * squared * inv * inv)


@dataclass(frozen=True, eq=False)
class Vector2D(_RoundedValue):
    x: float
    y: float

    @classmethod
    def between(cls, a, b) -> "Vector2D":
        """Vector from point a to point b."""
        return cls(b.x - a.x, b.y - a.y)

    @property
    def z(self) -> float:
        return 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2D":
        squared = self.x * self.x + self.y * self.y
        if abs(squared - 1.0) <= UNIT_TOLERANCE or squared == 0.0:
            return self
        inv = _inverse_length(squared)
        return Vector2D(self.x * inv, self.y * inv)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0) -> "Vector2D":
        return Vector2D(*rotate_xy(self.x, self.y, yaw))


@dataclass(frozen=True, eq=False)
class Vector3D(_RoundedValue):
    x: float
    y: float
    z: float

    @classmethod
    def between(cls, a, b) -> "Vector3D":
        return cls(b.x - a.x, b.y - a.y, b.z - a.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3D":
        squared = self.x * self.x + self.y * self.y + self.z * self.z
        if abs(squared - 1.0) <= UNIT_TOLERANCE or squared == 0.0:
            return self
        inv = _inverse_length(squared)
        return Vector3D(self.x * inv, self.y * inv, self.z * inv)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0) -> "Vector3D":
        return Vector3D(*rotate_xyz(self.x, self.y, self.z, yaw, pitch, roll))


Vector2D.X = Vector2D(1.0, 0.0)
Vector2D.Y = Vector2D(0.0, 1.0)
Vector2D.ZERO = Vector2D(0.0, 0.0)

Vector3D.X = Vector3D(1.0, 0.0, 0.0)
Vector3D.Y = Vector3D(0.0, 1.0, 0.0)
Vector3D.Z = Vector3D(0.0, 0.0, 1.0)
Vector3D.ZERO = Vector3D(0.0, 0.0, 0.0)
