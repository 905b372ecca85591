# footprint/geom/points.py
"""
Positions in the plane and in space.

Points are immutable; every operation returns a new instance built with
dataclasses.replace(), so subclasses (poses, states) keep their extra fields
(heading, velocities) untouched through add/subtract.

Two points are equal when all their fields agree after scaling by PRECISION
and rounding, which absorbs the float drift of repeated rotations.
"""
import math
from dataclasses import dataclass, fields, replace

import numpy as np

from footprint.geom.rotation import rotate_xy, rotate_xyz
from footprint.utils.math_functions import PI_TIMES_2, adjust_angle_2p, adjust_angle_p

PRECISION = 1e4
_FULL_TURN_KEY = round(PI_TIMES_2 * PRECISION)


class _RoundedValue:
    """Equality and hashing at fixed PRECISION over all dataclass fields."""

    __slots__ = ()

    # fields holding angles; keyed modulo a full turn so pi and -pi agree
    _ANGLE_FIELDS = ()

    def _key(self):
        key = []
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in self._ANGLE_FIELDS:
                key.append(round(adjust_angle_2p(value) * PRECISION) % _FULL_TURN_KEY)
            else:
                key.append(round(value * PRECISION))
        return tuple(key)

    def __eq__(self, other):
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


@dataclass(frozen=True, eq=False)
class Point2D(_RoundedValue):
    x: float
    y: float

    @property
    def z(self) -> float:
        return 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def distance(self, point) -> float:
        return math.hypot(self.x - point.x, self.y - point.y)

    def yaw_to(self, point) -> float:
        """Absolute bearing from this point to `point`, in (-pi, pi]."""
        return adjust_angle_p(math.atan2(point.y - self.y, point.x - self.x))

    def pitch_to(self, point) -> float:
        return 0.0

    def roll_to(self, point) -> float:
        return 0.0

    def add(self, move):
        return replace(self, x=self.x + move.x, y=self.y + move.y)

    def subtract(self, move):
        return replace(self, x=self.x - move.x, y=self.y - move.y)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0):
        """Rotate about the origin; only yaw applies in the plane."""
        x, y = rotate_xy(self.x, self.y, yaw)
        return replace(self, x=x, y=y)

    def project_over_line(self, r1: "Point2D", r2: "Point2D") -> "Point2D":
        """Orthogonal projection onto the infinite line through r1 and r2."""
        dx, dy = r2.x - r1.x, r2.y - r1.y
        t = ((self.x - r1.x) * dx + (self.y - r1.y) * dy) / (dx * dx + dy * dy)
        return Point2D(r1.x + t * dx, r1.y + t * dy)

    def project_over_segment(self, r1: "Point2D", r2: "Point2D") -> "Point2D":
        """Closest point of the segment [r1, r2]; clamps to the endpoints."""
        dx, dy = r2.x - r1.x, r2.y - r1.y
        t = ((self.x - r1.x) * dx + (self.y - r1.y) * dy) / (dx * dx + dy * dy)
        if t < 0.0:
            return Point2D(r1.x, r1.y)
        if t > 1.0:
            return Point2D(r2.x, r2.y)
        return Point2D(r1.x + t * dx, r1.y + t * dy)

    def distance_to_segment(self, r1: "Point2D", r2: "Point2D") -> float:
        return self.distance(self.project_over_segment(r1, r2))


@dataclass(frozen=True, eq=False)
class Point3D(_RoundedValue):
    x: float
    y: float
    z: float

    @classmethod
    def from_2d(cls, point) -> "Point3D":
        return cls(point.x, point.y, 0.0)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, point) -> float:
        dx, dy, dz = point.x - self.x, point.y - self.y, point.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def yaw_to(self, point) -> float:
        return adjust_angle_p(math.atan2(point.y - self.y, point.x - self.x))

    def pitch_to(self, point) -> float:
        """Elevation of `point` over the XY plane of this point."""
        dx, dy = point.x - self.x, point.y - self.y
        return adjust_angle_p(math.atan2(point.z - self.z, math.hypot(dx, dy)))

    def roll_to(self, point) -> float:
        return adjust_angle_p(math.atan2(point.y - self.y, point.z - self.z))

    def angle_to(self, point):
        """(yaw, pitch) from this point to `point`."""
        return self.yaw_to(point), self.pitch_to(point)

    def add(self, move):
        return replace(self, x=self.x + move.x, y=self.y + move.y, z=self.z + move.z)

    def subtract(self, move):
        return replace(self, x=self.x - move.x, y=self.y - move.y, z=self.z - move.z)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0):
        x, y, z = rotate_xyz(self.x, self.y, self.z, yaw, pitch, roll)
        return replace(self, x=x, y=y, z=z)

    def project_over_segment(self, s1: "Point3D", s2: "Point3D") -> "Point3D":
        vx, vy, vz = s2.x - s1.x, s2.y - s1.y, s2.z - s1.z
        c1 = (self.x - s1.x) * vx + (self.y - s1.y) * vy + (self.z - s1.z) * vz
        if c1 <= 0.0:
            return Point3D(s1.x, s1.y, s1.z)
        c2 = vx * vx + vy * vy + vz * vz
        if c2 <= c1:
            return Point3D(s2.x, s2.y, s2.z)
        b = c1 / c2
        return Point3D(s1.x + b * vx, s1.y + b * vy, s1.z + b * vz)

    def distance_to_segment(self, s1: "Point3D", s2: "Point3D") -> float:
        return self.distance(self.project_over_segment(s1, s2))


ORIGIN_2D = Point2D(0.0, 0.0)
ORIGIN_3D = Point3D(0.0, 0.0, 0.0)
