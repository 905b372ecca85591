# footprint/shapes/sphere.py
import logging

import numpy as np

from footprint.geom.points import Point3D
from footprint.geom.rotation import direction
from footprint.geom.vectors import Vector3D
from footprint.shapes.base import Shape3D
from footprint.shapes.factory import register_shape

logger = logging.getLogger(__name__)


@register_shape("sphere")
class ShapeSphere3D(Shape3D):
    """Ball of fixed radius centered on the rotation center."""

    def __init__(self, radius: float):
        self.radius = float(radius)
        logger.debug("sphere footprint: radius=%.4f", self.radius)

    @classmethod
    def from_config(cls, config):
        return cls(config.require_float("parameters.radius"))

    def __repr__(self):
        return f"ShapeSphere3D(radius={self.radius})"

    @property
    def min_radius(self) -> float:
        return self.radius

    @property
    def max_radius(self) -> float:
        return self.radius

    def border_point_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> Point3D:
        dx, dy, dz = direction(yaw, pitch)
        r = self.radius
        return Point3D(dx * r, dy * r, dz * r)

    def border_distance_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> float:
        return self.radius

    def vertex_at(self, pose) -> list:
        x, y, z, r = pose.x, pose.y, pose.z, self.radius
        return [
            Point3D(x + r, y, z), Point3D(x - r, y, z),
            Point3D(x, y + r, z), Point3D(x, y - r, z),
            Point3D(x, y, z + r), Point3D(x, y, z - r),
        ]

    def axis_at(self, pose) -> list:
        return [axis.rotate(pose.yaw, pose.pitch, pose.roll)
                for axis in (Vector3D.X, Vector3D.Y, Vector3D.Z)]

    def distance_vector_to_point_at_angle(self, pose, point, yaw: float, pitch: float) -> np.ndarray:
        border = pose.to_world(self.border_point_at_relative_angle(yaw, pitch))
        return np.array([[point.x - border.x], [point.y - border.y], [point.z - border.z]])
