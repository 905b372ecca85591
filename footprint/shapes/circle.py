# footprint/shapes/circle.py
import logging
import math

import numpy as np

from footprint.geom.points import Point2D
from footprint.geom.vectors import Vector2D
from footprint.shapes.base import Shape2D
from footprint.shapes.factory import register_shape

logger = logging.getLogger(__name__)


@register_shape("circle")
class ShapeCircle2D(Shape2D):
    """Disc of fixed radius centered on the rotation center."""

    def __init__(self, radius: float):
        self.radius = float(radius)
        logger.debug("circle footprint: radius=%.4f", self.radius)

    @classmethod
    def from_config(cls, config):
        return cls(config.require_float("parameters.radius"))

    def __repr__(self):
        return f"ShapeCircle2D(radius={self.radius})"

    @property
    def min_radius(self) -> float:
        return self.radius

    @property
    def max_radius(self) -> float:
        return self.radius

    def border_point_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> Point2D:
        return Point2D(math.cos(yaw) * self.radius, math.sin(yaw) * self.radius)

    def border_distance_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> float:
        return self.radius

    def vertex_at(self, pose) -> list:
        # a disc looks the same under any heading: extrema only follow the position
        x, y, r = pose.x, pose.y, self.radius
        return [Point2D(x + r, y), Point2D(x - r, y), Point2D(x, y + r), Point2D(x, y - r)]

    def axis_at(self, pose) -> list:
        return [Vector2D.X.rotate(pose.yaw), Vector2D.Y.rotate(pose.yaw)]

    def distance_vector_to_point_at_angle(self, pose, point, angle: float) -> np.ndarray:
        border = pose.to_world(self.border_point_at_relative_angle(angle))
        return np.array([[point.x - border.x], [point.y - border.y]])
