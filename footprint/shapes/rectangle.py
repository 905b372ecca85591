# footprint/shapes/rectangle.py
"""
Rectangular 2D footprints.

The four corner bearings split the circle into the sectors seen by each
side. Border points and distances are precomputed for every integer degree
in [-180, 180] so a query is a table lookup: row `degree + 180`.
"""
import logging
import math

import numpy as np

from footprint.geom.intersections import line_line_intersection
from footprint.geom.points import ORIGIN_2D, Point2D
from footprint.geom.polygons import (BACK_LEFT, BACK_RIGHT, FRONT_LEFT, FRONT_RIGHT,
                                     box_corners, oriented_box)
from footprint.geom.vectors import Vector2D, Vector3D
from footprint.shapes.base import Shape2D
from footprint.shapes.factory import register_shape
from footprint.utils.math_functions import adjust_angle_p, deg_to_rad, nearest_degree

logger = logging.getLogger(__name__)

FRONT, LEFT, RIGHT, BACK = "front", "left", "right", "back"

# corner indices at the start and end of each side, counter-clockwise
SIDE_CORNERS = {
    FRONT: (FRONT_RIGHT, FRONT_LEFT),
    LEFT: (FRONT_LEFT, BACK_LEFT),
    RIGHT: (BACK_RIGHT, FRONT_RIGHT),
    BACK: (BACK_LEFT, BACK_RIGHT),
}

TABLE_SIZE = 361


class ShapeRectangle2DBase(Shape2D):
    """
    Rectangle given by the signed extents of its sides around the rotation
    center: positive_x (front), negative_x (back, <= 0), positive_y (left)
    and negative_y (right, <= 0).
    """

    def __init__(self, positive_x, negative_x, positive_y, negative_y):
        self.positive_x = float(positive_x)
        self.negative_x = float(negative_x)
        self.positive_y = float(positive_y)
        self.negative_y = float(negative_y)

        self.corners = [Point2D(px, py) for px, py in
                        box_corners(self.positive_x, self.negative_x, self.positive_y, self.negative_y)]
        self.corner_angles = [ORIGIN_2D.yaw_to(c) for c in self.corners]

        extents = (self.positive_x, self.negative_x, self.positive_y, self.negative_y)
        self._min_radius = min(abs(e) for e in extents)
        self._max_radius = math.hypot(max(abs(self.positive_x), abs(self.negative_x)),
                                      max(abs(self.positive_y), abs(self.negative_y)))

        self._points = np.zeros((TABLE_SIZE, 2))
        self._distances = np.zeros(TABLE_SIZE)
        self._build_tables()
        logger.debug("%s: extents=%s, %d table entries", type(self).__name__, extents, TABLE_SIZE)

    def _build_tables(self):
        for degree in range(-180, 181):
            angle = deg_to_rad(degree)
            s1, s2 = self.side_segment(self.side_of_angle(angle))
            ray_end = Point2D(math.cos(angle), math.sin(angle))
            hit = line_line_intersection(ORIGIN_2D, ray_end, s1, s2)
            row = degree + 180
            self._points[row] = (hit.x, hit.y)
            self._distances[row] = math.hypot(hit.x, hit.y)

    def side_of_angle(self, angle: float) -> str:
        """Side of the rectangle crossed by the ray at relative bearing `angle`."""
        angle = adjust_angle_p(angle)
        a_fr, a_fl, a_bl, a_br = self.corner_angles
        if a_fr <= angle < a_fl:
            return FRONT
        if a_fl <= angle < a_bl:
            return LEFT
        if a_br <= angle < a_fr:
            return RIGHT
        return BACK

    def side_segment(self, side: str):
        """End points (local frame) of `side`."""
        i, j = SIDE_CORNERS[side]
        return self.corners[i], self.corners[j]

    @property
    def min_radius(self) -> float:
        return self._min_radius

    @property
    def max_radius(self) -> float:
        return self._max_radius

    def border_point_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> Point2D:
        x, y = self._points[nearest_degree(yaw) + 180]
        return Point2D(float(x), float(y))

    def border_distance_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> float:
        return float(self._distances[nearest_degree(yaw) + 180])

    def vertex_at(self, pose) -> list:
        return oriented_box(pose, [(c.x, c.y) for c in self.corners], pose.yaw)

    def axis_at(self, pose) -> list:
        return [Vector2D.X.rotate(pose.yaw), Vector2D.Y.rotate(pose.yaw)]

    def distance_vector_to_point_at_angle(self, pose, point, angle: float) -> np.ndarray:
        s1, s2 = self.side_segment(self.side_of_angle(angle))
        closest = Point2D(point.x, point.y).project_over_segment(pose.to_world(s1), pose.to_world(s2))
        return np.array([[point.x - closest.x], [point.y - closest.y]])


@register_shape("rectangle")
class ShapeRectangle2D(ShapeRectangle2DBase):
    """Rectangle centered on its rotation center; dim_x, dim_y are full lengths."""

    def __init__(self, dim_x: float, dim_y: float):
        self.dim_x = float(dim_x)
        self.dim_y = float(dim_y)
        hx, hy = self.dim_x / 2.0, self.dim_y / 2.0
        super().__init__(hx, -hx, hy, -hy)

    @classmethod
    def from_config(cls, config):
        return cls(config.require_float("parameters.dimX"),
                   config.require_float("parameters.dimY"))

    def __repr__(self):
        return f"ShapeRectangle2D(dim_x={self.dim_x}, dim_y={self.dim_y})"


@register_shape("rectangle_asymmetric")
class ShapeRectangle2DAsymmetric(ShapeRectangle2DBase):
    """
    Rectangle whose rotation center is off the geometric center. Built from
    signed extents; records give the back/right lengths as positive numbers.
    """

    @classmethod
    def from_config(cls, config):
        return cls(config.require_float("parameters.positiveX"),
                   -config.require_float("parameters.negativeX"),
                   config.require_float("parameters.positiveY"),
                   -config.require_float("parameters.negativeY"))

    def distance_to_centroid_x(self) -> float:
        return (self.positive_x + self.negative_x) / 2.0

    def distance_to_centroid_y(self) -> float:
        return (self.positive_y + self.negative_y) / 2.0

    def distance_between_center_and_centroid(self, pose) -> Vector3D:
        """Offset from the rotation center to the geometric center, in world frame."""
        offset = Vector3D(self.distance_to_centroid_x(), self.distance_to_centroid_y(), 0.0)
        return offset.rotate(pose.yaw)

    def __repr__(self):
        return (f"ShapeRectangle2DAsymmetric(positive_x={self.positive_x}, negative_x={self.negative_x}, "
                f"positive_y={self.positive_y}, negative_y={self.negative_y})")
