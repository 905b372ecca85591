# footprint/shapes/base.py
"""
Capability interfaces shared by every footprint.

A shape is described in the local frame of its rotation center: +x is the
heading ("front"), +y the left side and +z up. Queries take a bearing
relative to that heading, or a pose placing the rotation center in the
world. Instances are read-only after __init__.
"""
from abc import ABC, abstractmethod

import numpy as np

from footprint.geom.rotation import rotation_matrix, rotation_matrix_2d
from footprint.geom.vectors import Vector3D


class Shape(ABC):
    """Operations every footprint answers, whatever its dimension."""

    # tag used by the factory registry; set by @register_shape
    TYPE = None

    @property
    @abstractmethod
    def min_radius(self) -> float:
        """Optimistic radius: no border point is closer to the rotation center."""

    @property
    @abstractmethod
    def max_radius(self) -> float:
        """Pessimistic radius: no border point is farther from the rotation center."""

    @abstractmethod
    def border_point_at_relative_angle(self, yaw: float, pitch: float = 0.0):
        """Border point (local frame) along the ray at the given relative bearing."""

    @abstractmethod
    def border_distance_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> float:
        """Distance from the rotation center to the border at the given bearing."""

    @abstractmethod
    def vertex_at(self, pose) -> list:
        """Vertices of the shape with its rotation center placed at `pose`."""

    @abstractmethod
    def axis_at(self, pose) -> list:
        """Local axes of the shape expressed in the frame of `pose`."""

    @abstractmethod
    def distance_vector_to_point(self, pose, point) -> np.ndarray:
        """Column vector from the border of the shape (placed at `pose`) to `point`."""

    def axes_matrix_at(self, pose) -> np.ndarray:
        """3x3 matrix whose columns are the unit axes of the shape at `pose`."""
        return rotation_matrix(pose.yaw, pose.pitch, pose.roll)

    def distance_to_centroid_x(self) -> float:
        return 0.0

    def distance_to_centroid_y(self) -> float:
        return 0.0

    def distance_to_centroid_z(self) -> float:
        return 0.0

    def distance_between_center_and_centroid(self, pose) -> Vector3D:
        return Vector3D.ZERO


class Shape2D(Shape):
    """Planar footprint; pitch arguments are accepted and ignored."""

    def distance_vector_to_point(self, pose, point) -> np.ndarray:
        """
        Column vector [[dx], [dy]] from the border to `point`. The bearing of
        the point relative to the heading of `pose` selects the part of the
        border used.
        """
        angle = pose.relative_yaw_to(point)
        return self.distance_vector_to_point_at_angle(pose, point, angle)

    @abstractmethod
    def distance_vector_to_point_at_angle(self, pose, point, angle: float) -> np.ndarray:
        """Same as distance_vector_to_point with the relative bearing already known."""

    def axes_matrix_2d_at(self, pose) -> np.ndarray:
        return rotation_matrix_2d(pose.yaw)

    def axes_matrix_at(self, pose) -> np.ndarray:
        return rotation_matrix(pose.yaw)


class Shape3D(Shape):
    """Volumetric footprint; bearings are (yaw, pitch) pairs."""

    def distance_vector_to_point(self, pose, point) -> np.ndarray:
        """Column vector [[dx], [dy], [dz]] from the border to `point`."""
        yaw, pitch = pose.relative_angle_to(point)
        return self.distance_vector_to_point_at_angle(pose, point, yaw, pitch)

    @abstractmethod
    def distance_vector_to_point_at_angle(self, pose, point, yaw: float, pitch: float) -> np.ndarray:
        """Same as distance_vector_to_point with the relative bearing already known."""
