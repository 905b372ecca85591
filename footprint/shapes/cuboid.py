# footprint/shapes/cuboid.py
"""
Box footprint centered on its rotation center.

A ray leaving the center at (yaw, pitch) exits through one of six faces.
Close to the horizontal the candidates are the lateral face of the yaw sector
and, unless the ray is level, the top or bottom face. Otherwise the
candidates are the top or bottom face plus the two lateral faces of the yaw
quadrant. The nearest plane crossing wins.
"""
import logging
import math

import numpy as np

from footprint.geom.intersections import intersection_between_line_and_plane
from footprint.geom.points import ORIGIN_3D, Point3D
from footprint.geom.rotation import direction, rotate_xyz
from footprint.geom.vectors import Vector3D
from footprint.shapes.base import Shape3D
from footprint.shapes.factory import register_shape
from footprint.utils.math_functions import PI_DIV_2, adjust_angle_p

logger = logging.getLogger(__name__)

# below this |pitch| the ray is treated as horizontal
HORIZONTAL_PITCH = 0.01

FRONT, BACK, LEFT, RIGHT, TOP, BOTTOM = "front", "back", "left", "right", "top", "bottom"

# outward normal of each face in the local frame
FACE_NORMALS = {
    FRONT: Vector3D.X,
    BACK: Vector3D(-1.0, 0.0, 0.0),
    LEFT: Vector3D.Y,
    RIGHT: Vector3D(0.0, -1.0, 0.0),
    TOP: Vector3D.Z,
    BOTTOM: Vector3D(0.0, 0.0, -1.0),
}


@register_shape("cuboid")
class ShapeCuboid3D(Shape3D):
    """Box of full lengths dim_x, dim_y, dim_z around the rotation center."""

    def __init__(self, dim_x: float, dim_y: float, dim_z: float):
        self.dim_x, self.dim_y, self.dim_z = float(dim_x), float(dim_y), float(dim_z)
        self.half = (self.dim_x / 2.0, self.dim_y / 2.0, self.dim_z / 2.0)
        hx, hy, hz = self.half

        # plane offset of each face: normal . p = offset
        self.face_offsets = {FRONT: hx, BACK: hx, LEFT: hy, RIGHT: hy, TOP: hz, BOTTOM: hz}

        # lateral sectors, same partition as the 2D rectangle
        self.yaw_front_right = math.atan2(-hy, hx)
        self.yaw_front_left = math.atan2(hy, hx)
        self.yaw_back_left = math.atan2(hy, -hx)
        self.yaw_back_right = math.atan2(-hy, -hx)

        self.corners = [Point3D(sx * hx, sy * hy, sz * hz)
                        for sz in (1.0, -1.0)
                        for sx, sy in ((1.0, -1.0), (1.0, 1.0), (-1.0, 1.0), (-1.0, -1.0))]

        self._min_radius = min(self.half)
        self._max_radius = math.sqrt(hx * hx + hy * hy + hz * hz)
        logger.debug("cuboid footprint: dims=(%.4f, %.4f, %.4f)", self.dim_x, self.dim_y, self.dim_z)

    @classmethod
    def from_config(cls, config):
        return cls(config.require_float("parameters.dimX"),
                   config.require_float("parameters.dimY"),
                   config.require_float("parameters.dimZ"))

    def __repr__(self):
        return f"ShapeCuboid3D(dim_x={self.dim_x}, dim_y={self.dim_y}, dim_z={self.dim_z})"

    @property
    def min_radius(self) -> float:
        return self._min_radius

    @property
    def max_radius(self) -> float:
        return self._max_radius

    def lateral_face(self, yaw: float) -> str:
        yaw = adjust_angle_p(yaw)
        if self.yaw_front_right <= yaw < self.yaw_front_left:
            return FRONT
        if self.yaw_front_left <= yaw < self.yaw_back_left:
            return LEFT
        if self.yaw_back_right <= yaw < self.yaw_front_right:
            return RIGHT
        return BACK

    def candidate_faces(self, yaw: float, pitch: float) -> list:
        """Faces the ray at (yaw, pitch) may leave through."""
        vertical = TOP if pitch > 0.0 else BOTTOM
        if abs(pitch) < HORIZONTAL_PITCH:
            # a flat box can still be left through its top or bottom
            if pitch == 0.0:
                return [self.lateral_face(yaw)]
            return [self.lateral_face(yaw), vertical]
        yaw = adjust_angle_p(yaw)
        if yaw < -PI_DIV_2:
            return [vertical, BACK, RIGHT]
        if yaw < 0.0:
            return [vertical, FRONT, RIGHT]
        if yaw < PI_DIV_2:
            return [vertical, FRONT, LEFT]
        return [vertical, BACK, LEFT]

    def border_point_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> Point3D:
        ray_end = Point3D(*direction(yaw, pitch))
        best, best_distance = None, math.inf
        for face in self.candidate_faces(yaw, pitch):
            normal = FACE_NORMALS[face]
            if normal.dot(ray_end) <= 0.0:
                continue   # parallel to the plane or moving away from it
            hit = intersection_between_line_and_plane(ORIGIN_3D, ray_end, normal, self.face_offsets[face])
            distance = hit.norm()
            if distance < best_distance:
                best, best_distance = hit, distance
        return best

    def border_distance_at_relative_angle(self, yaw: float, pitch: float = 0.0) -> float:
        return self.border_point_at_relative_angle(yaw, pitch).norm()

    def face_at_point(self, point) -> str:
        """Face closest to a local point, judged relative to each half extent."""
        hx, hy, hz = self.half
        ratios = {
            FRONT if point.x >= 0.0 else BACK: abs(point.x) / hx,
            LEFT if point.y >= 0.0 else RIGHT: abs(point.y) / hy,
            TOP if point.z >= 0.0 else BOTTOM: abs(point.z) / hz,
        }
        return max(ratios, key=ratios.get)

    def project_onto_face(self, point, face: str) -> Point3D:
        """Closest point of the face rectangle to a local point."""
        hx, hy, hz = self.half
        x = min(max(point.x, -hx), hx)
        y = min(max(point.y, -hy), hy)
        z = min(max(point.z, -hz), hz)
        normal = FACE_NORMALS[face]
        offset = self.face_offsets[face]
        if normal.x:
            x = normal.x * offset
        elif normal.y:
            y = normal.y * offset
        else:
            z = normal.z * offset
        return Point3D(x, y, z)

    def vertex_at(self, pose) -> list:
        return [pose.to_world(c) for c in self.corners]

    def axis_at(self, pose) -> list:
        return [axis.rotate(pose.yaw, pose.pitch, pose.roll)
                for axis in (Vector3D.X, Vector3D.Y, Vector3D.Z)]

    def distance_vector_to_point_at_angle(self, pose, point, yaw: float, pitch: float) -> np.ndarray:
        face = self.face_at_point(self.border_point_at_relative_angle(yaw, pitch))
        local = pose.to_local(point)
        closest = self.project_onto_face(local, face)
        dx, dy, dz = rotate_xyz(local.x - closest.x, local.y - closest.y, local.z - closest.z,
                                pose.yaw, pose.pitch, pose.roll)
        return np.array([[dx], [dy], [dz]])
