# footprint/geom/poses.py
"""
Poses (position + heading) and states (pose + velocities).

Heading angles are kept in (-pi, pi]. Rotating a pose moves its position
about the origin and adds the rotation to its heading; velocities of a
state are expressed in its local frame, so they travel unchanged through
add/subtract/rotate.
"""
import math
from dataclasses import dataclass, replace

from footprint.geom.points import ORIGIN_3D, Point2D, Point3D
from footprint.geom.rotation import rotate_xy, rotate_xyz
from footprint.utils.math_functions import adjust_angle_p


@dataclass(frozen=True, eq=False)
class Pose2D(Point2D):
    """Simple pose container (meters, radians)."""
    yaw: float = 0.0

    _ANGLE_FIELDS = ("yaw",)

    def __post_init__(self):
        object.__setattr__(self, "yaw", adjust_angle_p(self.yaw))

    @classmethod
    def from_point(cls, point, yaw: float = 0.0) -> "Pose2D":
        return cls(point.x, point.y, yaw)

    @property
    def pitch(self) -> float:
        return 0.0

    @property
    def roll(self) -> float:
        return 0.0

    @property
    def position(self) -> Point2D:
        return Point2D(self.x, self.y)

    def relative_yaw_to(self, point) -> float:
        """Bearing of `point` measured from the heading of this pose."""
        return adjust_angle_p(math.atan2(point.y - self.y, point.x - self.x) - self.yaw)

    def to_local(self, point) -> Point2D:
        x, y = rotate_xy(point.x - self.x, point.y - self.y, -self.yaw)
        return Point2D(x, y)

    def to_world(self, point) -> Point2D:
        x, y = rotate_xy(point.x, point.y, self.yaw)
        return Point2D(self.x + x, self.y + y)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0):
        rotated = super().rotate(yaw, pitch, roll)
        return replace(rotated, yaw=self.yaw + yaw)

    def symmetric_plane_xz(self):
        return replace(self, y=-self.y, yaw=-self.yaw)

    def symmetric_plane_yz(self):
        return replace(self, x=-self.x, yaw=math.pi - self.yaw)

    def symmetric_plane_xy(self):
        return replace(self)


@dataclass(frozen=True, eq=False)
class Pose3D(Point3D):
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    _ANGLE_FIELDS = ("yaw", "pitch", "roll")

    def __post_init__(self):
        object.__setattr__(self, "yaw", adjust_angle_p(self.yaw))
        object.__setattr__(self, "pitch", adjust_angle_p(self.pitch))
        object.__setattr__(self, "roll", adjust_angle_p(self.roll))

    @classmethod
    def from_point(cls, point, yaw: float = 0.0, pitch: float = 0.0, roll: float = 0.0) -> "Pose3D":
        return cls(point.x, point.y, point.z, yaw, pitch, roll)

    @property
    def position(self) -> Point3D:
        return Point3D(self.x, self.y, self.z)

    def relative_yaw_to(self, point) -> float:
        return adjust_angle_p(math.atan2(point.y - self.y, point.x - self.x) - self.yaw)

    def relative_angle_to(self, point):
        """
        (yaw, pitch) of `point` seen from this pose: the bearing of the point
        expressed in the local frame, pitch as elevation (positive up).
        """
        local = self.to_local(point)
        return ORIGIN_3D.angle_to(local)

    def to_local(self, point) -> Point3D:
        """Coordinates of a world point in the frame of this pose."""
        dx, dy, dz = point.x - self.x, point.y - self.y, point.z - self.z
        # inverse of Rz.Ry.Rx is Rx(-roll).Ry(-pitch).Rz(-yaw)
        x, y, z = rotate_xyz(dx, dy, dz, -self.yaw, 0.0, 0.0)
        x, y, z = rotate_xyz(x, y, z, 0.0, -self.pitch, 0.0)
        x, y, z = rotate_xyz(x, y, z, 0.0, 0.0, -self.roll)
        return Point3D(x, y, z)

    def to_world(self, point) -> Point3D:
        """World coordinates of a point given in the frame of this pose."""
        x, y, z = rotate_xyz(point.x, point.y, point.z, self.yaw, self.pitch, self.roll)
        return Point3D(self.x + x, self.y + y, self.z + z)

    def rotate(self, yaw: float, pitch: float = 0.0, roll: float = 0.0):
        # pitch keeps its sign after composition
        rotated = super().rotate(yaw, pitch, roll)
        return replace(rotated, yaw=self.yaw + yaw, pitch=self.pitch + pitch, roll=self.roll + roll)

    def symmetric_plane_xz(self):
        return replace(self, y=-self.y, yaw=-self.yaw, roll=-self.roll)

    def symmetric_plane_yz(self):
        return replace(self, x=-self.x, yaw=math.pi - self.yaw)

    def symmetric_plane_xy(self):
        return replace(self, z=-self.z, pitch=-self.pitch, roll=-self.roll)


@dataclass(frozen=True, eq=False)
class State2D(Pose2D):
    vx: float = 0.0
    vy: float = 0.0
    w: float = 0.0

    @property
    def pose(self) -> Pose2D:
        return Pose2D(self.x, self.y, self.yaw)

    def symmetric_plane_xz(self):
        return replace(super().symmetric_plane_xz(), vy=-self.vy, w=-self.w)

    def symmetric_plane_yz(self):
        return replace(super().symmetric_plane_yz(), vy=-self.vy, w=-self.w)

    def symmetry_plane(self) -> int:
        """0 when the heading is closest to the X axis, 1 when closest to Y."""
        return abs(round(2.0 * self.yaw / math.pi)) % 2


@dataclass(frozen=True, eq=False)
class State3D(Pose3D):
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    vyaw: float = 0.0
    vpitch: float = 0.0
    vroll: float = 0.0

    @property
    def pose(self) -> Pose3D:
        return Pose3D(self.x, self.y, self.z, self.yaw, self.pitch, self.roll)

    def symmetric_plane_xz(self):
        return replace(super().symmetric_plane_xz(), vy=-self.vy, vyaw=-self.vyaw, vroll=-self.vroll)

    def symmetric_plane_yz(self):
        return replace(super().symmetric_plane_yz(), vy=-self.vy, vyaw=-self.vyaw, vroll=-self.vroll)

    def symmetric_plane_xy(self):
        return replace(super().symmetric_plane_xy(), vz=-self.vz, vpitch=-self.vpitch)

    def symmetry_plane(self) -> int:
        return abs(round(2.0 * self.yaw / math.pi)) % 2


POSE_2D_ZERO = Pose2D(0.0, 0.0, 0.0)
POSE_3D_ZERO = Pose3D(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
