# footprint/lattice.py
"""
Helpers for lattice planners: the ring of neighbour positions at a given
level and the snapping of continuous positions onto the grid.
"""
import math

from footprint.geom.points import Point2D, Point3D

# snapped coordinates are rounded to 1/ADAPTER_PRECISION
ADAPTER_PRECISION = 1000


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def generate_grid_points(level: int, rx: float, ry: float, rz: float) -> list:
    """
    Distinct points on the outer shell of the [-level, level]^3 lattice,
    scaled by the resolution of each axis. An axis with zero resolution
    contributes no shell, so (rx, ry, 0) yields the planar ring.
    """
    positions = set()
    for x in range(-level, level + 1):
        for y in range(-level, level + 1):
            for z in range(-level, level + 1):
                if ((abs(rx) > 0 and abs(x) == level)
                        or (abs(ry) > 0 and abs(y) == level)
                        or (abs(rz) > 0 and abs(z) == level)):
                    positions.add(Point3D(rx * x, ry * y, rz * z))
    return sorted(positions, key=lambda p: (p.x, p.y, p.z))


class PointAdapter2D:
    """Snaps positions to a dx by dy grid."""

    def __init__(self, dx: float, dy: float):
        self.dx = float(dx)
        self.dy = float(dy)

    def adapt_node_id(self, point) -> Point2D:
        x = _round_half_up(point.x / self.dx) * self.dx
        y = _round_half_up(point.y / self.dy) * self.dy
        return Point2D(_round_half_up(x * ADAPTER_PRECISION) / ADAPTER_PRECISION,
                       _round_half_up(y * ADAPTER_PRECISION) / ADAPTER_PRECISION)

    def id_from_position(self, x: float, y: float, z: float = 0.0) -> list:
        return [Point2D(x, y)]
