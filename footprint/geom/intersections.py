# footprint/geom/intersections.py
"""
Line/plane and line/line intersections used by the shapes to find where a
ray from the rotation center leaves the body.
"""
from footprint.geom.points import Point2D, Point3D


def _det(a, b, c, d):
    return a * d - b * c


def intersection_between_line_and_plane(a, b, normal, distance: float) -> Point3D:
    """
    Point where the line through a and b crosses the plane {p : normal . p = distance}.
    The line must not be parallel to the plane (normal . (b - a) != 0).
    """
    normal_dot_a = a.x * normal.x + a.y * normal.y + a.z * normal.z
    bax, bay, baz = b.x - a.x, b.y - a.y, b.z - a.z
    normal_dot_ba = bax * normal.x + bay * normal.y + baz * normal.z
    t = (distance - normal_dot_a) / normal_dot_ba
    return Point3D(a.x + bax * t, a.y + bay * t, a.z + baz * t)


def line_line_intersection(a1, a2, b1, b2):
    """
    Intersection of the infinite lines a1-a2 and b1-b2 (determinant method).
    Returns None when the lines are parallel.
    """
    det_a = _det(a1.x, a1.y, a2.x, a2.y)
    det_b = _det(b1.x, b1.y, b2.x, b2.y)
    adx, ady = a1.x - a2.x, a1.y - a2.y
    bdx, bdy = b1.x - b2.x, b1.y - b2.y
    denom = _det(adx, ady, bdx, bdy)
    if denom == 0:
        return None   # parallel (or coincident): no single solution
    x = _det(det_a, adx, det_b, bdx) / denom
    y = _det(det_a, ady, det_b, bdy) / denom
    return Point2D(x, y)


def project_over_segment(point, s1, s2):
    """Closest point of the segment [s1, s2] to `point` (2D or 3D)."""
    if isinstance(s1, Point3D):
        return Point3D(point.x, point.y, point.z).project_over_segment(s1, s2)
    return Point2D(point.x, point.y).project_over_segment(s1, s2)
