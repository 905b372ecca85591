# footprint/geom/polygons.py
import math

from footprint.geom.points import Point2D

# corner order used everywhere: front-right, front-left, back-left, back-right
FRONT_RIGHT, FRONT_LEFT, BACK_LEFT, BACK_RIGHT = range(4)


def box_corners(positive_x, negative_x, positive_y, negative_y):
    """
    Corners of an axis-aligned rectangle in the local frame of its rotation center.
    negative_x / negative_y are signed (<= 0) extents of the back and right sides.
    """
    return [(positive_x, negative_y), (positive_x, positive_y),
            (negative_x, positive_y), (negative_x, negative_y)]


def oriented_box(center, corners_local, theta):
    """
    Return the 4 vertices of a rectangle whose rotation center sits at 'center'
    with heading 'theta'. corners_local comes from box_corners().
    """
    x, y = center.x, center.y
    # rotate all corners about (x, y)
    c, s = math.cos(theta), math.sin(theta)
    return [Point2D(x + c*px - s*py, y + s*px + c*py) for (px, py) in corners_local]
