# footprint/sim/animate.py
import math

import numpy as np
import matplotlib
matplotlib.use("Agg")  # off-screen backend for image/GIF writing
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPoly
import imageio.v2 as imageio

from footprint.geom.points import Point3D
from footprint.geom.poses import POSE_2D_ZERO, Pose2D, Pose3D
from footprint.shapes.base import Shape3D


def _as_pose(shape, pose):
    """Accept Pose2D/Pose3D or (x, y, theta) tuples; 3D shapes get a level Pose3D."""
    if not isinstance(pose, (Pose2D, Pose3D)):
        x, y, th = pose
        pose = Pose2D(x, y, th)
    if isinstance(shape, Shape3D) and not isinstance(pose, Pose3D):
        pose = Pose3D.from_point(Point3D.from_2d(pose), pose.yaw)
    return pose


def footprint_outline(shape, pose, step=1):
    """(x, y) border points of the shape placed at `pose`, one every `step` degrees."""
    pose = _as_pose(shape, pose)
    outline = []
    for deg in range(-180, 180, max(1, int(step))):
        world = pose.to_world(shape.border_point_at_relative_angle(math.radians(deg)))
        outline.append((world.x, world.y))
    return outline


def draw_footprint(ax, shape, pose, step=1, color="black"):
    """Draw outline, vertices and a heading tick of one footprint."""
    pose = _as_pose(shape, pose)
    ax.add_patch(MplPoly(footprint_outline(shape, pose, step), closed=True, fill=False,
                         linewidth=2, edgecolor=color))
    vs = shape.vertex_at(pose)
    ax.plot([v.x for v in vs], [v.y for v in vs], linestyle="none", marker="o", markersize=4, color=color)
    # heading tick (red)
    r = shape.max_radius
    ax.plot([pose.x, pose.x + r * math.cos(pose.yaw)], [pose.y, pose.y + r * math.sin(pose.yaw)],
            linewidth=2, color="red")


def save_png(shape, out_path, pose=POSE_2D_ZERO, step=1):
    """Save a PNG of the footprint at `pose` with its min/max radius circles."""
    pose = _as_pose(shape, pose)
    r = shape.max_radius
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlim(pose.x - 1.2 * r, pose.x + 1.2 * r)
    ax.set_ylim(pose.y - 1.2 * r, pose.y + 1.2 * r)
    ax.grid(True, linewidth=0.5, color="#dddddd")

    draw_footprint(ax, shape, pose, step)
    for radius in (shape.min_radius, shape.max_radius):
        ax.add_patch(plt.Circle((pose.x, pose.y), radius, fill=False, linestyle="--", linewidth=1))

    ax.set_xlabel("x [m]")
    ax.set_ylabel("y [m]")
    ax.set_title(f"{type(shape).__name__}: border profile")
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def save_gif_frames(shape, poses, out="footprint.gif", stride=1, *, frame_delay=0.10, step=5):
    """
    Save an animated GIF of the footprint moving along `poses`.

    Args:
        shape: footprint to draw.
        poses: list of Pose2D or (x, y, theta) tuples.
        out (str): output GIF filename.
        stride (int): sample every k-th pose.
        frame_delay (float): frame duration in seconds.
        step (int): outline sampling in degrees.
    """
    poses = [_as_pose(shape, p) for p in poses]
    stride = max(1, int(stride))
    r = shape.max_radius
    xs = [p.x for p in poses]
    ys = [p.y for p in poses]
    xlim = (min(xs) - 1.2 * r, max(xs) + 1.2 * r)
    ylim = (min(ys) - 1.2 * r, max(ys) + 1.2 * r)

    def render_frame(k_idx):
        fig, ax = plt.subplots(figsize=(6, 6))
        ax.set_aspect('equal', adjustable='box')
        ax.set_xlim(*xlim)
        ax.set_ylim(*ylim)

        # path-so-far
        ax.plot(xs[:k_idx + 1], ys[:k_idx + 1], linewidth=2)
        draw_footprint(ax, shape, poses[k_idx], step)

        # rasterize
        fig.canvas.draw()
        w, h = fig.canvas.get_width_height()
        buf = np.frombuffer(fig.canvas.buffer_rgba(), dtype=np.uint8)
        rgba = buf.reshape(h, w, 4)
        rgb = rgba[..., :3].copy()
        plt.close(fig)
        return rgb

    imgs = [render_frame(k) for k in range(0, len(poses), stride)]
    imageio.mimsave(out, imgs, duration=float(frame_delay))
    return len(imgs)
