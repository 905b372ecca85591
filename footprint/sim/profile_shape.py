# footprint/sim/profile_shape.py
#!/usr/bin/env python3
"""
Sample the border of a configured footprint every STEP degrees.

    python -m footprint.sim.profile_shape shape.json --out results --plot
"""
import argparse
import csv
import logging
import os

from footprint.shapes.config import ShapeConfig
from footprint.shapes.factory import create_shape
from footprint.utils.math_functions import deg_to_rad

logger = logging.getLogger(__name__)

PROFILE_HEADER = ['deg', 'rad', 'x', 'y', 'z', 'distance']


def profile_rows(shape, step=1, pitch=0.0):
    """One row per sampled bearing: deg, rad, border point x/y/z and distance."""
    rows = []
    for deg in range(-180, 181, step):
        rad = deg_to_rad(deg)
        p = shape.border_point_at_relative_angle(rad, pitch)
        d = shape.border_distance_at_relative_angle(rad, pitch)
        rows.append([deg, round(rad, 6), round(p.x, 6), round(p.y, 6), round(p.z, 6), round(d, 6)])
    return rows


def build_parser():
    ap = argparse.ArgumentParser(description="Border profile of a footprint read from a JSON record.")
    ap.add_argument('config', type=str, help='JSON file: {"type": ..., "parameters": {...}}')
    ap.add_argument('--out', type=str, default='results')
    ap.add_argument('--plot', action='store_true', help='also write border_profile.png')
    ap.add_argument('--step', type=int, default=1, help='sampling step in degrees')
    ap.add_argument('-v', '--verbose', action='store_true')
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.step < 1:
        raise SystemExit("--step must be a positive number of degrees")

    shape = create_shape(ShapeConfig.from_json(args.config))
    logger.info("profiling %r", shape)
    os.makedirs(args.out, exist_ok=True)

    csv_path = os.path.join(args.out, 'border_profile.csv')
    with open(csv_path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(PROFILE_HEADER)
        w.writerows(profile_rows(shape, args.step))

    print(f"shape: {type(shape).__name__} ({shape.TYPE})")
    print(f"min radius: {shape.min_radius:.4f}")
    print(f"max radius: {shape.max_radius:.4f}")
    print(f"profile:    {csv_path}")

    if args.plot:
        from footprint.sim.animate import save_png  # matplotlib only when plotting
        png_path = os.path.join(args.out, 'border_profile.png')
        save_png(shape, png_path, step=args.step)
        print(f"plot:       {png_path}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
