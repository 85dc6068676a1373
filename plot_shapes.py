from __future__ import annotations

import argparse
import logging
import os

from graphics_shapes import (
    AnglePosition,
    Circle,
    Ellipse,
    FlatSide,
    Line,
    Polygon,
    Rect,
    Triangle,
)
from plotting.renderer import render_shape_grid, render_to_file

logger = logging.getLogger("plot_shapes")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rasterize every shape kind and save the pixels as images.")
    p.add_argument("--outdir", type=str, default="plots", help="output directory for images")
    p.add_argument("--width", type=int, default=1, help="outline stroke width in pixels")
    p.add_argument("--rotate", type=float, default=0.0, help="rotate every shape by this many degrees")
    p.add_argument("--scale", type=float, default=1.0, help="scale every shape about its centre")
    p.add_argument("--cols", type=int, default=4, help="columns in the grid")
    p.add_argument("--vector", action="store_true", help="overlay exact outlines on the pixels")
    p.add_argument("--verbose", action="store_true", help="log debug messages")
    return p.parse_args()


def build_shapes() -> list:
    return [
        ("Line", Line((2, 3), (28, 17))),
        ("Rect", Rect((4, 6), (26, 20))),
        ("Circle", Circle((15, 15), 11)),
        ("Ellipse", Ellipse((15, 15), 13, 7)),
        ("Triangle", Triangle((3, 26), (15, 3), (27, 22))),
        ("Right angle", Triangle.right_angle((4, 4), 22, AnglePosition.TOP_LEFT)),
        ("Equilateral", Triangle.equilateral((15, 15), 22, FlatSide.BOTTOM)),
        ("Polygon", Polygon([(3, 10), (12, 3), (27, 6), (22, 18), (27, 27), (8, 24)])),
    ]


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    os.makedirs(args.outdir, exist_ok=True)

    named = build_shapes()
    titles = []
    shapes = []
    for name, shape in named:
        if args.scale != 1.0:
            shape = shape.scale(args.scale)
        if args.rotate:
            shape = shape.rotate(args.rotate)
        titles.append(f"{name} ({shape.kind.value})")
        shapes.append(shape)

    grid_path = os.path.join(args.outdir, "shapes_grid.png")
    render_shape_grid(shapes, grid_path, cols=args.cols, line_width=args.width, titles=titles, draw_vector=args.vector)
    render_to_file(shapes, os.path.join(args.outdir, "shapes_overlay.png"), line_width=args.width, format="raw")
    render_to_file(shapes, os.path.join(args.outdir, "shapes_vector.svg"))

    for name, shape in zip(titles, shapes):
        logger.info("%s: %d outline px, %d filled px", name, len(shape.outline_pixels(args.width)), len(shape.filled_pixels()))


if __name__ == "__main__":
    main()
