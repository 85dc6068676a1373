import io
from typing import Any, List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from shapely import affinity
from shapely.geometry import LineString, Point, Polygon, box

from graphics_shapes import Shape, ShapeKind
from graphics_shapes.geometry import as_shape


def shape_to_shapely(shape: Shape, resolution: int = 64) -> Any:
    """
    Exact (or, for curves, finely buffered) shapely geometry of a shape.
    Degenerate shapes come back as Point or LineString.
    """
    s = as_shape(shape)
    if s.kind is ShapeKind.LINE:
        if s.start == s.end:
            return Point(s.start.x, s.start.y)
        return LineString([s.start.to_tuple(), s.end.to_tuple()])
    if s.kind is ShapeKind.RECT:
        return box(s.left(), s.top(), s.right(), s.bottom())
    if s.kind is ShapeKind.CIRCLE:
        c = s.center()
        return Point(c.x, c.y).buffer(s.radius, resolution=resolution)
    if s.kind is ShapeKind.ELLIPSE:
        c = s.center()
        if s.is_degenerate():
            return shape_to_shapely(s.degenerate_line())
        unit = Point(c.x, c.y).buffer(1.0, resolution=resolution)
        return affinity.scale(unit, xfact=s.radius_x, yfact=s.radius_y, origin=(c.x, c.y))
    coords = [p.to_tuple() for p in s.points()]
    if len(set(coords)) < 3:
        if len(set(coords)) == 1:
            return Point(coords[0])
        return LineString(coords)
    geom = Polygon(coords)
    if not geom.is_valid:
        geom = geom.buffer(0)
    if geom.is_empty or geom.area == 0.0:
        # collinear vertices
        return LineString(coords)
    return geom


def _parts(geom) -> List[Any]:
    if hasattr(geom, "geoms"):
        return list(geom.geoms)
    return [geom]


def draw_shapes_on_axis(
    ax: plt.Axes,
    shapes: Sequence[Shape],
    colors: Optional[Sequence[Any]] = None,
    margin: float = 1.0,
) -> None:
    """
    Draws the shapes as vector patches in screen orientation (y down).
    """
    if not shapes:
        ax.set_aspect("equal")
        ax.axis("off")
        return
    cmap = plt.get_cmap("tab10")
    geoms = [shape_to_shapely(s) for s in shapes]
    minx = min(g.bounds[0] for g in geoms)
    miny = min(g.bounds[1] for g in geoms)
    maxx = max(g.bounds[2] for g in geoms)
    maxy = max(g.bounds[3] for g in geoms)

    ax.set_aspect("equal")
    ax.set_xlim(minx - margin, maxx + margin)
    ax.set_ylim(maxy + margin, miny - margin)
    ax.axis("off")

    for idx, geom in enumerate(geoms):
        rgb = np.array(colors[idx] if colors is not None else cmap(idx % 10)[:3]).flatten()
        rgba = np.append(rgb[:3], 1.0)
        for part in _parts(geom):
            if isinstance(part, Polygon):
                x, y = part.exterior.xy
                ax.fill(x, y, fc=np.append(rgb[:3], 0.35), ec=rgba, linewidth=1.0, joinstyle="round")
                for interior in part.interiors:
                    xi, yi = interior.xy
                    ax.fill(xi, yi, fc="white", ec=rgba)
            elif isinstance(part, LineString):
                x, y = part.xy
                ax.plot(x, y, color=rgba, linewidth=1.0)
            else:
                ax.plot([part.x], [part.y], marker="o", markersize=2, color=rgba)


def save_shapes_as_svg(shapes: Sequence[Shape], filename: str) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    draw_shapes_on_axis(ax, shapes)
    fig.savefig(filename, format="svg", bbox_inches="tight", pad_inches=0)
    plt.close(fig)


def save_shapes_as_png(
    shapes: Sequence[Shape],
    filename: Optional[str] = None,
    resolution: int = 128,
) -> Optional[Image.Image]:
    """
    Vector render to a PNG file, or to an in-memory PIL Image when
    filename is None.
    """
    dpi = resolution / 3.0
    fig, ax = plt.subplots(figsize=(3, 3))
    draw_shapes_on_axis(ax, shapes)
    if filename is None:
        buffer = io.BytesIO()
        fig.savefig(buffer, format="png", dpi=dpi, bbox_inches="tight", pad_inches=0, facecolor="white")
        plt.close(fig)
        buffer.seek(0)
        return Image.open(buffer)
    fig.savefig(filename, format="png", dpi=dpi, bbox_inches="tight", pad_inches=0, facecolor="white")
    plt.close(fig)
    return None
