from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, List, Optional, Sequence, Set, Tuple

from .config import DEFAULT_CONFIG
from .coord import Coord, PointLike, to_coord
from .general_math import EPSILON, ellipse_boundary, normalize_to_ellipse
from .geometry import Shape, ShapeKind, map_points
from .raster import inward_ring_pixels, ring_pixels

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class Ellipse(Shape):
    """
    Axis-aligned ellipse from a centre and horizontal/vertical radii.

    Only axis-aligned ellipses are representable: a rotation that is not a
    quarter turn yields a Polygon sampled from the boundary instead.
    """
    center_point: Coord
    radius_x: float
    radius_y: float

    kind = ShapeKind.ELLIPSE

    def __init__(self, center: PointLike, radius_x: float, radius_y: float):
        object.__setattr__(self, "center_point", to_coord(center))
        object.__setattr__(self, "radius_x", radius_x)
        object.__setattr__(self, "radius_y", radius_y)
        assert radius_x >= 0 and radius_y >= 0, f"radii must be non-negative, got {radius_x}, {radius_y}"

    def points(self) -> List[Coord]:
        """
        [centre, right end of the x axis, bottom end of the y axis]
        """
        c = self.center_point
        return [c, Coord(c.x + self.radius_x, c.y), Coord(c.x, c.y + self.radius_y)]

    def rebuild(self, points: Sequence[Coord]) -> "Ellipse":
        c = points[0]
        return Ellipse(c, c.distance(points[1]), c.distance(points[2]))

    def center(self) -> Coord:
        return self.center_point

    def width(self) -> float:
        return self.radius_x * 2.0

    def height(self) -> float:
        return self.radius_y * 2.0

    def left(self) -> float:
        return self.center_point.x - self.radius_x

    def right(self) -> float:
        return self.center_point.x + self.radius_x

    def top(self) -> float:
        return self.center_point.y - self.radius_y

    def bottom(self) -> float:
        return self.center_point.y + self.radius_y

    def area(self) -> float:
        return math.pi * self.radius_x * self.radius_y

    def is_degenerate(self) -> bool:
        return self.radius_x <= EPSILON or self.radius_y <= EPSILON

    def degenerate_line(self):
        """
        The segment a flat ellipse collapses to (a point when both radii are 0).
        """
        if self.radius_y <= EPSILON:
            return self.to_horizontal_line()
        return self.to_vertical_line()

    def _contains_point(self, point: Coord) -> bool:
        if self.is_degenerate():
            return self.degenerate_line().contains(point)
        n = normalize_to_ellipse(point, self.center_point, self.radius_x, self.radius_y)
        return n.x * n.x + n.y * n.y <= 1.0 + EPSILON

    # ---- Transforms ----
    def transform(self, fn: Callable[[Coord], Any]) -> Shape:
        """
        Stays an Ellipse while the axes remain axis-aligned (or the ellipse
        is a circle); otherwise returns a Polygon through the mapped boundary.
        """
        c, px, py = map_points(fn, self.points())
        u = px - c
        v = py - c
        if abs(u.y) <= EPSILON and abs(v.x) <= EPSILON:
            return Ellipse(c, abs(u.x), abs(v.y))
        if abs(u.x) <= EPSILON and abs(v.y) <= EPSILON:
            return Ellipse(c, abs(v.x), abs(u.y))
        if abs(u.magnitude() - v.magnitude()) <= EPSILON and abs(u.dot_product(v)) <= EPSILON:
            return Ellipse(c, u.magnitude(), u.magnitude())
        from .polygon import Polygon
        logger.debug("Ellipse axes no longer axis-aligned, approximating with a Polygon")
        return Polygon(map_points(fn, self.boundary_points()))

    # ---- Rasterization ----
    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        pixels = ring_pixels(self.center_point, self.radius_x, self.radius_y)
        if line_width > 1:
            pixels |= inward_ring_pixels(self, self.center_point, self.radius_x, self.radius_y, line_width)
        return pixels

    # ---- Conversion ----
    def boundary_points(self, segments: Optional[int] = None) -> List[Coord]:
        count = segments or DEFAULT_CONFIG.polygon_segments
        return ellipse_boundary(self.center_point, self.radius_x, self.radius_y, count)

    def to_polygon(self, segments: Optional[int] = None):
        from .polygon import Polygon
        return Polygon(self.boundary_points(segments))

    def to_circle(self):
        """
        Circle with the same radius, or None if the radii differ.
        """
        from .circle import Circle
        if self.radius_x == self.radius_y:
            return Circle(self.center_point, self.radius_x)
        return None

    def to_horizontal_line(self):
        from .line import Line
        return Line((self.left(), self.center_point.y), (self.right(), self.center_point.y))

    def to_vertical_line(self):
        from .line import Line
        return Line((self.center_point.x, self.top()), (self.center_point.x, self.bottom()))

    def _sort_key(self) -> Tuple[float, ...]:
        return (self.center_point.x, self.center_point.y, self.radius_x, self.radius_y)
