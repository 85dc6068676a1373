from __future__ import annotations

from dataclasses import dataclass
import math
from typing import List, Optional, Sequence, Set, Tuple

from .config import DEFAULT_CONFIG
from .coord import Coord, PointLike, to_coord
from .general_math import EPSILON, ellipse_boundary
from .geometry import Shape, ShapeKind
from .raster import inward_ring_pixels, ring_pixels


@dataclass(frozen=True, init=False)
class Circle(Shape):
    """
    Centre and non-negative radius. Radius 0 behaves as a single point.
    """
    center_point: Coord
    radius: float

    kind = ShapeKind.CIRCLE

    def __init__(self, center: PointLike, radius: float):
        object.__setattr__(self, "center_point", to_coord(center))
        object.__setattr__(self, "radius", radius)
        assert radius >= 0, f"radius must be non-negative, got {radius}"

    def points(self) -> List[Coord]:
        """
        [centre, edge point straight up]
        """
        return [self.center_point, Coord.from_angle(self.center_point, self.radius, 0)]

    def rebuild(self, points: Sequence[Coord]) -> "Circle":
        return Circle(points[0], points[0].distance(points[1]))

    def center(self) -> Coord:
        return self.center_point

    def left(self) -> float:
        return self.center_point.x - self.radius

    def right(self) -> float:
        return self.center_point.x + self.radius

    def top(self) -> float:
        return self.center_point.y - self.radius

    def bottom(self) -> float:
        return self.center_point.y + self.radius

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def _contains_point(self, point: Coord) -> bool:
        return self.center_point.distance(point) <= self.radius + EPSILON

    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        pixels = ring_pixels(self.center_point, self.radius, self.radius)
        if line_width > 1:
            pixels |= inward_ring_pixels(self, self.center_point, self.radius, self.radius, line_width)
        return pixels

    # ---- Conversion ----
    def boundary_points(self, segments: Optional[int] = None) -> List[Coord]:
        count = segments or DEFAULT_CONFIG.polygon_segments
        return ellipse_boundary(self.center_point, self.radius, self.radius, count)

    def to_polygon(self, segments: Optional[int] = None):
        """
        Inscribed regular polygon.
        """
        from .polygon import Polygon
        return Polygon(self.boundary_points(segments))

    def to_inner_rect(self):
        """
        Largest axis-aligned square inside the circle.
        """
        from .rect import Rect
        half = self.radius / math.sqrt(2.0)
        c = self.center_point
        return Rect((c.x - half, c.y - half), (c.x + half, c.y + half))

    def to_ellipse(self):
        from .ellipse import Ellipse
        return Ellipse(self.center_point, self.radius, self.radius)

    def _sort_key(self) -> Tuple[float, ...]:
        return (self.center_point.x, self.center_point.y, self.radius)
