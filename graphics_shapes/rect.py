from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, List, Sequence, Set, Tuple

from .coord import Coord, PointLike, to_coord
from .general_math import EPSILON, Segment, closed_edges
from .geometry import Shape, ShapeKind, map_points
from .raster import edges_outline, inward_edge_pixels, pixel_span

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class Rect(Shape):
    """
    Axis-aligned rectangle. Corners are normalized on construction so
    top_left is the min corner and bottom_right the max corner whatever
    order they were given in.
    """
    top_left_corner: Coord
    bottom_right_corner: Coord

    kind = ShapeKind.RECT

    def __init__(self, top_left: PointLike, bottom_right: PointLike):
        a = to_coord(top_left)
        b = to_coord(bottom_right)
        object.__setattr__(self, "top_left_corner", Coord(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "bottom_right_corner", Coord(max(a.x, b.x), max(a.y, b.y)))
        assert self.top_left_corner.x <= self.bottom_right_corner.x
        assert self.top_left_corner.y <= self.bottom_right_corner.y

    @staticmethod
    def new_with_size(start: PointLike, width: float, height: float) -> "Rect":
        s = to_coord(start)
        return Rect(s, (s.x + width, s.y + height))

    # ---- Accessors ----
    def width(self) -> float:
        return self.bottom_right_corner.x - self.top_left_corner.x

    def height(self) -> float:
        return self.bottom_right_corner.y - self.top_left_corner.y

    def is_square(self) -> bool:
        return self.width() == self.height()

    def area(self) -> float:
        return self.width() * self.height()

    def left(self) -> float:
        return self.top_left_corner.x

    def right(self) -> float:
        return self.bottom_right_corner.x

    def top(self) -> float:
        return self.top_left_corner.y

    def bottom(self) -> float:
        return self.bottom_right_corner.y

    def corners(self) -> List[Coord]:
        """
        Clockwise from the top left.
        """
        return [self.top_left(), self.top_right(), self.bottom_right(), self.bottom_left()]

    def edges(self) -> List[Segment]:
        return closed_edges(self.corners())

    def points(self) -> List[Coord]:
        return [self.top_left_corner, self.bottom_right_corner]

    def rebuild(self, points: Sequence[Coord]) -> "Rect":
        return Rect(points[0], points[1])

    def center(self) -> Coord:
        return self.top_left_corner.mid_point(self.bottom_right_corner)

    def union(self, other: "Rect") -> "Rect":
        """
        Smallest rect covering both.
        """
        return Rect(
            (min(self.left(), other.left()), min(self.top(), other.top())),
            (max(self.right(), other.right()), max(self.bottom(), other.bottom())),
        )

    def _contains_point(self, point: Coord) -> bool:
        return (self.left() - EPSILON <= point.x <= self.right() + EPSILON
                and self.top() - EPSILON <= point.y <= self.bottom() + EPSILON)

    # ---- Transforms ----
    def transform(self, fn: Callable[[Coord], Any]) -> Shape:
        """
        Stays a Rect while the mapped corners are still axis-aligned
        (translation, scale, quarter turns); otherwise becomes a Polygon.
        """
        mapped = map_points(fn, self.corners())
        if _axis_aligned(mapped):
            xs = [p.x for p in mapped]
            ys = [p.y for p in mapped]
            return Rect((min(xs), min(ys)), (max(xs), max(ys)))
        from .polygon import Polygon
        logger.debug("Rect transform is not axis-aligned, returning Polygon")
        return Polygon(mapped)

    # ---- Rasterization ----
    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        edges = self.edges()
        pixels = edges_outline(edges)
        if line_width > 1:
            pixels |= inward_edge_pixels(self, edges, 1.0, line_width)
        return pixels

    def filled_pixels(self) -> Set[Coord]:
        xs = pixel_span(self.left(), self.right())
        pixels = {Coord(x, y) for y in pixel_span(self.top(), self.bottom()) for x in xs}
        return pixels | self.outline_pixels(1)

    # ---- Conversion ----
    def to_lines(self):
        from .line import Line
        return [Line(a, b) for a, b in self.edges()]

    def to_polygon(self):
        from .polygon import Polygon
        return Polygon(self.corners())

    def to_triangles(self) -> Tuple:
        from .triangle import Triangle
        return (
            Triangle(self.top_left(), self.top_right(), self.bottom_left()),
            Triangle(self.bottom_right(), self.top_right(), self.bottom_left()),
        )

    def to_inner_circle(self):
        """
        Circle around the centre touching the closest edge.
        """
        from .circle import Circle
        return Circle(self.center(), min(self.width(), self.height()) / 2.0)

    def to_outer_circle(self):
        """
        Circle around the centre reaching the farthest edge.
        """
        from .circle import Circle
        return Circle(self.center(), max(self.width(), self.height()) / 2.0)


def _axis_aligned(corners: List[Coord]) -> bool:
    for a, b in closed_edges(corners):
        if abs(a.x - b.x) > EPSILON and abs(a.y - b.y) > EPSILON:
            return False
    return True
