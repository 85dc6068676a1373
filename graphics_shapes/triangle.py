from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import List, Sequence, Set, Tuple

from .coord import Coord, PointLike, to_coord
from .general_math import EPSILON, Segment, closed_edges, orientation, signed_area
from .geometry import Shape, ShapeKind
from .raster import edges_outline, inward_edge_pixels

# Interior angles within this many degrees of 90 count as right angles.
RIGHT_ANGLE_TOLERANCE = 1e-6


class AngleType(Enum):
    ACUTE = "acute"
    RIGHT = "right"
    OBTUSE = "obtuse"
    DEGENERATE = "degenerate"


class SideType(Enum):
    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


class AnglePosition(Enum):
    """
    Where the right angle sits in Triangle.right_angle.
    """
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class FlatSide(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def _same_length(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=EPSILON)


@dataclass(frozen=True)
class Triangle(Shape):
    """
    Three vertices in any winding. Collinear vertices give a degenerate
    triangle which behaves as its longest edge.
    """
    a: Coord
    b: Coord
    c: Coord

    kind = ShapeKind.TRIANGLE

    def __post_init__(self):
        object.__setattr__(self, "a", to_coord(self.a))
        object.__setattr__(self, "b", to_coord(self.b))
        object.__setattr__(self, "c", to_coord(self.c))

    # ---- Factories ----
    @staticmethod
    def right_angle(corner: PointLike, size: float, position: AnglePosition) -> "Triangle":
        """
        Isosceles right triangle with the right angle at `corner`.

        For the corner positions the legs have length `size` and run away from
        the corner; for TOP/RIGHT/BOTTOM/LEFT the corner is the apex pointing
        that way and the legs span half of `size` on each axis.
        """
        p = to_coord(corner)
        half = size / 2.0
        if position is AnglePosition.TOP_LEFT:
            return Triangle(p, (p.x + size, p.y), (p.x, p.y + size))
        if position is AnglePosition.TOP_RIGHT:
            return Triangle(p, (p.x - size, p.y), (p.x, p.y + size))
        if position is AnglePosition.BOTTOM_RIGHT:
            return Triangle(p, (p.x - size, p.y), (p.x, p.y - size))
        if position is AnglePosition.BOTTOM_LEFT:
            return Triangle(p, (p.x + size, p.y), (p.x, p.y - size))
        if position is AnglePosition.TOP:
            return Triangle(p, p + (-half, half), p + (half, half))
        if position is AnglePosition.RIGHT:
            return Triangle(p, p - (half, half), p + (-half, half))
        if position is AnglePosition.BOTTOM:
            return Triangle(p, p - (half, half), p + (half, -half))
        return Triangle(p, p + (half, -half), p + (half, half))

    @staticmethod
    def equilateral(center: PointLike, size: float, flat_side: FlatSide) -> "Triangle":
        """
        Isosceles triangle fitting a `size` x `size` box around `center`
        with one side flat against the given edge of that box.
        """
        p = to_coord(center)
        d = size / 2.0
        left, right, top, bottom = p.x - d, p.x + d, p.y - d, p.y + d
        if flat_side is FlatSide.TOP:
            return Triangle((left, top), (right, top), (p.x, bottom))
        if flat_side is FlatSide.BOTTOM:
            return Triangle((left, bottom), (right, bottom), (p.x, top))
        if flat_side is FlatSide.LEFT:
            return Triangle((left, top), (left, bottom), (right, p.y))
        return Triangle((right, top), (right, bottom), (left, p.y))

    # ---- Shape interface ----
    def points(self) -> List[Coord]:
        return [self.a, self.b, self.c]

    def rebuild(self, points: Sequence[Coord]) -> "Triangle":
        return Triangle(points[0], points[1], points[2])

    def center(self) -> Coord:
        """
        Centroid, which rotates with the triangle.
        """
        return Coord((self.a.x + self.b.x + self.c.x) / 3.0, (self.a.y + self.b.y + self.c.y) / 3.0)

    def edges(self) -> List[Segment]:
        return closed_edges(self.points())

    def signed_area(self) -> float:
        return signed_area(self.points())

    def area(self) -> float:
        return abs(self.signed_area())

    def is_degenerate(self) -> bool:
        return orientation(self.a, self.b, self.c) == 0 and orientation(self.b, self.c, self.a) == 0

    def longest_edge(self):
        from .line import Line
        start, end = max(self.edges(), key=lambda e: e[0].distance(e[1]))
        return Line(start, end)

    def _contains_point(self, point: Coord) -> bool:
        if self.is_degenerate():
            return self.longest_edge().contains(point)
        signs = {orientation(s, e, point) for s, e in self.edges()}
        # on an edge gives 0, which is compatible with either side
        return not (1 in signs and -1 in signs)

    # ---- Classification ----
    def side_lengths(self) -> Tuple[float, float, float]:
        """
        Lengths opposite a, b and c.
        """
        return (self.b.distance(self.c), self.c.distance(self.a), self.a.distance(self.b))

    def angles(self) -> Tuple[float, float, float]:
        """
        Interior angles in degrees at a, b and c, from the law of cosines.
        """
        la, lb, lc = self.side_lengths()
        return (_law_of_cosines(la, lb, lc), _law_of_cosines(lb, lc, la), _law_of_cosines(lc, la, lb))

    def angle_type(self) -> AngleType:
        if self.is_degenerate():
            return AngleType.DEGENERATE
        largest = max(self.angles())
        if abs(largest - 90.0) <= RIGHT_ANGLE_TOLERANCE:
            return AngleType.RIGHT
        if largest > 90.0:
            return AngleType.OBTUSE
        return AngleType.ACUTE

    def side_type(self) -> SideType:
        la, lb, lc = self.side_lengths()
        ab, bc, ca = _same_length(la, lb), _same_length(lb, lc), _same_length(lc, la)
        if ab and bc:
            return SideType.EQUILATERAL
        if ab or bc or ca:
            return SideType.ISOSCELES
        return SideType.SCALENE

    # ---- Rasterization ----
    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        edges = self.edges()
        pixels = edges_outline(edges)
        if line_width > 1 and not self.is_degenerate():
            pixels |= inward_edge_pixels(self, edges, self.signed_area(), line_width)
        return pixels

    # ---- Conversion ----
    def to_lines(self):
        from .line import Line
        return [Line(s, e) for s, e in self.edges()]

    def to_polygon(self):
        from .polygon import Polygon
        return Polygon(self.points())


def _law_of_cosines(opposite: float, side1: float, side2: float) -> float:
    if side1 == 0.0 or side2 == 0.0:
        return 0.0
    cos = (side1 * side1 + side2 * side2 - opposite * opposite) / (2.0 * side1 * side2)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos))))
