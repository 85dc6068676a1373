from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Set

from .coord import Coord, PointLike, to_coord
from .general_math import Segment, closest_point_on_segment, point_on_segment
from .geometry import Shape, ShapeKind
from .raster import line_pixels, thick_line_pixels


class LineType(Enum):
    POINT = "point"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    ANGLED = "angled"


@dataclass(frozen=True)
class Line(Shape):
    """
    Segment between two points. start == end is a legal degenerate line that
    behaves as a single point.

    A segment has no interior, so its fill is the 1 px stroke. Strokes wider
    than one pixel spread to both sides of the segment and are a superset
    of the fill rather than a subset of it.
    """
    start: Coord
    end: Coord

    kind = ShapeKind.LINE

    def __post_init__(self):
        object.__setattr__(self, "start", to_coord(self.start))
        object.__setattr__(self, "end", to_coord(self.end))

    def points(self) -> List[Coord]:
        return [self.start, self.end]

    def rebuild(self, points: Sequence[Coord]) -> "Line":
        return Line(points[0], points[1])

    def center(self) -> Coord:
        return self.start.mid_point(self.end)

    def length(self) -> float:
        return self.start.distance(self.end)

    def angle(self) -> float:
        return self.start.angle_to(self.end)

    def line_type(self) -> LineType:
        if self.start == self.end:
            return LineType.POINT
        if self.start.y == self.end.y:
            return LineType.HORIZONTAL
        if self.start.x == self.end.x:
            return LineType.VERTICAL
        return LineType.ANGLED

    def edges(self) -> List[Segment]:
        return [(self.start, self.end)]

    def nearest_point(self, point: PointLike) -> Coord:
        return closest_point_on_segment(to_coord(point), self.start, self.end)

    def distance_to(self, point: PointLike) -> float:
        p = to_coord(point)
        return p.distance(self.nearest_point(p))

    def _contains_point(self, point: Coord) -> bool:
        return point_on_segment(point, self.start, self.end)

    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        return thick_line_pixels(self.start, self.end, line_width)

    def filled_pixels(self) -> Set[Coord]:
        # a segment has no interior, its fill is the one pixel stroke
        return line_pixels(self.start, self.end)

    def to_rect(self):
        from .rect import Rect
        return Rect(self.start, self.end)

    def to_circle(self):
        """
        Circle centred on start reaching end.
        """
        from .circle import Circle
        return Circle(self.start, self.length())
