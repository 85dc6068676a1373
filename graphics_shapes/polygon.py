from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import List, Sequence, Set, Tuple

from .coord import Coord, PointLike, to_coord
from .general_math import (
    EPSILON,
    Segment,
    closed_edges,
    distinct_points,
    point_on_segment,
    segments_intersect,
    signed_area,
)
from .geometry import Shape, ShapeKind
from .raster import edges_outline, inward_edge_pixels

logger = logging.getLogger(__name__)

# Relative tolerance used when comparing lengths for regularity.
REGULAR_TOLERANCE = 1e-6


@dataclass(frozen=True, init=False)
class Polygon(Shape):
    """
    Ordered vertex list, CW or CCW, convex or not.

    The boundary runs through the vertices in order and closes back to the
    first one. Duplicate vertices are tolerated. Containment uses the
    even-odd rule with the boundary itself counted as inside.
    """
    vertices: Tuple[Coord, ...]

    kind = ShapeKind.POLYGON

    def __init__(self, points: Sequence[PointLike]):
        verts = tuple(to_coord(p) for p in points)
        if not verts:
            raise ValueError("Polygon requires at least one vertex")
        object.__setattr__(self, "vertices", verts)

    def points(self) -> List[Coord]:
        return list(self.vertices)

    def rebuild(self, points: Sequence[Coord]) -> "Polygon":
        return Polygon(points)

    def center(self) -> Coord:
        """
        Mean of the vertices, so rotating about it keeps it fixed.
        """
        return _vertex_mean(self.vertices)

    def edges(self) -> List[Segment]:
        return closed_edges(self.vertices)

    def signed_area(self) -> float:
        return signed_area(self.vertices)

    def area(self) -> float:
        return abs(self.signed_area())

    def _contains_point(self, point: Coord) -> bool:
        edges = self.edges()
        for a, b in edges:
            if point_on_segment(point, a, b):
                return True
        # Ray casting along +x, even-odd rule
        inside = False
        px, py = point.x, point.y
        for a, b in edges:
            xi, yi = a.x, a.y
            xj, yj = b.x, b.y
            if (yi > py) != (yj > py):
                x_int = (xj - xi) * (py - yi) / (yj - yi) + xi
                if px < x_int:
                    inside = not inside
        return inside

    # ---- Structure ----
    def is_self_intersecting(self) -> bool:
        """
        True if two non-adjacent edges touch or cross.
        """
        pts = distinct_points(self.vertices)
        n = len(pts)
        if n < 4:
            return False
        edges = closed_edges(pts)
        for i in range(n):
            for j in range(i + 2, n):
                if i == 0 and j == n - 1:
                    continue
                if segments_intersect(edges[i][0], edges[i][1], edges[j][0], edges[j][1]):
                    return True
        return False

    def is_convex(self) -> bool:
        """
        Every turn goes the same way (straight runs ignored) and no edges cross.
        Computed on every call.
        """
        pts = distinct_points(self.vertices)
        n = len(pts)
        if n < 3:
            return True
        positive = negative = False
        for i in range(n):
            e1 = pts[(i + 1) % n] - pts[i]
            e2 = pts[(i + 2) % n] - pts[(i + 1) % n]
            turn = e1.cross_product(e2) / (e1.magnitude() * e2.magnitude())
            if turn > EPSILON:
                positive = True
            elif turn < -EPSILON:
                negative = True
            if positive and negative:
                return False
        return not self.is_self_intersecting()

    def is_regular(self) -> bool:
        """
        Convex with equal sides and all vertices equally far from their mean.
        """
        pts = distinct_points(self.vertices)
        if len(pts) < 3 or not self.is_convex():
            return False
        sides = [a.distance(b) for a, b in closed_edges(pts)]
        mean = _vertex_mean(pts)
        radii = [p.distance(mean) for p in pts]
        return _all_close(sides) and _all_close(radii)

    # ---- Rasterization ----
    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        assert line_width >= 1, "line_width must be >= 1"
        edges = self.edges()
        pixels = edges_outline(edges)
        if line_width > 1:
            pixels |= inward_edge_pixels(self, edges, self.signed_area(), line_width)
        return pixels

    # ---- Conversion ----
    def to_lines(self):
        from .line import Line
        return [Line(a, b) for a, b in self.edges()]

    def to_triangles(self):
        """
        Fan triangulation from the first vertex, or None when the polygon is
        concave, self-intersecting or has fewer than three distinct vertices.
        """
        from .triangle import Triangle
        pts = distinct_points(self.vertices)
        if len(pts) < 3 or not self.is_convex():
            logger.debug("Triangulation unavailable for polygon with %d vertices", len(self.vertices))
            return None
        return [Triangle(pts[0], pts[i], pts[i + 1]) for i in range(1, len(pts) - 1)]

    def to_inner_circle(self):
        """
        Circle around the centre reaching the closest vertex.
        """
        from .circle import Circle
        c = self.center()
        return Circle(c, min(p.distance(c) for p in self.vertices))

    def to_outer_circle(self):
        from .circle import Circle
        c = self.center()
        return Circle(c, max(p.distance(c) for p in self.vertices))

    def to_avg_circle(self):
        from .circle import Circle
        c = self.center()
        return Circle(c, sum(p.distance(c) for p in self.vertices) / len(self.vertices))

    def to_circle(self):
        """
        Circumscribed circle of a regular polygon, else None.
        """
        from .circle import Circle
        if not self.is_regular():
            return None
        pts = distinct_points(self.vertices)
        mean = _vertex_mean(pts)
        return Circle(mean, pts[0].distance(mean))


def _vertex_mean(points: Sequence[Coord]) -> Coord:
    return Coord(sum(p.x for p in points) / len(points), sum(p.y for p in points) / len(points))


def _all_close(values: Sequence[float]) -> bool:
    first = values[0]
    return all(math.isclose(v, first, rel_tol=REGULAR_TOLERANCE, abs_tol=EPSILON) for v in values)
