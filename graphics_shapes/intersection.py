"""
Symmetric shape/shape intersection.

Every unordered pair of kinds maps to exactly one function in _INTERSECTS,
always called with the lower-ranked kind first (ties broken by the shapes'
own sort keys), so a.intersects(b) and b.intersects(a) run the same code on
the same arguments.
"""
from __future__ import annotations

from itertools import combinations_with_replacement
from typing import Callable, Dict, Tuple

from .general_math import (
    EPSILON,
    closest_point_on_ellipse,
    distance_to_segment,
    ellipse_edge_distance,
    segments_intersect,
)
from .geometry import Shape, ShapeKind, as_shape

PairFn = Callable[[Shape, Shape], bool]

POLYGONAL = (ShapeKind.LINE, ShapeKind.RECT, ShapeKind.TRIANGLE, ShapeKind.POLYGON)


def _canonical(a: Shape, b: Shape) -> Tuple[Shape, Shape]:
    if a.kind.rank != b.kind.rank:
        return (a, b) if a.kind.rank < b.kind.rank else (b, a)
    return (a, b) if a._sort_key() <= b._sort_key() else (b, a)


def intersects(a, b) -> bool:
    """
    True if the two shapes (or ShapeBoxes) share at least one point.
    """
    first, second = _canonical(as_shape(a), as_shape(b))
    return _INTERSECTS[(first.kind, second.kind)](first, second)


# ---- Polygonal pairs ----
def _edges_cross(a: Shape, b: Shape) -> bool:
    for s1, e1 in a.edges():
        for s2, e2 in b.edges():
            if segments_intersect(s1, e1, s2, e2):
                return True
    return False


def polygonal_polygonal(a: Shape, b: Shape) -> bool:
    """
    Edges touch, or one shape lies wholly inside the other.
    """
    if _edges_cross(a, b):
        return True
    return b._contains_point(a.points()[0]) or a._contains_point(b.points()[0])


def line_line(a: Shape, b: Shape) -> bool:
    return segments_intersect(a.start, a.end, b.start, b.end)


def rect_rect(a: Shape, b: Shape) -> bool:
    return (a.left() <= b.right() + EPSILON and b.left() <= a.right() + EPSILON
            and a.top() <= b.bottom() + EPSILON and b.top() <= a.bottom() + EPSILON)


# ---- Circle pairs ----
def polygonal_circle(poly: Shape, circle: Shape) -> bool:
    c = circle.center()
    if poly._contains_point(c):
        return True
    return any(distance_to_segment(c, s, e) <= circle.radius + EPSILON for s, e in poly.edges())


def circle_circle(a: Shape, b: Shape) -> bool:
    return a.center().distance(b.center()) <= a.radius + b.radius + EPSILON


# ---- Ellipse pairs ----
def polygonal_ellipse(poly: Shape, ellipse: Shape) -> bool:
    if ellipse.is_degenerate():
        return polygonal_polygonal(poly, ellipse.degenerate_line())
    c = ellipse.center()
    if poly._contains_point(c):
        return True
    return any(
        ellipse_edge_distance(c, ellipse.radius_x, ellipse.radius_y, s, e) <= 1.0 + EPSILON
        for s, e in poly.edges()
    )


def circle_ellipse(circle: Shape, ellipse: Shape) -> bool:
    if ellipse.is_degenerate():
        return polygonal_circle(ellipse.degenerate_line(), circle)
    c = circle.center()
    if ellipse._contains_point(c):
        return True
    nearest = closest_point_on_ellipse(ellipse.center(), ellipse.radius_x, ellipse.radius_y, c)
    return c.distance(nearest) <= circle.radius + EPSILON


def ellipse_ellipse(a: Shape, b: Shape) -> bool:
    """
    Scales the plane about b's centre so b becomes the unit circle. a stays
    axis-aligned under that scaling, so the pair becomes circle against
    ellipse.
    """
    if a.is_degenerate():
        return polygonal_ellipse(a.degenerate_line(), b)
    if b.is_degenerate():
        return polygonal_ellipse(b.degenerate_line(), a)
    from .circle import Circle
    from .ellipse import Ellipse
    c, origin = a.center(), b.center()
    scaled = Ellipse(
        ((c.x - origin.x) / b.radius_x, (c.y - origin.y) / b.radius_y),
        a.radius_x / b.radius_x,
        a.radius_y / b.radius_y,
    )
    return circle_ellipse(Circle((0.0, 0.0), 1.0), scaled)


def _build_table() -> Dict[Tuple[ShapeKind, ShapeKind], PairFn]:
    table: Dict[Tuple[ShapeKind, ShapeKind], PairFn] = {}
    for first in POLYGONAL:
        for second in POLYGONAL:
            if first.rank <= second.rank:
                table[(first, second)] = polygonal_polygonal
        pair = (first, ShapeKind.CIRCLE) if first.rank < ShapeKind.CIRCLE.rank else (ShapeKind.CIRCLE, first)
        table[pair] = polygonal_circle if pair[0] is first else _swap(polygonal_circle)
        pair = (first, ShapeKind.ELLIPSE) if first.rank < ShapeKind.ELLIPSE.rank else (ShapeKind.ELLIPSE, first)
        table[pair] = polygonal_ellipse if pair[0] is first else _swap(polygonal_ellipse)
    table[(ShapeKind.LINE, ShapeKind.LINE)] = line_line
    table[(ShapeKind.RECT, ShapeKind.RECT)] = rect_rect
    table[(ShapeKind.CIRCLE, ShapeKind.CIRCLE)] = circle_circle
    table[(ShapeKind.CIRCLE, ShapeKind.ELLIPSE)] = circle_ellipse
    table[(ShapeKind.ELLIPSE, ShapeKind.ELLIPSE)] = ellipse_ellipse
    return table


def _swap(fn: PairFn) -> PairFn:
    def swapped(a: Shape, b: Shape) -> bool:
        return fn(b, a)
    swapped.__name__ = f"{fn.__name__}_swapped"
    return swapped


_INTERSECTS = _build_table()

assert set(_INTERSECTS) == {
    (a, b) for a, b in combinations_with_replacement(list(ShapeKind), 2)
}, "intersection table must cover every pair of kinds"
