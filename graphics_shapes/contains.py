"""
Shape-in-shape containment: True when every point of `other` is on or
inside `container`.

A bounding box check rejects most candidates first. Convex containers only
need the other shape's vertices; concave polygons also check each edge
between the points where it meets the container boundary.
"""
from __future__ import annotations

from typing import Iterable

from .coord import Coord
from .general_math import (
    EPSILON,
    closest_point_on_ellipse,
    distance_to_segment,
    ellipse_edge_distance,
    farthest_point_on_ellipse,
    segment_contact_params,
)
from .geometry import Shape, ShapeKind, as_shape

POLYGONAL = (ShapeKind.LINE, ShapeKind.RECT, ShapeKind.TRIANGLE, ShapeKind.POLYGON)


def _bounds_within(container: Shape, other: Shape) -> bool:
    return (other.left() >= container.left() - EPSILON
            and other.right() <= container.right() + EPSILON
            and other.top() >= container.top() - EPSILON
            and other.bottom() <= container.bottom() + EPSILON)


def _all_contained(container: Shape, points: Iterable) -> bool:
    return all(container._contains_point(p) for p in points)


def _effective(shape: Shape) -> Shape:
    """
    Degenerate triangles act as their longest edge, flat ellipses as a line.
    """
    if shape.kind is ShapeKind.TRIANGLE and shape.is_degenerate():
        return shape.longest_edge()
    if shape.kind is ShapeKind.ELLIPSE and shape.is_degenerate():
        return shape.degenerate_line()
    return shape


def _vertices(shape: Shape):
    if shape.kind is ShapeKind.RECT:
        return shape.corners()
    return shape.points()


def _is_convex(shape: Shape) -> bool:
    if shape.kind is ShapeKind.POLYGON:
        return shape.is_convex()
    return True


def contains_shape(container, other) -> bool:
    container = _effective(as_shape(container))
    other = _effective(as_shape(other))
    if not _bounds_within(container, other):
        return False

    if container.kind is ShapeKind.LINE:
        return _line_contains(container, other)
    if container.kind in (ShapeKind.CIRCLE, ShapeKind.ELLIPSE):
        return _curve_contains(container, other)
    return _polygonal_contains(container, other)


def _line_contains(line: Shape, other: Shape) -> bool:
    if other.kind is ShapeKind.CIRCLE:
        return other.radius <= EPSILON and line._contains_point(other.center())
    if other.kind is ShapeKind.ELLIPSE:
        # non-degenerate ellipses have area, _effective already flattened the rest
        return False
    return _all_contained(line, _vertices(other))


def _curve_contains(curve: Shape, other: Shape) -> bool:
    if other.kind in POLYGONAL:
        return _all_contained(curve, _vertices(other))
    if curve.kind is ShapeKind.CIRCLE and other.kind is ShapeKind.CIRCLE:
        return curve.center().distance(other.center()) + other.radius <= curve.radius + EPSILON
    if curve.kind is ShapeKind.ELLIPSE and other.kind is ShapeKind.CIRCLE:
        c = other.center()
        if not curve._contains_point(c):
            return False
        nearest = closest_point_on_ellipse(curve.center(), curve.radius_x, curve.radius_y, c)
        return c.distance(nearest) >= other.radius - EPSILON
    return _ellipse_in_curve(curve, other)


def _ellipse_in_curve(curve: Shape, ellipse: Shape) -> bool:
    """
    Scales the plane about the container's centre so it becomes the unit
    circle, then checks the farthest point of the scaled ellipse.
    """
    if curve.kind is ShapeKind.CIRCLE:
        sx = sy = curve.radius
    else:
        sx, sy = curve.radius_x, curve.radius_y
    c, origin = ellipse.center(), curve.center()
    center = Coord((c.x - origin.x) / sx, (c.y - origin.y) / sy)
    far = farthest_point_on_ellipse(center, ellipse.radius_x / sx, ellipse.radius_y / sy, Coord(0.0, 0.0))
    return far.magnitude() <= 1.0 + EPSILON


def _polygonal_contains(poly: Shape, other: Shape) -> bool:
    if other.kind is ShapeKind.CIRCLE:
        c = other.center()
        if not poly._contains_point(c):
            return False
        return all(distance_to_segment(c, s, e) >= other.radius - EPSILON for s, e in poly.edges())
    if other.kind is ShapeKind.ELLIPSE:
        c = other.center()
        if not poly._contains_point(c):
            return False
        return all(
            ellipse_edge_distance(c, other.radius_x, other.radius_y, s, e) >= 1.0 - EPSILON
            for s, e in poly.edges()
        )
    if not _all_contained(poly, _vertices(other)):
        return False
    if _is_convex(poly):
        return True
    return all(_segment_inside(poly, s, e) for s, e in other.edges())


def _segment_inside(poly: Shape, start, end) -> bool:
    """
    Splits start->end wherever it meets poly's boundary and checks that the
    middle of every piece is inside.
    """
    params = {0.0, 1.0}
    for s, e in poly.edges():
        params.update(segment_contact_params(start, end, s, e))
    ordered = sorted(params)
    for t0, t1 in zip(ordered, ordered[1:]):
        if t1 - t0 <= EPSILON:
            continue
        if not poly._contains_point(start.lerp(end, (t0 + t1) / 2.0)):
            return False
    return True
