from __future__ import annotations

from typing import List, Sequence, Tuple
import math
import numpy as np

from .config import DEFAULT_CONFIG
from .coord import Coord

EPSILON = DEFAULT_CONFIG.epsilon

Segment = Tuple[Coord, Coord]


def orientation(p: Coord, q: Coord, r: Coord, eps: float = EPSILON) -> int:
    """
    Side of r relative to the directed line p->q.

    Returns 1 (left, positive cross), -1 (right) or 0 when r is within
    `eps` of the line. A zero-length p->q reports 0.
    """
    base = q - p
    length = base.magnitude()
    if length == 0.0:
        return 0
    signed_dist = base.cross_product(r - p) / length
    if signed_dist > eps:
        return 1
    if signed_dist < -eps:
        return -1
    return 0


def closest_point_on_segment(p: Coord, a: Coord, b: Coord) -> Coord:
    ab = b - a
    denom = ab.dot_product(ab)
    if denom == 0.0:
        return a
    t = max(0.0, min(1.0, (p - a).dot_product(ab) / denom))
    return a.lerp(b, t)


def distance_to_segment(p: Coord, a: Coord, b: Coord) -> float:
    return p.distance(closest_point_on_segment(p, a, b))


def point_on_segment(p: Coord, a: Coord, b: Coord, eps: float = EPSILON) -> bool:
    return distance_to_segment(p, a, b) <= eps


def segments_intersect(a: Coord, b: Coord, c: Coord, d: Coord, eps: float = EPSILON) -> bool:
    """
    True if segments ab and cd share at least one point (touching counts).
    """
    if (point_on_segment(c, a, b, eps) or point_on_segment(d, a, b, eps)
            or point_on_segment(a, c, d, eps) or point_on_segment(b, c, d, eps)):
        return True
    o1 = orientation(a, b, c, eps)
    o2 = orientation(a, b, d, eps)
    o3 = orientation(c, d, a, eps)
    o4 = orientation(c, d, b, eps)
    return o1 * o2 < 0 and o3 * o4 < 0


def segment_contact_params(a: Coord, b: Coord, c: Coord, d: Coord, eps: float = EPSILON) -> List[float]:
    """
    Parameters t in [0, 1] along a->b where ab touches or crosses cd.
    """
    params: List[float] = []
    for p in (c, d):
        if point_on_segment(p, a, b, eps):
            params.append(a.inv_lerp(b, p))
    if point_on_segment(a, c, d, eps):
        params.append(0.0)
    if point_on_segment(b, c, d, eps):
        params.append(1.0)
    if (orientation(a, b, c, eps) * orientation(a, b, d, eps) < 0
            and orientation(c, d, a, eps) * orientation(c, d, b, eps) < 0):
        r = b - a
        s = d - c
        params.append((c - a).cross_product(s) / r.cross_product(s))
    return [max(0.0, min(1.0, t)) for t in params]


def closed_edges(points: Sequence[Coord]) -> List[Segment]:
    n = len(points)
    if n == 1:
        return [(points[0], points[0])]
    if n == 2:
        return [(points[0], points[1])]
    return [(points[i], points[(i + 1) % n]) for i in range(n)]


def distinct_points(points: Sequence[Coord]) -> List[Coord]:
    """
    Drops consecutive duplicates (including last == first).
    """
    out: List[Coord] = []
    for p in points:
        if not out or out[-1] != p:
            out.append(p)
    while len(out) > 1 and out[-1] == out[0]:
        out.pop()
    return out


def signed_area(points: Sequence[Coord]) -> float:
    """
    Shoelace area; positive when the interior lies to the left of each edge
    (left meaning the (-dy, dx) normal).
    """
    if len(points) < 3:
        return 0.0
    arr = np.array([[p.x, p.y] for p in points], dtype=float)
    x, y = arr[:, 0], arr[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def inward_normal(a: Coord, b: Coord, area_sign: float) -> Coord:
    """
    Unit normal of edge a->b pointing to the interior of a polygon whose
    signed area has sign `area_sign`.
    """
    e = b - a
    length = e.magnitude()
    if length == 0.0:
        return Coord(0.0, 0.0)
    left = Coord(-e.y / length, e.x / length)
    return left if area_sign >= 0 else -left


def closest_point_on_ellipse(
    center: Coord,
    radius_x: float,
    radius_y: float,
    point: Coord,
    iterations: int = DEFAULT_CONFIG.ellipse_iterations,
) -> Coord:
    """
    Closest boundary point of an axis-aligned ellipse (radii > 0).

    Iterates on the evolute of the quadrant containing the point, which
    converges in a handful of steps for any eccentricity.
    """
    rel = point - center
    px, py = abs(rel.x), abs(rel.y)
    a, b = radius_x, radius_y
    tx = ty = math.sqrt(0.5)
    for _ in range(iterations):
        x = a * tx
        y = b * ty
        ex = (a * a - b * b) * tx ** 3 / a
        ey = (b * b - a * a) * ty ** 3 / b
        rx, ry = x - ex, y - ey
        qx, qy = px - ex, py - ey
        r = math.hypot(rx, ry)
        q = math.hypot(qx, qy)
        if q == 0.0:
            break
        tx = min(1.0, max(0.0, (qx * r / q + ex) / a))
        ty = min(1.0, max(0.0, (qy * r / q + ey) / b))
        t = math.hypot(tx, ty)
        tx /= t
        ty /= t
    return Coord(center.x + math.copysign(a * tx, rel.x), center.y + math.copysign(b * ty, rel.y))


def normalize_to_ellipse(point: Coord, center: Coord, radius_x: float, radius_y: float) -> Coord:
    """
    Maps the ellipse onto the unit circle at the origin.
    """
    return Coord((point.x - center.x) / radius_x, (point.y - center.y) / radius_y)


def ellipse_boundary(center: Coord, radius_x: float, radius_y: float, count: int) -> List[Coord]:
    """
    `count` points on the boundary, clockwise from the top.
    """
    angles = np.linspace(0.0, 2.0 * math.pi, count, endpoint=False)
    xs = center.x + radius_x * np.sin(angles)
    ys = center.y - radius_y * np.cos(angles)
    return [Coord(float(x), float(y)) for x, y in zip(xs, ys)]


def ellipse_edge_distance(center: Coord, radius_x: float, radius_y: float, a: Coord, b: Coord) -> float:
    """
    Distance from the origin to edge ab after mapping the ellipse onto the
    unit circle. <= 1 means the edge reaches the ellipse.
    """
    na = normalize_to_ellipse(a, center, radius_x, radius_y)
    nb = normalize_to_ellipse(b, center, radius_x, radius_y)
    return distance_to_segment(Coord(0.0, 0.0), na, nb)


def farthest_point_on_ellipse(
    center: Coord,
    radius_x: float,
    radius_y: float,
    point: Coord,
    samples: int = 256,
    iterations: int = 60,
) -> Coord:
    """
    Boundary point of an axis-aligned ellipse farthest from `point`.

    The best of `samples` evenly spaced angles brackets the maximum, then a
    golden-section search refines the angle inside that bracket.
    """
    rel = point - center

    def dist2(theta: float) -> float:
        dx = radius_x * math.sin(theta) - rel.x
        dy = -radius_y * math.cos(theta) - rel.y
        return dx * dx + dy * dy

    angles = np.linspace(0.0, 2.0 * math.pi, samples, endpoint=False)
    d2 = (radius_x * np.sin(angles) - rel.x) ** 2 + (radius_y * np.cos(angles) + rel.y) ** 2
    best = float(angles[int(np.argmax(d2))])
    step = 2.0 * math.pi / samples

    ratio = (math.sqrt(5.0) - 1.0) / 2.0
    lo, hi = best - step, best + step
    for _ in range(iterations):
        m1 = hi - ratio * (hi - lo)
        m2 = lo + ratio * (hi - lo)
        if dist2(m1) < dist2(m2):
            lo = m1
        else:
            hi = m2
    theta = max((best, (lo + hi) / 2.0), key=dist2)
    return Coord(center.x + radius_x * math.sin(theta), center.y - radius_y * math.cos(theta))
