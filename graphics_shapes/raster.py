"""
Shared rasterization.

Outlines are produced by walking the boundary and rounding each sample to
the nearest pixel; fills by scanning the bounding box rows and keeping
pixel centres the shape contains. Wider strokes add contours offset towards
the interior and keep only pixels the shape contains, so a fill (scan plus
the one-pixel outline) always covers the outline at any width.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence, Set
import math
import numpy as np

from .config import DEFAULT_CONFIG
from .coord import Coord
from .general_math import Segment, inward_normal, ellipse_boundary

if TYPE_CHECKING:
    from .geometry import Shape

PixelSet = Set[Coord]


def _offsets(line_width: int) -> np.ndarray:
    # half-pixel steps keep neighbouring contours gap free
    return np.arange(0.5, line_width - 1 + 1e-9, 0.5)


def line_pixels(start: Coord, end: Coord) -> PixelSet:
    """
    DDA walk from start to end, one sample per pixel along the major axis.
    """
    steps = int(math.ceil(max(abs(end.x - start.x), abs(end.y - start.y))))
    if steps == 0:
        return {start.rounded()}
    return {start.lerp(end, i / steps).rounded() for i in range(steps + 1)}


def thick_line_pixels(start: Coord, end: Coord, line_width: int) -> PixelSet:
    """
    Stroke of `line_width` pixels centred on the segment.
    """
    pixels = line_pixels(start, end)
    if line_width <= 1:
        return pixels
    half = (line_width - 1) / 2.0
    direction = end - start
    length = direction.magnitude()
    if length == 0.0:
        c = start.rounded()
        lo = -int(math.floor(half))
        hi = int(math.ceil(half))
        return {Coord(c.x + dx, c.y + dy) for dx in range(lo, hi + 1) for dy in range(lo, hi + 1)}
    normal = Coord(-direction.y / length, direction.x / length)
    for k in np.arange(-half, half + 1e-9, 0.5):
        shift = normal * float(k)
        pixels |= line_pixels(start + shift, end + shift)
    return pixels


def edges_outline(edges: Iterable[Segment]) -> PixelSet:
    pixels: PixelSet = set()
    for a, b in edges:
        pixels |= line_pixels(a, b)
    return pixels


def inward_edge_pixels(shape: "Shape", edges: Sequence[Segment], area_sign: float, line_width: int) -> PixelSet:
    """
    Pixels of edges shifted towards the interior by 0.5 .. line_width - 1.
    """
    pixels: PixelSet = set()
    for k in _offsets(line_width):
        for a, b in edges:
            shift = inward_normal(a, b, area_sign) * float(k)
            for p in line_pixels(a + shift, b + shift):
                if shape.contains(p):
                    pixels.add(p)
    return pixels


def curve_sample_count(radius_x: float, radius_y: float) -> int:
    cfg = DEFAULT_CONFIG
    circumference = 2.0 * math.pi * max(radius_x, radius_y)
    return max(cfg.min_curve_samples, int(math.ceil(circumference * cfg.samples_per_pixel)))


def ring_pixels(center: Coord, radius_x: float, radius_y: float) -> PixelSet:
    """
    Rounded samples of an axis-aligned ellipse (circle when radii match).
    """
    if radius_x <= 0.0 and radius_y <= 0.0:
        return {center.rounded()}
    count = curve_sample_count(radius_x, radius_y)
    return {p.rounded() for p in ellipse_boundary(center, radius_x, radius_y, count)}


def inward_ring_pixels(shape: "Shape", center: Coord, radius_x: float, radius_y: float, line_width: int) -> PixelSet:
    pixels: PixelSet = set()
    for k in _offsets(line_width):
        rx = max(radius_x - float(k), 0.0)
        ry = max(radius_y - float(k), 0.0)
        for p in ring_pixels(center, rx, ry):
            if shape.contains(p):
                pixels.add(p)
    return pixels


def pixel_span(low: float, high: float) -> range:
    """
    Integer positions within [low, high], widened by the tolerance.
    """
    eps = DEFAULT_CONFIG.epsilon
    return range(int(math.ceil(low - eps)), int(math.floor(high + eps)) + 1)


def scan_fill(shape: "Shape") -> PixelSet:
    """
    Row-by-row scan of the bounding box keeping the pixels the shape contains.
    """
    pixels: PixelSet = set()
    xs: List[int] = list(pixel_span(shape.left(), shape.right()))
    for y in pixel_span(shape.top(), shape.bottom()):
        for x in xs:
            p = Coord(x, y)
            if shape.contains(p):
                pixels.add(p)
    return pixels
