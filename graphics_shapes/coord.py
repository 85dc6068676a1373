from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Iterator, Union
import math
import numpy as np


def _number(value: Any) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"coordinate components must be real numbers, got {value!r}")
    if isinstance(value, Integral):
        return int(value)
    return float(value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Coord:
    """
    Immutable 2D point. Screen convention: x grows right, y grows down.

    Angles are in degrees with 0 pointing up (negative y) and increasing
    clockwise, so 90 is right and 180 is down.
    """
    x: float
    y: float

    # ---- Construction ----
    @staticmethod
    def from_angle(center: Any, distance: float, degrees: float) -> "Coord":
        c = to_coord(center)
        rads = math.radians(degrees)
        return Coord(c.x + distance * math.sin(rads), c.y - distance * math.cos(rads))

    @staticmethod
    def from_point(point: Any) -> "Coord":
        """
        Build from any foreign point type exposing numeric `x` and `y`.
        """
        return Coord(_number(point.x), _number(point.y))

    # ---- Arithmetic ----
    def __add__(self, other: Any) -> "Coord":
        o = to_coord(other)
        return Coord(self.x + o.x, self.y + o.y)

    def __radd__(self, other: Any) -> "Coord":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Coord":
        o = to_coord(other)
        return Coord(self.x - o.x, self.y - o.y)

    def __rsub__(self, other: Any) -> "Coord":
        return to_coord(other) - self

    def __mul__(self, other: Any) -> "Coord":
        if isinstance(other, Real) and not isinstance(other, bool):
            return Coord(self.x * other, self.y * other)
        o = to_coord(other)
        return Coord(self.x * o.x, self.y * o.y)

    def __rmul__(self, other: Any) -> "Coord":
        return self.__mul__(other)

    def __truediv__(self, scalar: float) -> "Coord":
        return Coord(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Coord":
        return Coord(-self.x, -self.y)

    def __abs__(self) -> "Coord":
        return Coord(abs(self.x), abs(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # ---- Measurements ----
    def distance(self, other: Any) -> float:
        o = to_coord(other)
        return math.hypot(o.x - self.x, o.y - self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def mid_point(self, other: Any) -> "Coord":
        o = to_coord(other)
        return Coord((self.x + o.x) / 2.0, (self.y + o.y) / 2.0)

    def angle_to(self, other: Any) -> float:
        """
        Degrees from self to other, in (-180, 180].
        """
        o = to_coord(other)
        angle = math.degrees(math.atan2(o.x - self.x, -(o.y - self.y)))
        return 180.0 if angle == -180.0 else angle

    def cross_product(self, other: Any) -> float:
        o = to_coord(other)
        return self.x * o.y - self.y * o.x

    def dot_product(self, other: Any) -> float:
        o = to_coord(other)
        return self.x * o.x + self.y * o.y

    def perpendicular(self) -> "Coord":
        return Coord(self.y, -self.x)

    # ---- Interpolation ----
    def lerp(self, end: Any, percent: float) -> "Coord":
        e = to_coord(end)
        return Coord(self.x + (e.x - self.x) * percent, self.y + (e.y - self.y) * percent)

    def inv_lerp(self, end: Any, point: Any) -> float:
        """
        Percent along self->end of the projection of `point` (inverse of lerp).
        """
        e = to_coord(end)
        p = to_coord(point)
        direction = e - self
        length_sq = direction.dot_product(direction)
        if length_sq == 0.0:
            return 0.0
        return (p - self).dot_product(direction) / length_sq

    # ---- Conversion ----
    def rounded(self) -> "Coord":
        return Coord(round_half_up(self.x), round_half_up(self.y))

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


PointLike = Union[Coord, tuple, list, np.ndarray, Any]


def to_coord(value: PointLike) -> Coord:
    """
    Accepts a Coord, an (x, y) pair/array, or any object with x and y attributes.
    """
    if isinstance(value, Coord):
        return value
    if hasattr(value, "x") and hasattr(value, "y"):
        return Coord.from_point(value)
    if isinstance(value, (str, bytes)):
        raise TypeError(f"cannot convert {value!r} to Coord")
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError(f"cannot convert {value!r} to Coord") from None
    return Coord(_number(x), _number(y))
