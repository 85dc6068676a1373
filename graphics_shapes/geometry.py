from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ClassVar, List, Optional, Sequence, Set, Tuple

from .affine import Affine2D
from .coord import Coord, PointLike, to_coord
from .raster import scan_fill


class ShapeKind(Enum):
    LINE = "line"
    RECT = "rect"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"

    @property
    def rank(self) -> int:
        return _KIND_ORDER.index(self)


_KIND_ORDER = list(ShapeKind)


def map_points(fn: Callable[[Coord], Any], points: Sequence[Coord]) -> List[Coord]:
    """
    Applies `fn` to every point, in one numpy batch when it is an Affine2D.
    """
    if isinstance(fn, Affine2D):
        return fn.apply_many(points)
    return [to_coord(fn(p)) for p in points]


def as_shape(item: Any) -> Optional["Shape"]:
    """
    The shape behind `item` (unwrapping a ShapeBox), or None for non-shapes.
    """
    if isinstance(item, Shape):
        return item
    unwrap = getattr(item, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    return None


class Shape:
    """
    Capability interface shared by every variant.

    Subclasses provide points(), rebuild(), center(), _contains_point() and
    outline_pixels(); everything else is derived. All operations return new
    values, shapes are never mutated.
    """
    kind: ClassVar[ShapeKind]

    def points(self) -> List[Coord]:
        raise NotImplementedError

    def rebuild(self, points: Sequence[Coord]) -> "Shape":
        """
        Same variant built from a new list of defining points.
        """
        raise NotImplementedError

    def center(self) -> Coord:
        raise NotImplementedError

    def _contains_point(self, point: Coord) -> bool:
        raise NotImplementedError

    # ---- Queries ----
    def contains(self, item: Any) -> bool:
        """
        True if the point (or every point of the shape) is on or inside self.
        """
        other = as_shape(item)
        if other is not None:
            from .contains import contains_shape
            return contains_shape(self, other)
        return self._contains_point(to_coord(item))

    def intersects(self, item: Any) -> bool:
        """
        True if self and `item` share at least one point. Symmetric.
        """
        other = as_shape(item)
        if other is None:
            return self._contains_point(to_coord(item))
        from .intersection import intersects
        return intersects(self, other)

    # ---- Rasterization ----
    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        raise NotImplementedError

    def filled_pixels(self) -> Set[Coord]:
        return scan_fill(self) | self.outline_pixels(1)

    # ---- Bounds ----
    def left(self) -> float:
        return min(p.x for p in self.points())

    def right(self) -> float:
        return max(p.x for p in self.points())

    def top(self) -> float:
        return min(p.y for p in self.points())

    def bottom(self) -> float:
        return max(p.y for p in self.points())

    def top_left(self) -> Coord:
        return Coord(self.left(), self.top())

    def top_right(self) -> Coord:
        return Coord(self.right(), self.top())

    def bottom_left(self) -> Coord:
        return Coord(self.left(), self.bottom())

    def bottom_right(self) -> Coord:
        return Coord(self.right(), self.bottom())

    # ---- Transform helpers ----
    def transform(self, fn: Callable[[Coord], Any]) -> "Shape":
        return self.rebuild(map_points(fn, self.points()))

    def translate_by(self, delta: PointLike) -> "Shape":
        d = to_coord(delta)
        return self.transform(Affine2D.from_translate(d.x, d.y))

    def move_to(self, point: PointLike) -> "Shape":
        """
        Moves the first defining point onto `point`, keeping the shape rigid.
        """
        return self.translate_by(to_coord(point) - self.points()[0])

    def move_center_to(self, point: PointLike) -> "Shape":
        return self.translate_by(to_coord(point) - self.center())

    def rotate(self, degrees: float) -> "Shape":
        return self.rotate_around(degrees, self.center())

    def rotate_around(self, degrees: float, point: PointLike) -> "Shape":
        return self.transform(Affine2D.rotation_about(degrees, point))

    def scale(self, factor: float, about: Optional[PointLike] = None) -> "Shape":
        anchor = self.center() if about is None else to_coord(about)
        return self.transform(Affine2D.scale_about(factor, anchor))

    # ---- Conversion ----
    def to_outer_rect(self):
        from .rect import Rect
        return Rect(self.top_left(), self.bottom_right())

    def to_shape_box(self):
        from .shape_box import ShapeBox
        return ShapeBox(self)

    def _sort_key(self) -> Tuple[float, ...]:
        return tuple(v for p in self.points() for v in p)
