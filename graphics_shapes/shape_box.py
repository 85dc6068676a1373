from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Set

from .coord import Coord, PointLike
from .geometry import Shape, ShapeKind


@dataclass(frozen=True)
class ShapeBox:
    """
    Holds exactly one shape of any kind and forwards the shape interface to it,
    so mixed shapes can live in one list. Transforms return a new ShapeBox.
    """
    shape: Shape

    def __post_init__(self):
        inner = self.shape
        if isinstance(inner, ShapeBox):
            inner = inner.shape
        if not isinstance(inner, Shape):
            raise TypeError(f"ShapeBox needs a shape, got {type(inner).__name__}")
        object.__setattr__(self, "shape", inner)

    @property
    def kind(self) -> ShapeKind:
        return self.shape.kind

    def unwrap(self) -> Shape:
        return self.shape

    # ---- Queries ----
    def contains(self, item: Any) -> bool:
        return self.shape.contains(item)

    def intersects(self, item: Any) -> bool:
        return self.shape.intersects(item)

    def points(self) -> List[Coord]:
        return self.shape.points()

    def center(self) -> Coord:
        return self.shape.center()

    def outline_pixels(self, line_width: int = 1) -> Set[Coord]:
        return self.shape.outline_pixels(line_width)

    def filled_pixels(self) -> Set[Coord]:
        return self.shape.filled_pixels()

    # ---- Bounds ----
    def left(self) -> float:
        return self.shape.left()

    def right(self) -> float:
        return self.shape.right()

    def top(self) -> float:
        return self.shape.top()

    def bottom(self) -> float:
        return self.shape.bottom()

    def top_left(self) -> Coord:
        return self.shape.top_left()

    def top_right(self) -> Coord:
        return self.shape.top_right()

    def bottom_left(self) -> Coord:
        return self.shape.bottom_left()

    def bottom_right(self) -> Coord:
        return self.shape.bottom_right()

    # ---- Transforms ----
    def transform(self, fn: Callable[[Coord], Any]) -> "ShapeBox":
        return ShapeBox(self.shape.transform(fn))

    def translate_by(self, delta: PointLike) -> "ShapeBox":
        return ShapeBox(self.shape.translate_by(delta))

    def move_to(self, point: PointLike) -> "ShapeBox":
        return ShapeBox(self.shape.move_to(point))

    def move_center_to(self, point: PointLike) -> "ShapeBox":
        return ShapeBox(self.shape.move_center_to(point))

    def rotate(self, degrees: float) -> "ShapeBox":
        return ShapeBox(self.shape.rotate(degrees))

    def rotate_around(self, degrees: float, point: PointLike) -> "ShapeBox":
        return ShapeBox(self.shape.rotate_around(degrees, point))

    def scale(self, factor: float, about: Optional[PointLike] = None) -> "ShapeBox":
        return ShapeBox(self.shape.scale(factor, about))

    # ---- Conversion ----
    def to_outer_rect(self):
        return self.shape.to_outer_rect()

    def to_shape_box(self) -> "ShapeBox":
        return self
