from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional
import math
import numpy as np

from .coord import Coord, PointLike, to_coord


def _snap(value: float) -> float:
    # quarter turns should produce exact 0/±1 entries, not 6e-17
    nearest = round(value)
    return float(nearest) if abs(value - nearest) < 1e-12 else value


@dataclass(frozen=True)
class Affine2D:
    """
    2D affine transform x -> A x + t

    Instances are callables mapping Coord -> Coord, so they can be passed
    straight to Shape.transform().
    """
    A: np.ndarray  # shape (2, 2)
    t: np.ndarray  # shape (2,)

    def __post_init__(self):
        if self.A.shape != (2, 2):
            raise ValueError("A must be 2x2")
        if self.t.shape != (2,):
            raise ValueError("t must be length-2")

    def apply(self, point_xy: np.ndarray) -> np.ndarray:
        """
        Maps one (2,) point or an (N, 2) array of points.
        """
        return point_xy @ self.A.T + self.t

    def apply_many(self, points: Iterable[PointLike]) -> List[Coord]:
        coords = [to_coord(p) for p in points]
        if not coords:
            return []
        arr = np.array([[c.x, c.y] for c in coords], dtype=float)
        out = self.apply(arr)
        return [Coord(float(x), float(y)) for x, y in out]

    def __call__(self, point: PointLike) -> Coord:
        return self.apply_many([point])[0]

    # ---- Constructors and composition ----
    @staticmethod
    def identity() -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.zeros(2))

    @staticmethod
    def from_translate(dx: float, dy: float) -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.array([dx, dy], dtype=float))

    @staticmethod
    def from_scale(sx: float, sy: float | None = None) -> "Affine2D":
        if sy is None:
            sy = sx
        return Affine2D(A=np.array([[sx, 0.0], [0.0, sy]], dtype=float), t=np.zeros(2))

    @staticmethod
    def from_rotation(degrees: float) -> "Affine2D":
        """
        Clockwise on screen (y down): (1, 0) rotated by 90 becomes (0, 1).
        """
        rads = math.radians(degrees)
        c = _snap(math.cos(rads))
        s = _snap(math.sin(rads))
        return Affine2D(A=np.array([[c, -s], [s, c]], dtype=float), t=np.zeros(2))

    def then(self, after: "Affine2D") -> "Affine2D":
        """
        First apply self, then apply 'after'.
        y = after.apply(self.apply(x))
        """
        A_new = after.A @ self.A
        t_new = after.A @ self.t + after.t
        return Affine2D(A=A_new, t=t_new)

    def about(self, anchor: PointLike) -> "Affine2D":
        """
        Same linear part, applied with `anchor` as the fixed point.
        """
        a = to_coord(anchor)
        to_origin = Affine2D.from_translate(-a.x, -a.y)
        back = Affine2D.from_translate(a.x, a.y)
        return to_origin.then(self).then(back)

    # ---- Convenience ----
    @staticmethod
    def rotation_about(degrees: float, anchor: PointLike) -> "Affine2D":
        return Affine2D.from_rotation(degrees).about(anchor)

    @staticmethod
    def scale_about(factor: float, anchor: PointLike, factor_y: Optional[float] = None) -> "Affine2D":
        return Affine2D.from_scale(factor, factor_y).about(anchor)

