from __future__ import annotations

import json
from typing import Any, Dict

from .circle import Circle
from .coord import Coord, to_coord
from .ellipse import Ellipse
from .geometry import Shape, ShapeKind, as_shape
from .line import Line
from .polygon import Polygon
from .rect import Rect
from .triangle import Triangle


def coord_to_dict(c: Coord) -> dict:
    return {"x": c.x, "y": c.y}


def coord_from_dict(d: Any) -> Coord:
    try:
        return to_coord((d["x"], d["y"]))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid coordinate in shape JSON: {d!r}") from exc


def shape_to_dict(shape) -> dict:
    """
    Field-for-field mapping of a shape (or the shape inside a ShapeBox).
    """
    s = as_shape(shape)
    if s is None:
        raise TypeError(f"not a shape: {shape!r}")
    d: Dict[str, Any] = {"kind": s.kind.value}
    if s.kind is ShapeKind.LINE:
        d["start"] = coord_to_dict(s.start)
        d["end"] = coord_to_dict(s.end)
    elif s.kind is ShapeKind.RECT:
        d["top_left"] = coord_to_dict(s.top_left_corner)
        d["bottom_right"] = coord_to_dict(s.bottom_right_corner)
    elif s.kind is ShapeKind.CIRCLE:
        d["center"] = coord_to_dict(s.center_point)
        d["radius"] = float(s.radius)
    elif s.kind is ShapeKind.ELLIPSE:
        d["center"] = coord_to_dict(s.center_point)
        d["radius_x"] = float(s.radius_x)
        d["radius_y"] = float(s.radius_y)
    else:
        d["points"] = [coord_to_dict(p) for p in s.points()]
    return d


def _radius(d: dict, key: str) -> float:
    value = d[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValueError(f"Invalid {key} in shape JSON: {value!r}")
    return value


def shape_from_dict(d: Any) -> Shape:
    try:
        kind = ShapeKind(d["kind"])
        if kind is ShapeKind.LINE:
            return Line(coord_from_dict(d["start"]), coord_from_dict(d["end"]))
        if kind is ShapeKind.RECT:
            return Rect(coord_from_dict(d["top_left"]), coord_from_dict(d["bottom_right"]))
        if kind is ShapeKind.CIRCLE:
            return Circle(coord_from_dict(d["center"]), _radius(d, "radius"))
        if kind is ShapeKind.ELLIPSE:
            return Ellipse(coord_from_dict(d["center"]), _radius(d, "radius_x"), _radius(d, "radius_y"))
        points = [coord_from_dict(p) for p in d["points"]]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Invalid shape in JSON: {d!r}") from exc
    if kind is ShapeKind.TRIANGLE:
        if len(points) != 3:
            raise ValueError(f"Triangle needs 3 points, got {len(points)}")
        return Triangle(*points)
    return Polygon(points)


def dumps(shape, **kwargs) -> str:
    return json.dumps(shape_to_dict(shape), **kwargs)


def loads(text: str) -> Shape:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid shape JSON") from exc
    return shape_from_dict(data)
