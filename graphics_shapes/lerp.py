from __future__ import annotations


def flerp(start: float, end: float, percent: float) -> float:
    """
    Value at `percent` between start and end.

    >>> flerp(10.0, 20.0, 0.5)
    15.0
    """
    return start + (end - start) * percent


def inv_flerp(start: float, end: float, point: float) -> float:
    """
    Percent of `point` between start and end (inverse of flerp).

    Returns 0.0 for a zero-width range instead of dividing by zero.

    >>> inv_flerp(10.0, 20.0, 15.0)
    0.5
    """
    if point == start:
        return 0.0
    if point == end:
        return 1.0
    if end == start:
        return 0.0
    return (point - start) / (end - start)
