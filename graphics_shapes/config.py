from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConfig:
    """
    Numeric policy shared by every shape.

    epsilon: absolute tolerance (in pixels) for on-boundary comparisons
    samples_per_pixel: curve samples per pixel of circumference when rasterizing
    min_curve_samples: lower bound on samples for tiny circles/ellipses
    polygon_segments: vertex count when a curve is converted to a Polygon
    ellipse_iterations: refinement steps for closest point on an ellipse
    """
    epsilon: float = 1e-9
    samples_per_pixel: float = 2.0
    min_curve_samples: int = 16
    polygon_segments: int = 64
    ellipse_iterations: int = 6


DEFAULT_CONFIG = GeometryConfig()
