"""
Tests for Circle: containment, closest-point intersection against
polygonal shapes, rasterization and conversions.
"""
import math

import pytest

from graphics_shapes import Circle, Coord, Ellipse, Line, Polygon, Rect, Triangle


class TestContains:

    def test_points(self):
        circle = Circle((0, 0), 5)
        assert circle.contains((0, 0))
        assert circle.contains((3, 4))
        assert not circle.contains((3.1, 4))

    def test_keyword_construction(self):
        circle = Circle(center=(1, 2), radius=3)
        assert circle.center() == Coord(1, 2)
        assert circle.radius == 3

    def test_zero_radius_is_a_point(self):
        dot = Circle((2, 2), 0)
        assert dot.contains((2, 2))
        assert not dot.contains((2, 2.1))
        assert dot.filled_pixels() == {Coord(2, 2)}

    def test_contains_shapes(self):
        circle = Circle((0, 0), 10)
        assert circle.contains(Rect((-5, -5), (5, 5)))
        assert not circle.contains(Rect((-8, -8), (8, 8)))
        assert circle.contains(Circle((3, 0), 7))
        assert not circle.contains(Circle((3, 0), 7.5))
        assert circle.contains(Triangle((0, -10), (8, 6), (-8, 6)))


class TestIntersects:

    def test_crossing_rect_edge(self):
        circle = Circle(center=(0, 0), radius=5)
        rect = Rect((3, 3), (10, 10))
        assert circle.intersects(rect)
        assert rect.intersects(circle)

    def test_misses_rect_corner(self):
        assert not Circle((0, 0), 5).intersects(Rect((4, 4), (10, 10)))

    def test_circle_inside_polygon(self):
        assert Circle((5, 5), 1).intersects(Rect((0, 0), (10, 10)))

    def test_circles_touching(self):
        assert Circle((0, 0), 5).intersects(Circle((10, 0), 5))
        assert not Circle((0, 0), 5).intersects(Circle((10.1, 0), 5))

    def test_line_through_circle(self):
        assert Circle((0, 0), 2).intersects(Line((-5, 1), (5, 1)))
        assert not Circle((0, 0), 2).intersects(Line((-5, 3), (5, 3)))


class TestPixels:

    def test_outline_reaches_the_axes(self):
        pixels = Circle((0, 0), 5).outline_pixels()
        for p in (Coord(5, 0), Coord(0, 5), Coord(-5, 0), Coord(0, -5)):
            assert p in pixels
        assert Coord(0, 0) not in pixels

    def test_fill(self):
        filled = Circle((0, 0), 5).filled_pixels()
        assert Coord(0, 0) in filled
        assert Coord(3, 4) in filled
        assert Coord(6, 0) not in filled
        assert Circle((0, 0), 5).outline_pixels(3) <= filled


class TestTransforms:

    def test_rotate_keeps_circle(self):
        rotated = Circle((3, 4), 5).rotate(37)
        assert isinstance(rotated, Circle)
        assert rotated.center().x == pytest.approx(3.0)
        assert rotated.center().y == pytest.approx(4.0)
        assert rotated.radius == pytest.approx(5.0)

    def test_rotate_around_other_point(self):
        moved = Circle((10, 0), 2).rotate_around(90, (0, 0))
        assert moved.center().x == pytest.approx(0.0, abs=1e-9)
        assert moved.center().y == pytest.approx(10.0)
        assert moved.radius == pytest.approx(2.0)

    def test_scale(self):
        assert Circle((1, 1), 2).scale(3).radius == pytest.approx(6.0)


class TestConversion:

    def test_to_inner_rect_is_inscribed(self):
        circle = Circle((4, 4), 5)
        square = circle.to_inner_rect()
        assert square.is_square()
        assert square.width() == pytest.approx(5 * math.sqrt(2))
        assert circle.contains(square)

    def test_to_polygon(self):
        poly = Circle((0, 0), 10).to_polygon(8)
        assert isinstance(poly, Polygon)
        assert len(poly.points()) == 8
        assert poly.points()[0] == Coord(0, -10)
        assert Circle((0, 0), 10).contains(poly)

    def test_to_ellipse_and_outer_rect(self):
        circle = Circle((1, 2), 3)
        assert circle.to_ellipse() == Ellipse((1, 2), 3, 3)
        assert circle.to_outer_rect() == Rect((-2, -1), (4, 5))
