"""
Tests for Ellipse: normalized containment, flat ellipses, rotation
(exact for quarter turns, Polygon otherwise) and pair tests.
"""
import pytest

from graphics_shapes import Circle, Coord, Ellipse, Line, Polygon, Rect, ShapeKind


@pytest.fixture
def ellipse():
    return Ellipse((0, 0), 10, 5)


class TestContains:

    def test_points(self, ellipse):
        assert ellipse.contains((0, 0))
        assert ellipse.contains((10, 0))
        assert ellipse.contains((0, 5))
        assert ellipse.contains((7, 3.5))
        assert not ellipse.contains((0, 5.1))
        assert not ellipse.contains((8, 4))

    def test_flat_ellipse_is_a_line(self):
        flat = Ellipse((0, 0), 5, 0)
        assert flat.is_degenerate()
        assert flat.contains((3, 0))
        assert not flat.contains((3, 1))
        assert flat.degenerate_line() == Line((-5, 0), (5, 0))
        assert Ellipse((2, 2), 0, 0).contains((2, 2))

    def test_contains_shapes(self, ellipse):
        assert ellipse.contains(Rect((-5, -2), (5, 2)))
        assert not ellipse.contains(Rect((-9, -4), (9, 4)))
        assert ellipse.contains(Circle((0, 0), 4))
        assert ellipse.contains(Circle((6, 0), 3))
        assert not ellipse.contains(Circle((6, 0), 4))
        assert ellipse.contains(Ellipse((0, 0), 5, 2))
        assert not ellipse.contains(Ellipse((0, 0), 5, 6))


class TestIntersects:

    def test_circle(self, ellipse):
        assert ellipse.intersects(Circle((0, 8), 3.1))
        assert not ellipse.intersects(Circle((0, 8), 2.9))
        assert Circle((0, 8), 3.1).intersects(ellipse)

    def test_rect(self, ellipse):
        assert ellipse.intersects(Rect((9, -1), (12, 1)))
        assert not ellipse.intersects(Rect((11, -1), (12, 1)))
        assert ellipse.intersects(Rect((-20, -20), (20, 20)))

    def test_ellipse(self, ellipse):
        assert ellipse.intersects(Ellipse((18, 0), 9, 3))
        assert not ellipse.intersects(Ellipse((25, 0), 9, 3))
        assert Ellipse((18, 0), 9, 3).intersects(ellipse)

    def test_flat_ellipse_against_line(self):
        flat = Ellipse((0, 0), 5, 0)
        assert flat.intersects(Line((2, -3), (2, 3)))
        assert not flat.intersects(Line((6, -3), (6, 3)))


class TestPixels:

    def test_outline_hits_axis_ends(self, ellipse):
        pixels = ellipse.outline_pixels()
        for p in (Coord(10, 0), Coord(-10, 0), Coord(0, -5), Coord(0, 5)):
            assert p in pixels

    def test_fill_covers_outline(self, ellipse):
        filled = ellipse.filled_pixels()
        assert Coord(0, 0) in filled
        assert Coord(0, 6) not in filled
        assert ellipse.outline_pixels(3) <= filled


class TestTransforms:

    def test_quarter_turn_swaps_radii(self, ellipse):
        rotated = ellipse.rotate(90)
        assert isinstance(rotated, Ellipse)
        assert rotated.radius_x == pytest.approx(5.0)
        assert rotated.radius_y == pytest.approx(10.0)

    def test_half_turn_keeps_radii(self, ellipse):
        rotated = ellipse.rotate(180)
        assert rotated.kind is ShapeKind.ELLIPSE
        assert rotated.radius_x == pytest.approx(10.0)
        assert rotated.radius_y == pytest.approx(5.0)

    def test_other_angles_approximate_with_polygon(self, ellipse):
        rotated = ellipse.rotate(30)
        assert isinstance(rotated, Polygon)
        assert len(rotated.points()) == 64
        assert rotated.contains((0, 0))

    def test_round_ellipse_rotates_exactly(self):
        rotated = Ellipse((0, 0), 10, 10).rotate(30)
        assert isinstance(rotated, Ellipse)
        assert rotated.radius_x == pytest.approx(10.0)
        assert rotated.radius_y == pytest.approx(10.0)

    def test_scale(self, ellipse):
        scaled = ellipse.scale(2)
        assert scaled == Ellipse((0, 0), 20, 10)


class TestConversion:

    def test_dimensions(self, ellipse):
        assert ellipse.width() == 20
        assert ellipse.height() == 10
        assert ellipse.to_outer_rect() == Rect((-10, -5), (10, 5))

    def test_to_circle(self):
        assert Ellipse((1, 1), 4, 4).to_circle() == Circle((1, 1), 4)
        assert Ellipse((1, 1), 4, 3).to_circle() is None

    def test_axis_lines(self, ellipse):
        assert ellipse.to_horizontal_line() == Line((-10, 0), (10, 0))
        assert ellipse.to_vertical_line() == Line((0, -5), (0, 5))

    def test_to_polygon(self, ellipse):
        poly = ellipse.to_polygon(4)
        assert len(poly.points()) == 4
        assert ellipse.contains(poly)
