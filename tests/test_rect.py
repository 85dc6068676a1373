"""
Tests for Rect: corner normalization, accessors, containment,
rasterization and the Rect/Polygon split under rotation.
"""
import pytest

from graphics_shapes import Circle, Coord, Line, Polygon, Rect, ShapeKind


class TestConstruction:

    def test_corners_are_normalized(self):
        rect = Rect((20, 5), (10, 15))
        assert rect.top_left() == Coord(10, 5)
        assert rect.bottom_right() == Coord(20, 15)
        assert rect.top_right() == Coord(20, 5)
        assert rect.bottom_left() == Coord(10, 15)

    def test_new_with_size(self):
        assert Rect.new_with_size((2, 3), 10, 4) == Rect((2, 3), (12, 7))

    def test_accessors(self):
        rect = Rect((0, 0), (10, 4))
        assert rect.width() == 10
        assert rect.height() == 4
        assert rect.area() == 40
        assert not rect.is_square()
        assert Rect((0, 0), (5, 5)).is_square()
        assert rect.center() == Coord(5, 2)

    def test_union(self):
        union = Rect((0, 0), (4, 4)).union(Rect((2, -3), (9, 1)))
        assert union == Rect((0, -3), (9, 4))


class TestContains:

    def test_inside_and_outside(self):
        rect = Rect((10, 10), (20, 20))
        assert rect.contains((15, 15))
        assert not rect.contains((25, 25))

    def test_boundary_counts(self):
        rect = Rect((10, 10), (20, 20))
        assert rect.contains((10, 10))
        assert rect.contains((20, 13))
        assert not rect.contains((20.001, 13))

    def test_contains_shapes(self):
        rect = Rect((0, 0), (10, 10))
        assert rect.contains(Rect((2, 2), (8, 8)))
        assert rect.contains(Rect((0, 0), (10, 10)))
        assert rect.contains(Line((0, 0), (10, 10)))
        assert not rect.contains(Rect((5, 5), (11, 8)))


class TestPixels:

    def test_outline_is_the_perimeter(self):
        pixels = Rect((0, 0), (4, 4)).outline_pixels()
        assert len(pixels) == 16
        assert Coord(2, 2) not in pixels
        assert Coord(4, 0) in pixels

    def test_fill_covers_every_pixel(self):
        assert Rect((0, 0), (4, 4)).filled_pixels() == {Coord(x, y) for x in range(5) for y in range(5)}

    def test_thick_outline_grows_inwards(self):
        rect = Rect((0, 0), (10, 10))
        pixels = rect.outline_pixels(3)
        assert Coord(2, 5) in pixels
        assert Coord(3, 5) not in pixels
        assert all(rect.contains(p) for p in pixels)
        assert pixels <= rect.filled_pixels()


class TestTransforms:

    def test_quarter_turn_stays_rect(self):
        rotated = Rect((0, 0), (10, 4)).rotate(90)
        assert rotated.kind is ShapeKind.RECT
        assert rotated.width() == pytest.approx(4.0)
        assert rotated.height() == pytest.approx(10.0)
        assert rotated.center().x == pytest.approx(5.0)
        assert rotated.center().y == pytest.approx(2.0)

    def test_other_angles_become_polygon(self):
        rotated = Rect((0, 0), (10, 10)).rotate(45)
        assert isinstance(rotated, Polygon)
        assert len(rotated.points()) == 4
        assert rotated.area() == pytest.approx(100.0)
        assert rotated.contains((5, -1.5))
        assert not rotated.contains((0.5, 0.5))

    def test_scale_about_corner(self):
        assert Rect((0, 0), (2, 3)).scale(2, about=(0, 0)) == Rect((0, 0), (4, 6))


class TestConversion:

    def test_to_lines(self):
        lines = Rect((0, 0), (2, 1)).to_lines()
        assert len(lines) == 4
        assert sum(line.length() for line in lines) == 6

    def test_to_triangles_cover_the_area(self):
        rect = Rect((1, 1), (7, 5))
        triangles = rect.to_triangles()
        assert len(triangles) == 2
        assert sum(t.area() for t in triangles) == pytest.approx(rect.area())

    def test_to_polygon(self):
        poly = Rect((0, 0), (3, 2)).to_polygon()
        assert poly.points() == [Coord(0, 0), Coord(3, 0), Coord(3, 2), Coord(0, 2)]

    def test_circles(self):
        rect = Rect((0, 0), (10, 4))
        assert rect.to_inner_circle() == Circle((5, 2), 2.0)
        assert rect.to_outer_circle() == Circle((5, 2), 5.0)
        assert rect.to_outer_rect() == rect
