"""
Tests for the pairwise intersection table: coverage of every pair of kinds,
symmetry, touching boundaries and a shapely cross-check on random integer
triangles and rectangles.
"""
import itertools

from shapely.geometry import box
from shapely.geometry import Polygon as ShapelyPolygon

from graphics_shapes import Circle, Ellipse, Line, Polygon, Rect, ShapeBox, Triangle, intersects
from graphics_shapes.intersection import _INTERSECTS


class TestTable:

    def test_every_pair_of_kinds_has_an_entry(self):
        assert len(_INTERSECTS) == 21

    def test_symmetric_over_every_pair(self, shapes):
        moved = [s.translate_by((7, 3)) for s in shapes]
        for a, b in itertools.product(shapes + moved, repeat=2):
            assert a.intersects(b) == b.intersects(a), (a, b)

    def test_shape_intersects_itself(self, shapes):
        for s in shapes:
            assert s.intersects(s)


class TestTouching:

    def test_rects_sharing_an_edge(self):
        assert Rect((0, 0), (10, 10)).intersects(Rect((10, 0), (20, 10)))
        assert not Rect((0, 0), (10, 10)).intersects(Rect((11, 0), (20, 10)))

    def test_line_on_triangle_vertex(self):
        tri = Triangle((0, 0), (10, 0), (5, 10))
        assert tri.intersects(Line((10, 0), (20, 0)))
        assert not tri.intersects(Line((11, 0), (20, 0)))

    def test_circle_tangent_to_line(self):
        circle = Circle((0, 0), 5)
        assert circle.intersects(Line((5, -5), (5, 5)))
        assert not circle.intersects(Line((5.1, -5), (5.1, 5)))

    def test_circles_touching(self):
        assert Circle((0, 0), 5).intersects(Circle((10, 0), 5))
        assert not Circle((0, 0), 5).intersects(Circle((10.1, 0), 5))

    def test_ellipses_touching_side_by_side(self):
        left = Ellipse((0, 0), 10, 5)
        assert left.intersects(Ellipse((20, 0), 10, 5))
        assert Ellipse((20, 0), 10, 5).intersects(left)
        assert not left.intersects(Ellipse((20.1, 0), 10, 5))

    def test_ellipse_touching_round_ellipse(self):
        assert Ellipse((0, 0), 10, 5).intersects(Ellipse((0, 9), 4, 4))
        assert not Ellipse((0, 0), 10, 5).intersects(Ellipse((0, 9.1), 4, 4))


class TestContainment:

    def test_circle_inside_rect(self):
        assert Rect((0, 0), (10, 10)).intersects(Circle((5, 5), 1))

    def test_triangle_inside_polygon(self, l_shape):
        assert l_shape.intersects(Triangle((1, 1), (3, 1), (1, 3)))

    def test_ellipse_around_line(self):
        assert Ellipse((0, 0), 10, 5).intersects(Line((-1, 0), (1, 0)))

    def test_polygon_in_concave_notch(self, l_shape):
        assert not l_shape.intersects(Polygon([(6, 6), (9, 6), (9, 9)]))


class TestWrappersAndPoints:

    def test_shape_box(self):
        boxed_rect = ShapeBox(Rect((0, 0), (10, 10)))
        boxed_circle = ShapeBox(Circle((12, 5), 3))
        assert intersects(boxed_rect, boxed_circle)
        assert boxed_circle.intersects(Rect((0, 0), (10, 10)))

    def test_points(self):
        rect = Rect((0, 0), (10, 10))
        assert rect.intersects((5, 5))
        assert rect.intersects((10, 5))
        assert not rect.intersects((11, 5))


def _random_triangle(rng):
    return Triangle(*[(rng.randint(0, 20), rng.randint(0, 20)) for _ in range(3)])


def _random_rect(rng):
    x0, y0 = rng.randint(0, 18), rng.randint(0, 18)
    return Rect((x0, y0), (rng.randint(x0 + 1, 20), rng.randint(y0 + 1, 20)))


def _shapely(shape):
    if isinstance(shape, Rect):
        return box(shape.left(), shape.top(), shape.right(), shape.bottom())
    return ShapelyPolygon([p.to_tuple() for p in shape.points()])


class TestAgainstShapely:

    def test_random_triangles_and_rects(self, rng):
        checked = 0
        while checked < 300:
            a = _random_triangle(rng) if rng.random() < 0.5 else _random_rect(rng)
            b = _random_triangle(rng) if rng.random() < 0.5 else _random_rect(rng)
            if any(isinstance(s, Triangle) and s.is_degenerate() for s in (a, b)):
                continue
            assert a.intersects(b) == _shapely(a).intersects(_shapely(b)), (a, b)
            checked += 1
