"""
Tests for Coord and to_coord.

Covers arithmetic, measurements in the screen angle convention,
half-up rounding, interpolation and conversion from foreign point types.
"""
from types import SimpleNamespace

import numpy as np
import pytest

from graphics_shapes import Coord, to_coord


class TestArithmetic:

    def test_add_sub_with_tuples(self):
        assert Coord(1, 2) + (3, 4) == Coord(4, 6)
        assert Coord(5, 5) - Coord(2, 3) == Coord(3, 2)
        assert (10, 10) - Coord(1, 2) == Coord(9, 8)

    def test_scalar_and_componentwise_multiply(self):
        assert Coord(2, 3) * 2 == Coord(4, 6)
        assert 2 * Coord(2, 3) == Coord(4, 6)
        assert Coord(2, 3) * (3, -1) == Coord(6, -3)

    def test_divide_negate_abs(self):
        assert Coord(4, 6) / 2 == Coord(2.0, 3.0)
        assert -Coord(1, -2) == Coord(-1, 2)
        assert abs(Coord(-3, 4)) == Coord(3, 4)

    def test_hashable_and_int_float_equal(self):
        assert len({Coord(1, 2), Coord(1.0, 2.0)}) == 1

    def test_iterates_as_pair(self):
        x, y = Coord(7, 8)
        assert (x, y) == (7, 8)


class TestMeasurements:

    def test_distance_and_magnitude(self):
        assert Coord(0, 0).distance((3, 4)) == 5.0
        assert Coord(3, 4).magnitude() == 5.0

    def test_mid_point(self):
        assert Coord(0, 0).mid_point((10, 4)) == Coord(5, 2)

    @pytest.mark.parametrize("target,expected", [
        ((0, -10), 0.0),
        ((10, 0), 90.0),
        ((0, 10), 180.0),
        ((-10, 0), -90.0),
        ((10, -10), 45.0),
    ])
    def test_angle_to_is_clockwise_from_up(self, target, expected):
        assert Coord(0, 0).angle_to(target) == pytest.approx(expected)

    def test_from_angle_inverts_angle_to(self):
        p = Coord.from_angle((5, 5), 10, 90)
        assert p.x == pytest.approx(15.0)
        assert p.y == pytest.approx(5.0)
        assert Coord(5, 5).angle_to(Coord.from_angle((5, 5), 3, 135)) == pytest.approx(135.0)

    def test_cross_dot_perpendicular(self):
        assert Coord(1, 0).cross_product((0, 1)) == 1
        assert Coord(2, 3).dot_product((4, 5)) == 23
        assert Coord(2, 3).perpendicular() == Coord(3, -2)
        assert Coord(2, 3).dot_product(Coord(2, 3).perpendicular()) == 0


class TestInterpolation:

    def test_lerp(self):
        assert Coord(0, 0).lerp((10, 20), 0.25) == Coord(2.5, 5.0)

    def test_inv_lerp_inverts_lerp(self, rng):
        for _ in range(50):
            a = Coord(rng.uniform(-50, 50), rng.uniform(-50, 50))
            b = Coord(rng.uniform(-50, 50), rng.uniform(-50, 50))
            t = rng.random()
            assert a.inv_lerp(b, a.lerp(b, t)) == pytest.approx(t, abs=1e-9)

    def test_inv_lerp_zero_length(self):
        assert Coord(3, 3).inv_lerp((3, 3), (8, 1)) == 0.0


class TestConversion:

    def test_rounded_half_up(self):
        assert Coord(1.5, -1.5).rounded() == Coord(2, -1)
        assert Coord(2.49, 0.5).rounded() == Coord(2, 1)
        assert isinstance(Coord(1.7, 2.2).rounded().x, int)

    def test_to_coord_accepts_pairs_arrays_and_objects(self):
        assert to_coord((1, 2)) == Coord(1, 2)
        assert to_coord([1.5, 2]) == Coord(1.5, 2)
        assert to_coord(np.array([3.0, 4.0])) == Coord(3.0, 4.0)
        assert to_coord(SimpleNamespace(x=5, y=6)) == Coord(5, 6)
        c = Coord(1, 1)
        assert to_coord(c) is c

    @pytest.mark.parametrize("bad", ["ab", (1, 2, 3), None, (True, 1), ("1", 2)])
    def test_to_coord_rejects_non_points(self, bad):
        with pytest.raises(TypeError):
            to_coord(bad)

    def test_to_array(self):
        arr = Coord(1, 2).to_array()
        assert arr.dtype == float
        assert arr.tolist() == [1.0, 2.0]
