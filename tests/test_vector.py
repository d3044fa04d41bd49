import math

import pytest

from deepspace.vector import Vec3d


def test_default_is_zero():
    assert Vec3d() == Vec3d(0.0, 0.0, 0.0)


def test_add_and_sub_round_trip():
    a = Vec3d(1.5, -2.0, 3.25)
    b = Vec3d(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_add_componentwise():
    assert Vec3d(1, 2, 3) + Vec3d(10, 20, 30) == Vec3d(11, 22, 33)


def test_scalar_multiplication_both_sides():
    v = Vec3d(1.0, -2.0, 0.5)
    assert v * 2.0 == Vec3d(2.0, -4.0, 1.0)
    assert 2.0 * v == v * 2.0


def test_division_inverts_multiplication():
    v = Vec3d(3.0, 6.0, -9.0)
    assert (v * 3.0) / 3.0 == v


def test_negation():
    v = Vec3d(1.0, -2.0, 3.0)
    assert -v == Vec3d(-1.0, 2.0, -3.0)
    assert v + (-v) == Vec3d()


def test_length_of_axis_vector():
    assert Vec3d(0.0, 7.0, 0.0).length() == 7.0


def test_length_squared_matches_length():
    v = Vec3d(1.2, -3.4, 5.6)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_normalized_has_unit_length():
    v = Vec3d(3.0, -8.0, 12.0)
    assert v.normalized().length() == pytest.approx(1.0)


def test_normalized_zero_vector_stays_zero():
    assert Vec3d().normalized() == Vec3d()


def test_dot_of_orthogonal_axes_is_zero():
    assert Vec3d(1, 0, 0).dot(Vec3d(0, 1, 0)) == 0


def test_dot_with_self_is_length_squared():
    v = Vec3d(2.0, -1.0, 4.0)
    assert v.dot(v) == pytest.approx(v.length_squared())


def test_cross_of_x_and_y_is_z():
    assert Vec3d(1, 0, 0).cross(Vec3d(0, 1, 0)) == Vec3d(0, 0, 1)


def test_cross_is_orthogonal_to_inputs():
    a = Vec3d(1.0, 2.0, 3.0)
    b = Vec3d(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_cross_is_anticommutative():
    a = Vec3d(1.0, 2.0, 3.0)
    b = Vec3d(-4.0, 0.5, 2.0)
    assert a.cross(b) == -(b.cross(a))


def test_iteration_yields_components():
    assert list(Vec3d(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


def test_is_immutable():
    v = Vec3d(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert v.x == 1.0
    assert v == Vec3d(1.0, 2.0, 3.0)


def test_normalized_direction_preserved():
    v = Vec3d(0.0, 0.0, -5.0)
    assert math.isclose(v.normalized().z, -1.0)