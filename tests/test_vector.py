import math

import pytest

from rasterkit.vector import Vector


A = Vector(1.5, -2.0, 4.0)
B = Vector(0.5, 3.0, -1.0)


def test_default_is_origin():
    assert Vector() == Vector(0, 0, 0)


def test_add_then_subtract_round_trips():
    assert (A + B) - B == A


def test_addition_is_commutative():
    assert A + B == B + A


def test_negation_cancels():
    assert A + -A == Vector()
    assert -(-A) == A


def test_scalar_multiplication_matches_repeated_addition():
    assert A * 2 == A + A
    assert 2 * A == A + A


def test_componentwise_multiply_and_divide_round_trip():
    assert (A * B) / B == A


def test_scalar_division_inverts_multiplication():
    assert (A * 4) / 4 == A


def test_dot_with_self_is_norm_squared():
    assert math.isclose(A.dot(A), A.norm() ** 2)


def test_dot_is_symmetric():
    assert A.dot(B) == B.dot(A)


def test_norm_of_three_four_triangle():
    assert Vector(3, 4, 0).norm() == 5


def test_str_format():
    assert str(Vector(255, 255, 255)) == "(255, 255, 255)"
    assert str(Vector(0.5, -1, 0)) == "(0.5, -1, 0)"


def test_iteration_yields_components():
    assert tuple(A) == (A.x, A.y, A.z)


def test_division_by_zero_scalar_raises():
    with pytest.raises(ZeroDivisionError, match="division by zero"):
        A / 0
    assert A == Vector(1.5, -2.0, 4.0)


def test_adding_non_vector_raises():
    with pytest.raises(TypeError) as excinfo:
        A + 1
    assert excinfo.type is TypeError
    assert A == Vector(1.5, -2.0, 4.0)