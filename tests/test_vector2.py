import math

import pytest

from spacefighter.vector2 import Vector2


A = Vector2(3.5, -1.25)
B = Vector2(-2.0, 4.75)


def test_constants():
    assert Vector2.ZERO == Vector2(0, 0)
    assert Vector2.ONE == Vector2(1, 1)
    assert Vector2.UNIT_X == Vector2(1, 0)
    assert Vector2.UNIT_Y == Vector2(0, 1)


def test_default_is_zero():
    assert Vector2() == Vector2.ZERO
    assert Vector2().is_zero()
    assert not Vector2.UNIT_X.is_zero()


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert A - A == Vector2.ZERO


def test_scalar_multiplication_and_division():
    assert A * 2 == A + A
    assert 2 * A == A * 2
    assert (A * 4) / 4 == A


def test_negation():
    assert -A + A == Vector2.ZERO
    assert -(-A) == A


def test_length_and_length_squared_agree():
    assert math.isclose(A.length() ** 2, A.length_squared())
    assert Vector2.UNIT_Y.length() == 1


def test_normalized_has_unit_length():
    assert math.isclose(A.normalized().length(), 1.0)
    assert math.isclose(A.normalized().cross(A), 0.0, abs_tol=1e-12)
    assert A.normalized().dot(A) > 0


def test_normalizing_zero_is_ignored():
    assert Vector2.ZERO.normalized() == Vector2.ZERO


def test_dot_and_cross():
    assert Vector2.UNIT_X.dot(Vector2.UNIT_Y) == 0
    assert Vector2.UNIT_X.cross(Vector2.UNIT_Y) == 1
    assert A.cross(B) == -B.cross(A)
    assert A.dot(B) == B.dot(A)


def test_distance():
    assert Vector2.distance(A, B) == Vector2.distance(B, A)
    assert math.isclose(Vector2.distance(A, B), (A - B).length())
    assert math.isclose(Vector2.distance_squared(A, B), (A - B).length_squared())
    assert Vector2.distance(A, A) == 0


@pytest.mark.parametrize("value", [-0.5, -1, 0])
def test_lerp_at_or_below_zero_is_start(value):
    assert Vector2.lerp(A, B, value) == A


@pytest.mark.parametrize("value", [1, 1.5, 10])
def test_lerp_at_or_above_one_is_end(value):
    assert Vector2.lerp(A, B, value) == B


def test_lerp_midpoint():
    mid = Vector2.lerp(A, B, 0.5)
    assert math.isclose(Vector2.distance(A, mid), Vector2.distance(mid, B))


def test_random_components_in_range():
    for _ in range(50):
        v = Vector2.random()
        assert -1 <= v.x < 1
        assert -1 <= v.y < 1


def test_random_normalized():
    for _ in range(20):
        v = Vector2.random(True)
        assert v.is_zero() or math.isclose(v.length(), 1.0)


def test_left_and_right_are_orthogonal_opposites():
    assert A.left().dot(A) == 0
    assert A.right().dot(A) == 0
    assert A.left() == -A.right()
    assert Vector2.UNIT_X.left() == Vector2.UNIT_Y


def test_to_point_truncates():
    assert Vector2(3.7, -2.9).to_point() == (3, -2)


def test_str_format():
    assert str(Vector2(1, 2)) == "{ 1, 2 }"
    assert str(Vector2(1.5, -0.25)) == "{ 1.5, -0.25 }"


def test_unpacking():
    x, y = A
    assert Vector2(x, y) == A


def test_immutable():
    vector = Vector2(3.5, -1.25)
    with pytest.raises(AttributeError):
        vector.x = 0  # type: ignore[misc]
    assert vector == Vector2(3.5, -1.25)