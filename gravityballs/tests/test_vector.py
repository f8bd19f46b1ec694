import dataclasses
import math

import numpy as np
import pytest

from gravityballs.vector import Vector2, deg_to_rad, rad_to_deg


def test_unit_conversions():
    assert rad_to_deg(math.pi) == pytest.approx(180.0)
    assert deg_to_rad(90.0) == pytest.approx(math.pi / 2)
    assert rad_to_deg(deg_to_rad(37.5)) == pytest.approx(37.5)


def test_normalized_zero_is_zero():
    assert Vector2.zero().normalized() == Vector2.zero()


def test_normalized_has_unit_length():
    for v in [Vector2(3, 4), Vector2(-1e-6, 2e-6), Vector2(1e12, -5e11)]:
        assert v.normalized().magnitude() == pytest.approx(1.0)


def test_rotation_round_trip():
    v = Vector2(3.0, -7.5)
    assert v.rotated(0) == v
    for theta in np.linspace(-math.pi, math.pi, 9):
        back = v.rotated(theta).rotated(-theta)
        assert back.x == pytest.approx(v.x)
        assert back.y == pytest.approx(v.y)


def test_rotation_is_counter_clockwise():
    turned = Vector2(1, 0).rotated(math.pi / 2)
    assert turned.x == pytest.approx(0.0, abs=1e-12)
    assert turned.y == pytest.approx(1.0)


def test_rotated_does_not_mutate():
    v = Vector2(1, 2)
    v.rotated(1.0)
    assert v == Vector2(1, 2)


def test_distance_is_symmetric():
    a = Vector2(1.5, -2.0)
    b = Vector2(-4.0, 9.25)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert Vector2(0, 0).distance_to(Vector2(3, 4)) == pytest.approx(5.0)


def test_arithmetic_is_pure():
    a = Vector2(1, 2)
    b = Vector2(3, -1)
    assert a.add(b) == Vector2(4, 1)
    assert a.scale(2) == Vector2(2, 4)
    assert a - b == Vector2(-2, 3)
    assert -a == Vector2(-1, -2)
    assert 3 * a == a * 3 == Vector2(3, 6)
    assert a.dot(b) == 1
    assert a == Vector2(1, 2)


def test_angle_range():
    assert Vector2(0, -1).angle() == pytest.approx(-math.pi / 2)
    assert Vector2(-1, 0).angle() == pytest.approx(math.pi)


def test_vectors_are_immutable():
    v = Vector2(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5


def test_from_iterable_requires_two_components():
    assert Vector2.from_iterable([1, 2]) == Vector2(1.0, 2.0)
    with pytest.raises(ValueError):
        Vector2.from_iterable([1, 2, 3])
    assert np.array_equal(Vector2(1, 2).to_array(), np.array([1.0, 2.0]))


def test_is_finite():
    assert Vector2(1, 2).is_finite()
    assert not Vector2(float("nan"), 0).is_finite()
    assert not Vector2(0, float("inf")).is_finite()
