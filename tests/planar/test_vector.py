from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from numeric.scalar import ScalarKind, ScalarTypeError
from planar import Complex, Vector


def test_len_pythagorean_triple_is_exact() -> None:
    assert Vector(3, 4).len() == 5
    assert Vector(3.0, 4.0).len() == 5.0
    assert abs(Vector(-3, 4)) == 5


def test_len_variants() -> None:
    v = Vector(-3, 4)
    assert v.len_sqr() == 25
    assert v.manhattan_len() == 7


def test_componentwise_arithmetic() -> None:
    a, b = Vector(1, 2), Vector(10, 20)
    assert a + b == Vector(11, 22)
    assert b - a == Vector(9, 18)
    assert -a == Vector(-1, -2)
    assert a * 3 == Vector(3, 6)
    assert 3 * a == Vector(3, 6)
    assert b / 10 == Vector(1.0, 2.0)


def test_numpy_scalar_on_left_uses_reflected_mul() -> None:
    out = np.float64(2.0) * Vector(1.0, 2.0)
    assert isinstance(out, Vector)
    assert out == Vector(2.0, 4.0)


def test_dot_and_cross() -> None:
    a, b = Vector(1, 0), Vector(0, 1)
    assert a.dot(b) == 0
    assert a.cross(b) == 1
    assert b.cross(a) == -1
    assert Vector(2, 3).dot(Vector(4, 5)) == 23


def test_norm_and_rotor() -> None:
    n = Vector(3.0, 4.0).norm()
    assert n == Vector(0.6, 0.8)
    r = Vector(0.0, 2.0).rotor()
    assert isinstance(r, Complex)
    assert r.real == pytest.approx(0.0)
    assert r.imag == pytest.approx(1.0)


def test_norm_zero_vector_propagates_scalar_division() -> None:
    with pytest.raises(ZeroDivisionError):
        Vector(0.0, 0.0).norm()
    with pytest.raises(ZeroDivisionError):
        Vector(Fraction(0), Fraction(0)).norm()


def test_rotation_by_rotor_both_sides_agree() -> None:
    v = Vector(1.0, 2.0)
    r = Complex.from_polar(1.0, 0.7)
    assert v * r == r * v


def test_rotate_quarter_turn() -> None:
    out = Vector(1, 0) * Complex(0, 1)
    assert out == Vector(0, 1)


def test_from_polar_and_angle() -> None:
    v = Vector.from_polar(2.0, math.pi / 3)
    assert v.len() == pytest.approx(2.0)
    assert v.angle() == pytest.approx(math.pi / 3)


def test_exact_rational_arithmetic() -> None:
    v = Vector(Fraction(1, 3), Fraction(2, 3))
    w = v * 3 - Vector(1, 2)
    assert w == Vector(0, 0)
    assert v.kind is ScalarKind.RATIONAL


def test_kind_checked_at_construction() -> None:
    with pytest.raises(ScalarTypeError):
        Vector(1, "2")
    with pytest.raises(ScalarTypeError):
        Vector(True, 0)
    with pytest.raises(ScalarTypeError):
        Vector(Decimal("1"), 0.5)


def test_unsupported_operands() -> None:
    with pytest.raises(TypeError):
        Vector(1, 2) + 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        Vector(1, 2) * "x"  # type: ignore[operator]


def test_astype_and_unpacking() -> None:
    v = Vector(1, 2).astype("float")
    assert isinstance(v.x, float) and v.kind is ScalarKind.FLOAT
    x, y = Vector(5, 6)
    assert (x, y) == (5, 6) == Vector(5, 6).to_tuple()


def test_dict_round_trip_preserves_types() -> None:
    v = Vector(Fraction(1, 3), 7)
    back = Vector.from_dict(v.to_dict())
    assert back == v
    assert type(back.x) is Fraction and type(back.y) is int


def test_from_dict_rejects_missing_field() -> None:
    with pytest.raises(ValueError):
        Vector.from_dict({"x": {"kind": "integer", "value": 1}})
