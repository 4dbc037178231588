from fractions import Fraction

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, strategies as st  # type: ignore

from engine.core import Camera
from planar import Complex, Matrix, Point, Vector

coord = st.floats(-100, 100, allow_nan=False, allow_infinity=False)
factor = st.floats(0.1, 10, allow_nan=False, allow_infinity=False)
angle = st.floats(-3.14, 3.14, allow_nan=False, allow_infinity=False)
rational = st.fractions(min_value=-50, max_value=50, max_denominator=64)


@st.composite
def matrices(draw):
    kind = draw(st.sampled_from(["translate", "scale", "rotate"]))
    if kind == "translate":
        return Matrix.translate(Vector(draw(coord), draw(coord)))
    if kind == "scale":
        return Matrix.scale(draw(factor), draw(factor))
    return Matrix.rotate(Complex.from_polar(1.0, draw(angle)))


@given(a=matrices(), b=matrices(), c=matrices())
def test_matrix_composition_associative(a, b, c):
    assert ((a * b) * c).isclose(a * (b * c), rtol=1e-9, atol=1e-6)


@given(x1=rational, y1=rational, x2=rational, y2=rational)
def test_translate_composition_exact(x1, y1, x2, y2):
    v1, v2 = Vector(x1, y1), Vector(x2, y2)
    assert Matrix.translate(v1) * Matrix.translate(v2) == Matrix.translate(v1 + v2)


@given(a=rational, b=rational)
def test_scale_composition_exact(a, b):
    assert Matrix.scale(a, a) * Matrix.scale(b, b) == Matrix.scale(a * b, a * b)


@given(x=coord, y=coord, t=angle)
def test_rotor_then_inverse_returns_vector(x, y, t):
    v = Vector(x, y)
    r = Complex.from_polar(1.0, t)
    back = v * r * ~r
    assert back.x == pytest.approx(x, abs=1e-9)
    assert back.y == pytest.approx(y, abs=1e-9)


@given(px=rational, py=rational, qx=rational, qy=rational)
def test_point_difference_round_trip(px, py, qx, qy):
    p, q = Point(px, py), Point(qx, qy)
    assert q + (p - q) == p


@given(s=factor, tx=coord, ty=coord, cx=coord, cy=coord)
def test_unit_centered_zoom_is_noop(s, tx, ty, cx, cy):
    cam = Camera()
    cam.set_scale(s)
    cam.set_translation(Point(tx, ty))
    before = cam.transformation()
    c = Point(cx, cy)
    cam.concat_scale_centered(1.0, c, c)
    assert cam.transformation().isclose(before, rtol=1e-9, atol=1e-9)


@given(k=st.fractions(min_value=Fraction(1, 8), max_value=8, max_denominator=16),
       cx=rational, cy=rational)
def test_centered_zoom_fixes_center_exactly(k, cx, cy):
    cam = Camera("rational")
    cam.set_scale(Fraction(3, 2))
    cam.set_translation(Point(Fraction(5), Fraction(-2)))
    c = Point(cx, cy)
    anchor = cam.from_camera_space(c)
    cam.concat_scale_centered(k, c, c)
    assert cam.to_camera_space(anchor) == c
