import pytest
from hypothesis import given
from hypothesis import strategies as st

from materialcolor.lab import Lab, int_from_lab, lab_from_int
from materialcolor.utils import (
    alpha_from_int,
    argb_from_rgb,
    blue_from_int,
    green_from_int,
    red_from_int,
)

channel = st.integers(min_value=0, max_value=255)
coord = st.floats(min_value=-100, max_value=100, allow_nan=False)


def test_default_lab_is_zero():
    lab = Lab()
    assert (lab.l, lab.a, lab.b) == (0.0, 0.0, 0.0)


def test_delta_e_is_squared_distance():
    assert Lab(0.0, 0.0, 0.0).delta_e(Lab(1.0, 2.0, 2.0)) == pytest.approx(9.0)


@given(coord, coord, coord, coord, coord, coord)
def test_delta_e_symmetric_and_nonnegative(l1, a1, b1, l2, a2, b2):
    p, q = Lab(l1, a1, b1), Lab(l2, a2, b2)
    assert p.delta_e(q) == pytest.approx(q.delta_e(p))
    assert p.delta_e(q) >= 0.0
    assert p.delta_e(p) == 0.0


def test_str_format():
    assert str(Lab(50.0, 0.0, 0.0)) == "Lab: L* 50.000000 a* 0.000000 b* 0.000000"


def test_white_and_black():
    white = lab_from_int(0xFFFFFFFF)
    assert white.l == pytest.approx(100.0, abs=1e-3)
    assert white.a == pytest.approx(0.0, abs=1e-3)
    assert white.b == pytest.approx(0.0, abs=1e-3)
    black = lab_from_int(0xFF000000)
    assert black.l == pytest.approx(0.0, abs=1e-9)


def test_alpha_is_ignored():
    assert lab_from_int(0x00ABCDEF) == lab_from_int(0xFFABCDEF)


@given(channel, channel, channel)
def test_round_trip_close(r, g, b):
    back = int_from_lab(lab_from_int(argb_from_rgb(r, g, b)))
    assert alpha_from_int(back) == 255
    assert abs(red_from_int(back) - r) <= 1
    assert abs(green_from_int(back) - g) <= 1
    assert abs(blue_from_int(back) - b) <= 1


def test_round_trip_extremes_exact():
    assert int_from_lab(lab_from_int(0xFFFFFFFF)) == 0xFFFFFFFF
    assert int_from_lab(lab_from_int(0xFF000000)) == 0xFF000000


@given(coord, coord, coord)
def test_int_from_lab_always_opaque(l, a, b):
    assert alpha_from_int(int_from_lab(Lab(abs(l), a, b))) == 255


@given(channel)
def test_grays_have_neutral_ab(v):
    lab = lab_from_int(argb_from_rgb(v, v, v))
    assert lab.a == pytest.approx(0.0, abs=1e-3)
    assert lab.b == pytest.approx(0.0, abs=1e-3)
    assert 0.0 <= lab.l <= 100.0 + 1e-6