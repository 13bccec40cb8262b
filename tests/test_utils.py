import pytest
from hypothesis import given
from hypothesis import strategies as st

from materialcolor.utils import (
    Vec3,
    alpha_from_int,
    argb_from_linrgb,
    argb_from_rgb,
    blue_from_int,
    delinearized,
    diff_degrees,
    green_from_int,
    hex_from_argb,
    int_from_lstar,
    is_opaque,
    lerp,
    linearized,
    lstar_from_argb,
    lstar_from_y,
    matrix_multiply,
    red_from_int,
    rotation_direction,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
    y_from_lstar,
)

channel = st.integers(min_value=0, max_value=255)


@given(channel, channel, channel)
def test_rgb_pack_round_trip(r, g, b):
    argb = argb_from_rgb(r, g, b)
    assert (red_from_int(argb), green_from_int(argb), blue_from_int(argb)) == (r, g, b)
    assert alpha_from_int(argb) == 255
    assert is_opaque(argb)


def test_is_opaque_false_for_translucent():
    assert not is_opaque(0x7F123456)
    assert alpha_from_int(0x7F123456) == 0x7F


def test_hex_from_argb():
    assert hex_from_argb(0xFF012345) == "ff012345"


@given(channel, channel, channel)
def test_hex_round_trip(r, g, b):
    argb = argb_from_rgb(r, g, b)
    assert int(hex_from_argb(argb), 16) == argb
    assert len(hex_from_argb(argb)) == 8


def test_sanitize_degrees_int_values():
    assert sanitize_degrees_int(-1) == 359
    assert sanitize_degrees_int(361) == 1
    assert sanitize_degrees_int(45) == 45


@given(st.integers(min_value=-100000, max_value=100000))
def test_sanitize_degrees_int_congruent(d):
    result = sanitize_degrees_int(d)
    assert 0 <= result <= 360
    assert (result - d) % 360 == 0


@given(st.floats(min_value=-10000, max_value=10000, allow_nan=False))
def test_sanitize_degrees_double_range(d):
    result = sanitize_degrees_double(d)
    assert 0.0 <= result <= 360.0
    remainder = (result - d) % 360.0
    assert min(remainder, 360.0 - remainder) == pytest.approx(0.0, abs=1e-6)


@given(
    st.floats(min_value=0, max_value=360, allow_nan=False),
    st.floats(min_value=0, max_value=360, allow_nan=False),
)
def test_diff_degrees_symmetric_and_bounded(a, b):
    d = diff_degrees(a, b)
    assert d == diff_degrees(b, a)
    assert 0.0 <= d <= 180.0


def test_diff_degrees_wraps():
    assert diff_degrees(10.0, 350.0) == pytest.approx(20.0)


def test_rotation_direction():
    assert rotation_direction(0.0, 90.0) == 1.0
    assert rotation_direction(0.0, 270.0) == -1.0
    assert rotation_direction(0.0, 180.0) == 1.0


def test_linearize_round_trip_all_channels():
    assert [delinearized(linearized(v)) for v in range(256)] == list(range(256))


def test_linearized_bounds():
    assert linearized(0) == 0.0
    assert linearized(255) == pytest.approx(100.0)


def test_delinearized_clamps():
    assert delinearized(-10.0) == 0
    assert delinearized(200.0) == 255


@given(st.floats(min_value=0.0, max_value=100.0, allow_nan=False))
def test_lstar_y_round_trip(lstar):
    assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-9)


def test_lstar_from_argb_extremes():
    assert lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0, abs=1e-6)
    assert lstar_from_argb(0xFF000000) == 0.0


def test_int_from_lstar_extremes():
    assert int_from_lstar(100.0) == 0xFFFFFFFF
    assert int_from_lstar(0.0) == 0xFF000000


@given(st.floats(min_value=0.0, max_value=100.0, allow_nan=False))
def test_int_from_lstar_is_gray(lstar):
    argb = int_from_lstar(lstar)
    assert red_from_int(argb) == green_from_int(argb) == blue_from_int(argb)
    assert is_opaque(argb)


def test_signum():
    assert signum(-2.5) == -1
    assert signum(0.0) == 0
    assert signum(3.0) == 1


@given(
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False),
)
def test_lerp_endpoints(start, stop):
    assert lerp(start, stop, 0.0) == pytest.approx(start)
    assert lerp(start, stop, 1.0) == pytest.approx(stop)


def test_matrix_multiply_identity_and_rows():
    v = Vec3(1.0, 2.0, 3.0)
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(v, identity) == v
    swap = [[0, 0, 1], [0, 1, 0], [1, 0, 0]]
    assert matrix_multiply(v, swap) == Vec3(3.0, 2.0, 1.0)


def test_argb_from_linrgb():
    assert argb_from_linrgb(Vec3(100.0, 100.0, 100.0)) == 0xFFFFFFFF
    assert argb_from_linrgb(Vec3()) == 0xFF000000


@given(channel, channel, channel)
def test_argb_from_linrgb_round_trip(r, g, b):
    linrgb = Vec3(linearized(r), linearized(g), linearized(b))
    assert argb_from_linrgb(linrgb) == argb_from_rgb(r, g, b)