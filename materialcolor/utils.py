"""Color math helpers: ARGB packing, linear RGB, L* and angle utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

PI = 3.141592653589793
"""Value of pi as used throughout the color math."""

WHITE_POINT_D65 = (95.047, 100.0, 108.883)
"""The standard white point; white on a sunny day."""

_E = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


@dataclass(frozen=True)
class Vec3:
    """A vector with three floating-point components."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def red_from_int(argb: int) -> int:
    """Return the red component of an ARGB color."""
    return (argb & 0x00FF0000) >> 16


def green_from_int(argb: int) -> int:
    """Return the green component of an ARGB color."""
    return (argb & 0x0000FF00) >> 8


def blue_from_int(argb: int) -> int:
    """Return the blue component of an ARGB color."""
    return argb & 0x000000FF


def alpha_from_int(argb: int) -> int:
    """Return the alpha component of an ARGB color."""
    return (argb & 0xFF000000) >> 24


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack RGB components into an opaque ARGB color."""
    return 0xFF000000 | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def argb_from_linrgb(linrgb: Vec3) -> int:
    """Convert linear RGB components (0..100) to an opaque ARGB color."""
    return argb_from_rgb(
        delinearized(linrgb.a), delinearized(linrgb.b), delinearized(linrgb.c)
    )


def is_opaque(argb: int) -> bool:
    """Return whether an ARGB color is fully opaque."""
    return alpha_from_int(argb) == 255


def sanitize_degrees_int(degrees: int) -> int:
    """Bring an integer angle into the range [0, 360)."""
    degrees = int(degrees)
    if degrees < 0:
        return int(math.fmod(degrees, 360)) + 360
    if degrees >= 360:
        return degrees % 360
    return degrees


def sanitize_degrees_double(degrees: float) -> float:
    """Bring a floating-point angle into the range [0.0, 360.0)."""
    if degrees < 0.0:
        return math.fmod(degrees, 360.0) + 360.0
    if degrees >= 360.0:
        return math.fmod(degrees, 360.0)
    return degrees


def diff_degrees(a: float, b: float) -> float:
    """Distance between two angles on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(source: float, target: float) -> float:
    """Sign of the shortest rotation from ``source`` to ``target``.

    Returns 1.0 when increasing is shortest (or the angles are 180 apart),
    otherwise -1.0.
    """
    increasing_difference = sanitize_degrees_double(target - source)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def linearized(rgb_component: int) -> float:
    """Convert an sRGB channel (0..255) to linear RGB (0..100)."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """Convert a linear RGB channel (0..100) to sRGB (0..255), clamped."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return min(max(_round_half_away(value * 255.0), 0), 255)


def y_from_lstar(lstar: float) -> float:
    """Convert L* (perceptual lightness) to Y (relative luminance)."""
    if lstar > 8.0:
        cube_root = (lstar + 16.0) / 116.0
        return cube_root * cube_root * cube_root * 100.0
    return lstar / _KAPPA * 100.0


def lstar_from_y(y: float) -> float:
    """Convert Y (relative luminance) to L* (perceptual lightness)."""
    y_normalized = y / 100.0
    if y_normalized <= _E:
        return _KAPPA * y_normalized
    return 116.0 * math.pow(y_normalized, 1.0 / 3.0) - 16.0


def lstar_from_argb(argb: int) -> float:
    """Return the L* coordinate of an ARGB color."""
    y = (
        0.2126 * linearized(red_from_int(argb))
        + 0.7152 * linearized(green_from_int(argb))
        + 0.0722 * linearized(blue_from_int(argb))
    )
    return lstar_from_y(y)


def hex_from_argb(argb: int) -> str:
    """Return the lowercase eight-digit hexadecimal form of a color."""
    return f"{argb & 0xFFFFFFFF:08x}"


def int_from_lstar(lstar: float) -> int:
    """Return the opaque gray ARGB color whose lightness matches L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def signum(num: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``num``."""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation: ``start`` at 0, ``stop`` at 1."""
    return (1.0 - amount) * start + amount * stop


def matrix_multiply(vector: Vec3, matrix: Sequence[Sequence[float]]) -> Vec3:
    """Multiply a 3x3 matrix by a three-component vector."""
    components = (vector.a, vector.b, vector.c)
    a, b, c = (sum(m * v for m, v in zip(row, components)) for row in matrix)
    return Vec3(a, b, c)