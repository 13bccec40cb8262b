"""The CIE L*a*b* color space and conversions to and from ARGB."""

from __future__ import annotations

import math
from dataclasses import dataclass

from materialcolor.utils import (
    WHITE_POINT_D65,
    argb_from_rgb,
    blue_from_int,
    delinearized,
    green_from_int,
    linearized,
    red_from_int,
)

_E = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


@dataclass(frozen=True)
class Lab:
    """A color in L*a*b* coordinates."""

    l: float = 0.0  # noqa: E741
    a: float = 0.0
    b: float = 0.0

    def delta_e(self, other: Lab) -> float:
        """Squared Euclidean distance to another Lab color."""
        d_l = self.l - other.l
        d_a = self.a - other.a
        d_b = self.b - other.b
        return d_l * d_l + d_a * d_a + d_b * d_b

    def __str__(self) -> str:
        return f"Lab: L* {self.l:f} a* {self.a:f} b* {self.b:f}"


def _lab_f(t: float) -> float:
    if t > _E:
        return math.pow(t, 1.0 / 3.0)
    return (_KAPPA * t + 16.0) / 116.0


def int_from_lab(lab: Lab) -> int:
    """Convert a Lab color to an opaque ARGB color."""
    fy = (lab.l + 16.0) / 116.0
    fx = lab.a / 500.0 + fy
    fz = fy - lab.b / 200.0
    fx3 = fx * fx * fx
    x_normalized = fx3 if fx3 > _E else (116.0 * fx - 16.0) / _KAPPA
    y_normalized = fy * fy * fy if lab.l > 8.0 else lab.l / _KAPPA
    fz3 = fz * fz * fz
    z_normalized = fz3 if fz3 > _E else (116.0 * fz - 16.0) / _KAPPA
    x = x_normalized * WHITE_POINT_D65[0]
    y = y_normalized * WHITE_POINT_D65[1]
    z = z_normalized * WHITE_POINT_D65[2]

    r_linear = 3.2406 * x - 1.5372 * y - 0.4986 * z
    g_linear = -0.9689 * x + 1.8758 * y + 0.0415 * z
    b_linear = 0.0557 * x - 0.2040 * y + 1.0570 * z

    return argb_from_rgb(
        delinearized(r_linear), delinearized(g_linear), delinearized(b_linear)
    )


def lab_from_int(argb: int) -> Lab:
    """Convert an ARGB color to Lab; alpha is ignored."""
    red_l = linearized(red_from_int(argb))
    green_l = linearized(green_from_int(argb))
    blue_l = linearized(blue_from_int(argb))
    x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
    y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
    z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l

    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])

    return Lab(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))