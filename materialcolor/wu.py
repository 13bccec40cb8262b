"""Wu's color quantizer: splits the RGB cube into boxes of low variance."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from materialcolor.utils import (
    argb_from_rgb,
    blue_from_int,
    green_from_int,
    red_from_int,
)

_INDEX_BITS = 5
_INDEX_COUNT = (1 << _INDEX_BITS) + 1
_TOTAL_SIZE = _INDEX_COUNT * _INDEX_COUNT * _INDEX_COUNT
_MAX_COLORS = 256


class _Direction(enum.Enum):
    RED = enum.auto()
    GREEN = enum.auto()
    BLUE = enum.auto()


@dataclass
class _Box:
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0

    def update_volume(self) -> None:
        self.vol = (self.r1 - self.r0) * (self.g1 - self.g0) * (self.b1 - self.b0)


def _index(r: int, g: int, b: int) -> int:
    return (
        (r << (_INDEX_BITS * 2))
        + (r << (_INDEX_BITS + 1))
        + (g << _INDEX_BITS)
        + r
        + g
        + b
    )


def _vol(cube: _Box, moment: Sequence[float]) -> float:
    return (
        moment[_index(cube.r1, cube.g1, cube.b1)]
        - moment[_index(cube.r1, cube.g1, cube.b0)]
        - moment[_index(cube.r1, cube.g0, cube.b1)]
        + moment[_index(cube.r1, cube.g0, cube.b0)]
        - moment[_index(cube.r0, cube.g1, cube.b1)]
        + moment[_index(cube.r0, cube.g1, cube.b0)]
        + moment[_index(cube.r0, cube.g0, cube.b1)]
        - moment[_index(cube.r0, cube.g0, cube.b0)]
    )


def _top(cube: _Box, direction: _Direction, position: int, moment: Sequence[int]) -> int:
    if direction is _Direction.RED:
        return (
            moment[_index(position, cube.g1, cube.b1)]
            - moment[_index(position, cube.g1, cube.b0)]
            - moment[_index(position, cube.g0, cube.b1)]
            + moment[_index(position, cube.g0, cube.b0)]
        )
    if direction is _Direction.GREEN:
        return (
            moment[_index(cube.r1, position, cube.b1)]
            - moment[_index(cube.r1, position, cube.b0)]
            - moment[_index(cube.r0, position, cube.b1)]
            + moment[_index(cube.r0, position, cube.b0)]
        )
    return (
        moment[_index(cube.r1, cube.g1, position)]
        - moment[_index(cube.r1, cube.g0, position)]
        - moment[_index(cube.r0, cube.g1, position)]
        + moment[_index(cube.r0, cube.g0, position)]
    )


def _bottom(cube: _Box, direction: _Direction, moment: Sequence[int]) -> int:
    if direction is _Direction.RED:
        return (
            -moment[_index(cube.r0, cube.g1, cube.b1)]
            + moment[_index(cube.r0, cube.g1, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
        )
    if direction is _Direction.GREEN:
        return (
            -moment[_index(cube.r1, cube.g0, cube.b1)]
            + moment[_index(cube.r1, cube.g0, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
        )
    return (
        -moment[_index(cube.r1, cube.g1, cube.b0)]
        + moment[_index(cube.r1, cube.g0, cube.b0)]
        + moment[_index(cube.r0, cube.g1, cube.b0)]
        - moment[_index(cube.r0, cube.g0, cube.b0)]
    )


def _squared_sum(r: int, g: int, b: int) -> float:
    return float(r) * r + float(g) * g + float(b) * b


class _Moments:
    """Cumulative color moments over the quantization histogram."""

    def __init__(self, pixels: Sequence[int]) -> None:
        self.weights = [0] * _TOTAL_SIZE
        self.m_r = [0] * _TOTAL_SIZE
        self.m_g = [0] * _TOTAL_SIZE
        self.m_b = [0] * _TOTAL_SIZE
        self.moments = [0.0] * _TOTAL_SIZE
        self._build_histogram(pixels)
        self._accumulate()

    def _build_histogram(self, pixels: Sequence[int]) -> None:
        shift = 8 - _INDEX_BITS
        for pixel in pixels:
            red = red_from_int(pixel)
            green = green_from_int(pixel)
            blue = blue_from_int(pixel)
            index = _index((red >> shift) + 1, (green >> shift) + 1, (blue >> shift) + 1)
            self.weights[index] += 1
            self.m_r[index] += red
            self.m_g[index] += green
            self.m_b[index] += blue
            self.moments[index] += red * red + green * green + blue * blue

    def _accumulate(self) -> None:
        weights, m_r, m_g, m_b, moments = (
            self.weights,
            self.m_r,
            self.m_g,
            self.m_b,
            self.moments,
        )
        for r in range(1, _INDEX_COUNT):
            area = [0] * _INDEX_COUNT
            area_r = [0] * _INDEX_COUNT
            area_g = [0] * _INDEX_COUNT
            area_b = [0] * _INDEX_COUNT
            area_2 = [0.0] * _INDEX_COUNT
            for g in range(1, _INDEX_COUNT):
                line = line_r = line_g = line_b = 0
                line_2 = 0.0
                for b in range(1, _INDEX_COUNT):
                    index = _index(r, g, b)
                    line += weights[index]
                    line_r += m_r[index]
                    line_g += m_g[index]
                    line_b += m_b[index]
                    line_2 += moments[index]

                    area[b] += line
                    area_r[b] += line_r
                    area_g[b] += line_g
                    area_b[b] += line_b
                    area_2[b] += line_2

                    previous = _index(r - 1, g, b)
                    weights[index] = weights[previous] + area[b]
                    m_r[index] = m_r[previous] + area_r[b]
                    m_g[index] = m_g[previous] + area_g[b]
                    m_b[index] = m_b[previous] + area_b[b]
                    moments[index] = moments[previous] + area_2[b]

    def variance(self, cube: _Box) -> float:
        dr = float(_vol(cube, self.m_r))
        dg = float(_vol(cube, self.m_g))
        db = float(_vol(cube, self.m_b))
        xx = _vol(cube, self.moments)
        hypotenuse = dr * dr + dg * dg + db * db
        volume = float(_vol(cube, self.weights))
        if volume == 0.0:
            return float("nan") if hypotenuse == 0.0 else float("-inf")
        return xx - hypotenuse / volume

    def maximize(
        self,
        cube: _Box,
        direction: _Direction,
        first: int,
        last: int,
        whole: tuple[int, int, int, int],
    ) -> tuple[float, int]:
        """Best split of ``cube`` along ``direction``: (score, cut position or -1)."""
        whole_w, whole_r, whole_g, whole_b = whole
        bottom_r = _bottom(cube, direction, self.m_r)
        bottom_g = _bottom(cube, direction, self.m_g)
        bottom_b = _bottom(cube, direction, self.m_b)
        bottom_w = _bottom(cube, direction, self.weights)

        best = 0.0
        cut = -1
        for position in range(first, last):
            half_r = bottom_r + _top(cube, direction, position, self.m_r)
            half_g = bottom_g + _top(cube, direction, position, self.m_g)
            half_b = bottom_b + _top(cube, direction, position, self.m_b)
            half_w = bottom_w + _top(cube, direction, position, self.weights)
            if half_w == 0:
                continue
            score = _squared_sum(half_r, half_g, half_b) / float(half_w)

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue
            score += _squared_sum(half_r, half_g, half_b) / float(half_w)

            if score > best:
                best = score
                cut = position
        return best, cut

    def cut(self, box1: _Box, box2: _Box) -> bool:
        """Split ``box1`` in place, writing the other half into ``box2``."""
        whole = (
            _vol(box1, self.weights),
            _vol(box1, self.m_r),
            _vol(box1, self.m_g),
            _vol(box1, self.m_b),
        )
        max_r, cut_r = self.maximize(box1, _Direction.RED, box1.r0 + 1, box1.r1, whole)
        max_g, cut_g = self.maximize(box1, _Direction.GREEN, box1.g0 + 1, box1.g1, whole)
        max_b, cut_b = self.maximize(box1, _Direction.BLUE, box1.b0 + 1, box1.b1, whole)

        if max_r >= max_g and max_r >= max_b:
            if cut_r < 0:
                return False
            direction = _Direction.RED
        elif max_g >= max_r and max_g >= max_b:
            direction = _Direction.GREEN
        else:
            direction = _Direction.BLUE

        box2.r1 = box1.r1
        box2.g1 = box1.g1
        box2.b1 = box1.b1

        if direction is _Direction.RED:
            box2.r0 = box1.r1 = cut_r
            box2.g0 = box1.g0
            box2.b0 = box1.b0
        elif direction is _Direction.GREEN:
            box2.r0 = box1.r0
            box2.g0 = box1.g1 = cut_g
            box2.b0 = box1.b0
        else:
            box2.r0 = box1.r0
            box2.g0 = box1.g0
            box2.b0 = box1.b1 = cut_b

        box1.update_volume()
        box2.update_volume()
        return True


def quantize_wu(pixels: Sequence[int], max_colors: int) -> list[int]:
    """Reduce ``pixels`` to at most ``max_colors`` representative ARGB colors.

    Returns an empty list when there are no pixels or ``max_colors`` is not
    in 1..256. Alpha is ignored; every returned color is opaque.
    """
    if max_colors <= 0 or max_colors > _MAX_COLORS or not pixels:
        return []

    moments = _Moments(pixels)

    cubes = [_Box() for _ in range(_MAX_COLORS)]
    last = _INDEX_COUNT - 1
    cubes[0].r1 = cubes[0].g1 = cubes[0].b1 = last

    volume_variance = [0.0] * _MAX_COLORS
    next_box = 0
    i = 1
    while i < max_colors:
        if moments.cut(cubes[next_box], cubes[i]):
            volume_variance[next_box] = (
                moments.variance(cubes[next_box]) if cubes[next_box].vol > 1 else 0.0
            )
            volume_variance[i] = moments.variance(cubes[i]) if cubes[i].vol > 1 else 0.0
        else:
            volume_variance[next_box] = 0.0
            i -= 1

        next_box = 0
        best = volume_variance[0]
        for j in range(1, i + 1):
            if volume_variance[j] > best:
                best = volume_variance[j]
                next_box = j
        if best <= 0.0:
            max_colors = i + 1
            break
        i += 1

    colors = []
    for cube in cubes[:max_colors]:
        weight = _vol(cube, moments.weights)
        if weight > 0:
            red = _vol(cube, moments.m_r) // weight
            green = _vol(cube, moments.m_g) // weight
            blue = _vol(cube, moments.m_b) // weight
            colors.append(argb_from_rgb(red, green, blue))
    return colors