"""Weighted spherical k-means quantizer working in L*a*b* space."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

from materialcolor.lab import Lab, int_from_lab, lab_from_int

_MAX_ITERATIONS = 100
_MIN_DELTA_E = 3.0
_MAX_COLORS = 256
_SEED = 42688


@dataclass
class QuantizerResult:
    """Outcome of quantization.

    ``color_to_count`` maps each resulting color to the number of input
    pixels it represents; ``input_pixel_to_cluster_pixel`` maps every
    distinct input pixel to the color of the cluster it was assigned to.
    Both are ordered by key.
    """

    color_to_count: dict[int, int] = field(default_factory=dict)
    input_pixel_to_cluster_pixel: dict[int, int] = field(default_factory=dict)


class _CRandom:
    """Additive feedback generator matching the common C library rand()."""

    RAND_MAX = 2147483647
    _MASK = 0xFFFFFFFF

    def __init__(self, seed: int) -> None:
        seed &= self._MASK
        if seed == 0:
            seed = 1
        initial = [seed]
        for _ in range(1, 31):
            initial.append((16807 * initial[-1]) % 2147483647)
        initial.extend(initial[:3])
        self._state: deque[int] = deque(initial, maxlen=34)
        for _ in range(34, 344):
            self._step()

    def _step(self) -> int:
        value = (self._state[-31] + self._state[-3]) & self._MASK
        self._state.append(value)
        return value

    def rand(self) -> int:
        """Next value in 0..RAND_MAX."""
        return self._step() >> 1

    def unit(self) -> float:
        """Next value scaled to [0, 1]."""
        return self.rand() / float(self.RAND_MAX)


def _random_clusters(count: int) -> list[Lab]:
    rng = _CRandom(_SEED)
    clusters = []
    for _ in range(count):
        lightness = rng.unit() * 100.0 + 0.0
        a = rng.unit() * 200.0 - 100.0
        b = rng.unit() * 200.0 - 100.0
        clusters.append(Lab(lightness, a, b))
    return clusters


def quantize_wsmeans(
    input_pixels: Sequence[int],
    starting_clusters: Sequence[int],
    max_colors: int,
) -> QuantizerResult:
    """Cluster ``input_pixels`` into at most ``max_colors`` colors.

    ``starting_clusters`` seeds the cluster centers; when empty, centers are
    chosen pseudo-randomly with a fixed seed. ``max_colors`` above 256 is
    treated as 256; zero or no pixels gives an empty result.
    """
    if max_colors <= 0 or not input_pixels:
        return QuantizerResult()
    max_colors = min(max_colors, _MAX_COLORS)

    pixel_to_count: dict[int, int] = {}
    for pixel in input_pixels:
        pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1
    pixels = list(pixel_to_count)
    points = [lab_from_int(pixel) for pixel in pixels]
    weights = [pixel_to_count[pixel] for pixel in pixels]

    cluster_count = min(max_colors, len(points))
    if starting_clusters:
        cluster_count = min(cluster_count, len(starting_clusters))

    clusters = [lab_from_int(argb) for argb in starting_clusters]
    needed = cluster_count - len(clusters)
    if not starting_clusters and needed > 0:
        clusters.extend(_random_clusters(needed))
    clusters = clusters[:cluster_count]

    rng = _CRandom(_SEED)
    cluster_indices = [rng.rand() % cluster_count for _ in points]

    pixel_count_sums = [0] * cluster_count
    for iteration in range(_MAX_ITERATIONS):
        distances = [[ci.delta_e(cj) for cj in clusters] for ci in clusters]

        color_moved = False
        for i, (point, previous_index) in enumerate(zip(points, cluster_indices)):
            previous_distance = point.delta_e(clusters[previous_index])
            minimum_distance = previous_distance
            new_index = -1
            row = distances[previous_index]
            for j, cluster in enumerate(clusters):
                if row[j] >= 4 * previous_distance:
                    continue
                distance = point.delta_e(cluster)
                if distance < minimum_distance:
                    minimum_distance = distance
                    new_index = j
            if new_index != -1:
                change = abs(math.sqrt(minimum_distance) - math.sqrt(previous_distance))
                if change > _MIN_DELTA_E:
                    color_moved = True
                    cluster_indices[i] = new_index

        if not color_moved and iteration != 0:
            break

        pixel_count_sums = [0] * cluster_count
        l_sums = [0.0] * cluster_count
        a_sums = [0.0] * cluster_count
        b_sums = [0.0] * cluster_count
        for point, index, count in zip(points, cluster_indices, weights):
            pixel_count_sums[index] += count
            l_sums[index] += point.l * count
            a_sums[index] += point.a * count
            b_sums[index] += point.b * count

        clusters = [
            Lab(l_sum / count, a_sum / count, b_sum / count) if count else Lab()
            for count, l_sum, a_sum, b_sum in zip(pixel_count_sums, l_sums, a_sums, b_sums)
        ]

    all_cluster_argbs = [int_from_lab(cluster) for cluster in clusters]
    populations: dict[int, int] = {}
    for argb, count in zip(all_cluster_argbs, pixel_count_sums):
        if count:
            populations[argb] = populations.get(argb, 0) + count

    color_to_count = dict(sorted(populations.items()))
    pixel_to_cluster = {
        pixel: all_cluster_argbs[index]
        for pixel, index in sorted(zip(pixels, cluster_indices))
    }
    return QuantizerResult(color_to_count, pixel_to_cluster)