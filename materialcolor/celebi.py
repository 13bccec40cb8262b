"""Celebi's quantizer: Wu's method seeding weighted k-means."""

from __future__ import annotations

from typing import Sequence

from materialcolor.utils import is_opaque
from materialcolor.wsmeans import QuantizerResult, quantize_wsmeans
from materialcolor.wu import quantize_wu

_MAX_COLORS = 256


def quantize_celebi(pixels: Sequence[int], max_colors: int) -> QuantizerResult:
    """Quantize the opaque pixels of an image into at most ``max_colors`` colors.

    Non-opaque pixels are ignored. ``max_colors`` above 256 is treated as
    256; zero or no pixels gives an empty result.
    """
    if max_colors <= 0 or not pixels:
        return QuantizerResult()
    max_colors = min(max_colors, _MAX_COLORS)

    opaque_pixels = [pixel for pixel in pixels if is_opaque(pixel)]
    wu_result = quantize_wu(opaque_pixels, max_colors)
    return quantize_wsmeans(opaque_pixels, wu_result, max_colors)