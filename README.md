# materialcolor

Color utilities for working with ARGB integers. It converts between sRGB,
linear RGB, XYZ luminance and CIE L\*a\*b\*, and it quantizes a list of pixels
down to a small set of representative colors. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Colors as integers

Colors are plain Python integers in `0xAARRGGBB` form.

```python
from materialcolor.utils import argb_from_rgb, hex_from_argb, lstar_from_argb

blue = argb_from_rgb(0x42, 0x85, 0xF4)
hex_from_argb(blue)        # 'ff4285f4'
lstar_from_argb(blue)      # perceptual lightness, 0..100
```

`materialcolor.utils` also provides:

- `red_from_int`, `green_from_int`, `blue_from_int` and `alpha_from_int` to read single channels; `is_opaque` to test for alpha 255.
- `linearized` (sRGB channel 0..255 to linear 0..100) and `delinearized` (the reverse, rounded and clamped to 0..255); `argb_from_linrgb` packs a `Vec3` of linear components.
- `y_from_lstar`, `lstar_from_y` and `int_from_lstar` (an opaque gray of the given lightness).
- `sanitize_degrees_int`, `sanitize_degrees_double` (angles into [0, 360)), `diff_degrees` and `rotation_direction`.
- `signum`, `lerp` and `matrix_multiply` (a 3x3 matrix times a `Vec3`).
- The constants `PI` and `WHITE_POINT_D65`.

## L\*a\*b\*

```python
from materialcolor.lab import Lab, lab_from_int, int_from_lab

lab = lab_from_int(0xFF4285F4)       # alpha is ignored
int_from_lab(lab)                    # back to an opaque ARGB color
lab.delta_e(Lab(50.0, 0.0, 0.0))     # squared Euclidean distance
str(lab)                             # 'Lab: L* ... a* ... b* ...'
```

`Lab` is a frozen dataclass with fields `l`, `a` and `b`.

## Quantization

Each quantizer takes a sequence of ARGB pixels and a maximum number of colors.

```python
from materialcolor.wu import quantize_wu
from materialcolor.wsmeans import quantize_wsmeans
from materialcolor.celebi import quantize_celebi

pixels = [0xFFFF0000] * 10 + [0xFF0000FF] * 5

quantize_wu(pixels, 4)                  # list of opaque ARGB colors

result = quantize_celebi(pixels, 128)   # QuantizerResult
result.color_to_count                   # {argb: population}
result.input_pixel_to_cluster_pixel     # {input argb: cluster argb}
```

- `quantize_wu(pixels, max_colors)` splits the RGB cube into boxes of low
  variance and returns the average color of each non-empty box. Alpha is
  ignored. It returns an empty list when there are no pixels or when
  `max_colors` is not between 1 and 256.
- `quantize_wsmeans(input_pixels, starting_clusters, max_colors)` runs
  weighted k-means in L\*a\*b\* over the distinct input pixels. Cluster
  centers start from `starting_clusters`; when that is empty they are chosen
  pseudo-randomly from a fixed seed, so results are repeatable. `max_colors`
  above 256 is treated as 256; zero, or no pixels, gives an empty
  `QuantizerResult`.
- `quantize_celebi(pixels, max_colors)` drops pixels that are not fully
  opaque, seeds k-means with the output of `quantize_wu`, and returns a
  `QuantizerResult`. `max_colors` above 256 is treated as 256.

`QuantizerResult` is a dataclass with two dicts, both ordered by key:
`color_to_count` holds each resulting color with a non-zero population, and
`input_pixel_to_cluster_pixel` maps every distinct input pixel to the color of
its cluster.

## What this package does not do

It is a library only: there is no command-line tool. It does not read image
files — callers supply pixels as integers. It does not rank quantized colors
for use as a theme, and it does not build tonal palettes or color schemes.