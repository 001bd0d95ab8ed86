import logging
import numpy as np


logger = logging.getLogger(__name__)


BASIC = """
# . # #
# . . #
# . # #
# # . .
# # . #
# # . #
. . # #
# . # .
"""


def from_pattern(pattern: str) -> np.array:
    """
    Parse a picture drawn with '#' (on) and '.' (off), one line per pixel row
    """
    rows = [line.split() for line in pattern.strip().splitlines()]
    return np.array([[c == '#' for c in row] for row in rows], dtype=np.uint8)


def basic() -> np.array:
    return from_pattern(BASIC)


def large(width: int = 128, height: int = 64) -> np.array:
    return np.ones((height, width), dtype=np.uint8)


def mandelbrot(width: int = 128, height: int = 96,
               max_iterations: int = 50, threshold: int = 45) -> np.array:
    """
    Escape-time rendering of the Mandelbrot set. A pixel is on when the last
    iteration it reached is above threshold (points that never escape reach
    max_iterations - 1).
    """
    re_range = (-2.0, 2.0)
    min_im = -1.2
    max_im = min_im + (re_range[1] - re_range[0]) * height / width
    re_factor = (re_range[1] - re_range[0]) / max(width - 1, 1)
    im_factor = (max_im - min_im) / max(height - 1, 1)

    c_re = re_range[0] + np.arange(width) * re_factor
    c_im = max_im - np.arange(height) * im_factor
    c_re, c_im = np.meshgrid(c_re, c_im)

    z_re = c_re.copy()
    z_im = c_im.copy()
    out = np.zeros((height, width), dtype=int)
    active = np.ones((height, width), dtype=bool)

    for iteration in range(max_iterations):
        out[active] = iteration
        z_re2 = z_re * z_re
        z_im2 = z_im * z_im
        active &= z_re2 + z_im2 <= 4.
        z_im = np.where(active, 2. * z_re * z_im + c_im, z_im)
        z_re = np.where(active, z_re2 - z_im2 + c_re, z_re)

    frame = (out > threshold).astype(np.uint8)
    logger.info(f'Rendered mandelbrot {width}x{height}, {int(frame.sum())} pixels set')
    return frame


DEMOS = {
    'basic': basic,
    'large': large,
    'mandelbrot': mandelbrot,
}
