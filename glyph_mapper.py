"""
Rank-based glyph mapping.

Every pixel gets the glyph at its percentile rank of brightness within the
whole image: the k-th darkest of N pixels maps to ramp[k * R // N]. The full
ramp is used whatever the exposure of the picture, at the cost of absolute
brightness fidelity.
"""
import logging

import numpy as np

from glyph_ramp import GLYPH_TABLE, RAMP_LENGTH
from luminance import buffer_brightness

logger = logging.getLogger(__name__)


def sort_by_brightness(image):
    """Reorder image.pixels in place, darkest first. Returns the sorted brightness values."""
    lum = buffer_brightness(image.pixels)
    order = np.argsort(lum, kind="stable")
    image.pixels[:] = image.pixels[order]
    return lum[order]


def rank_sorted(sorted_lum):
    # equal brightness shares the rank of the first pixel in its group
    return np.searchsorted(sorted_lum, sorted_lum, side="left")


def glyph_indices(image, ramp_length=RAMP_LENGTH):
    """
    Ramp index for every pixel, in row-major order.

    Sorts image.pixels as a side effect; original_position is what puts the
    result back in place.
    """
    n = len(image.pixels)
    out = np.zeros(n, dtype=np.intp)
    if n == 0:
        return out

    sorted_lum = sort_by_brightness(image)
    ranks = rank_sorted(sorted_lum).astype(np.intp)
    # (n - 1) * R // n < R, so the brightest pixel stays in range
    out[image.pixels["original_position"]] = ranks * ramp_length // n

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("ranked %d pixels: %d distinct brightness levels, glyph index %d..%d",
                     n, len(np.unique(sorted_lum)), out.min(), out.max())
    return out


def map_glyphs(image, table=GLYPH_TABLE):
    """
    Glyph string for the image, row-major, no line breaks.

    table is a uint8 ramp as built in glyph_ramp (least dense first).
    """
    indices = glyph_indices(image, len(table))
    return table[indices].tobytes().decode("ascii")
