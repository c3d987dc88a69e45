import numpy as np

from bmp_decoder import PIXEL_DTYPE, ImageBuffer


def buffer_from_rows(rows):
    """ImageBuffer straight from a list of (r, g, b) rows, top row first."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    pixels = np.zeros(width * height, dtype=PIXEL_DTYPE)
    for i, (r, g, b) in enumerate(px for row in rows for px in row):
        pixels[i] = (r, g, b, i)
    return ImageBuffer(pixels=pixels, width=width, height=height)
