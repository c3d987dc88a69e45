import numpy as np

# Rec. 601 luma
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def rgb_to_weighted_luminance(r, g, b, r_w=LUMA_WEIGHTS[0], g_w=LUMA_WEIGHTS[1], b_w=LUMA_WEIGHTS[2]):
    """Compute weighted luminance from RGB (0..255 each)."""
    return float(r) * r_w + float(g) * g_w + float(b) * b_w


def pixel_brightness(pixel):
    """Luminance of a single PIXEL_DTYPE record."""
    return rgb_to_weighted_luminance(pixel["red"], pixel["green"], pixel["blue"])


def buffer_brightness(pixels):
    """
    Luminance of every pixel in a PIXEL_DTYPE array, as float64.
    Same arithmetic as rgb_to_weighted_luminance, so values agree exactly.
    """
    r_w, g_w, b_w = LUMA_WEIGHTS
    return (pixels["red"].astype(np.float64) * r_w
            + pixels["green"].astype(np.float64) * g_w
            + pixels["blue"].astype(np.float64) * b_w)
