import numpy as np

# Least dense -> most dense. The leading blanks act as a minimum brightness
# a pixel must reach before anything is drawn for it.
GLYPH_RAMP = (
    " " * 30
    + "`.-:_,^=;><+!rc"
    + "*/z?sLTv)J7(|Fi"
    + "{C}fI31tlu[neoZ"
    + "5Yxjya]2ESwqkP6"
    + "h9d4VpOGbUAKXHm"
    + "8RD#$Bg0MNWQ%&@"
)

RAMP_LENGTH = len(GLYPH_RAMP)

GLYPH_TABLE = np.frombuffer(GLYPH_RAMP.encode("ascii"), dtype=np.uint8)


def glyph_table(invert=False):
    """Ramp as a uint8 lookup table, optionally densest-first."""
    if invert:
        return GLYPH_TABLE[::-1]
    return GLYPH_TABLE
