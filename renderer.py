import sys


def render(glyphs, width):
    """
    Break a row-major glyph string into lines of `width` characters.
    Every row, the last one included, ends with a newline.
    """
    if not glyphs:
        return ""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    lines = []
    for start in range(0, len(glyphs), width):
        lines.append(glyphs[start:start + width] + "\n")
    return "".join(lines)


def write(text, stream=None):
    stream = sys.stdout if stream is None else stream
    stream.write(text)
    stream.flush()
