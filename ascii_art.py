import logging
import sys

from bmp_decoder import read_bmp
from errors import DecodeError
from glyph_mapper import map_glyphs
from glyph_ramp import glyph_table
from renderer import render, write

DEFAULT_IMAGE_PATH = "image.bmp"
USAGE = "Usage: bmp-to-ascii [image.bmp] [--invert] [--verbose]"

logger = logging.getLogger(__name__)


def image_to_ascii(img_path=DEFAULT_IMAGE_PATH, invert=False):
    """
    Parameters:
      img_path: Path to a 24-bit uncompressed BMP
      invert: Densest glyphs for the darkest pixels (light backgrounds)
    Returns:
      ASCII string, one line per image row, each ending in a newline
    Raises:
      DecodeError (or a subclass) if the file can't be decoded
    """
    image = read_bmp(img_path)
    glyphs = map_glyphs(image, glyph_table(invert))
    return render(glyphs, image.width)


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    img_path = DEFAULT_IMAGE_PATH
    invert = False
    verbose = False

    for a in args:
        if a == "--invert":
            invert = True
        elif a == "--verbose":
            verbose = True
        elif a.startswith("-"):
            print(f"Unknown argument: {a}", file=sys.stderr)
            print(USAGE, file=sys.stderr)
            return 2
        else:
            img_path = a

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        ascii_art = image_to_ascii(img_path, invert=invert)
    except DecodeError as err:
        logger.error("%s: %s", type(err).__name__, err)
        return 1

    write(ascii_art)
    return 0


if __name__ == "__main__":
    sys.exit(main())
