import struct

import pytest


def bmp_bytes(rows, bpp=24, compression=0, signature=b"BM", header_size=40,
              pad=True, gap=0, top_down=False):
    """
    Hand-pack a BMP. rows is a list of rows, top row first, each a list of
    (r, g, b) tuples. gap inserts junk bytes between headers and pixel data.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0
    stride = ((24 * width + 31) // 32) * 4 if pad else width * 3

    stored = rows if top_down else list(reversed(rows))
    data = bytearray()
    for row in stored:
        line = bytearray()
        for r, g, b in row:
            line += bytes((b, g, r))
        line += b"\x00" * (stride - len(line))
        data += line

    offset = 14 + header_size + gap
    info = struct.pack("<IiiHHIIiiII", header_size, width,
                       -height if top_down else height, 1, bpp, compression,
                       len(data), 2835, 2835, 0, 0)
    info += b"\x00" * (header_size - len(info))
    file_header = struct.pack("<2sIHHI", signature, offset + len(data), 0, 0, offset)
    return file_header + info + b"\xaa" * gap + bytes(data)


@pytest.fixture
def make_bmp(tmp_path):
    counter = iter(range(1000))

    def _make(rows, **kwargs):
        path = tmp_path / f"image_{next(counter)}.bmp"
        path.write_bytes(bmp_bytes(rows, **kwargs))
        return path

    return _make
