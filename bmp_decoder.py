"""
Minimal BMP reader: 24-bit, uncompressed (BI_RGB) only.

Pixels come back in row-major order (top row first, left to right) no matter
how the file stores them, each tagged with its row-major index so the buffer
can be reordered and later put back.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from errors import AllocationError, FormatError, IoError, UnsupportedFormatError

logger = logging.getLogger(__name__)

BMP_SIGNATURE = b"BM"

# signature, file size, reserved1, reserved2, pixel data offset
FILE_HEADER = struct.Struct("<2sIHHI")
# header size, width, height, planes, bpp, compression, image size,
# x/y pixels per metre, colours used, important colours
INFO_HEADER = struct.Struct("<IiiHHIIiiII")

BI_RGB = 0
SUPPORTED_BPP = 24
BYTES_PER_PIXEL = 3

PIXEL_DTYPE = np.dtype([
    ("red", np.uint8),
    ("green", np.uint8),
    ("blue", np.uint8),
    ("original_position", np.uint64),
])


@dataclass
class ImageBuffer:
    pixels: np.ndarray  # shape (width * height,), dtype PIXEL_DTYPE
    width: int
    height: int

    @property
    def total_pixels(self) -> int:
        return self.width * self.height


def row_stride(width: int, bits_per_pixel: int = SUPPORTED_BPP) -> int:
    """Bytes per stored row, padded up to a multiple of 4."""
    return ((bits_per_pixel * width + 31) // 32) * 4


def _read_exact(f, size: int, what: str) -> bytes:
    try:
        chunk = f.read(size)
    except OSError as err:
        raise IoError(f"failed to read {what}: {err}") from err
    if len(chunk) < size:
        raise IoError(f"unexpected end of file while reading {what} "
                      f"({len(chunk)} of {size} bytes)")
    return chunk


def _parse_headers(f):
    # checked before the length of the rest, so short non-BMP files are FormatErrors
    try:
        signature = f.read(len(BMP_SIGNATURE))
    except OSError as err:
        raise IoError(f"failed to read signature: {err}") from err
    if signature != BMP_SIGNATURE:
        raise FormatError(f"file was not in .bmp format (signature {signature!r})")
    (_signature, file_size, _reserved1, _reserved2,
     data_offset) = FILE_HEADER.unpack(
        signature + _read_exact(f, FILE_HEADER.size - len(signature), "file header"))

    (header_size, width, height, planes, bpp, compression, image_size,
     _x_ppm, _y_ppm, colors_used,
     _important) = INFO_HEADER.unpack(_read_exact(f, INFO_HEADER.size, "info header"))

    logger.debug("file header: size=%d data_offset=%d", file_size, data_offset)
    logger.debug("info header: size=%d %dx%d planes=%d bpp=%d compression=%d "
                 "image_size=%d colors_used=%d", header_size, width, height,
                 planes, bpp, compression, image_size, colors_used)

    if header_size < INFO_HEADER.size:
        raise UnsupportedFormatError(
            f"info header of {header_size} bytes is not supported "
            f"(need at least {INFO_HEADER.size})")
    if bpp != SUPPORTED_BPP:
        raise UnsupportedFormatError(
            f"only 24-bit .bmp files are supported (got {bpp}-bit)")
    if compression != BI_RGB:
        raise UnsupportedFormatError(
            f"only uncompressed .bmp files are supported (compression={compression})")
    if width < 0:
        raise FormatError(f"negative image width {width}")

    return data_offset, width, height


def _allocate(width: int, height: int):
    try:
        rows = np.empty((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
        pixels = np.empty(width * height, dtype=PIXEL_DTYPE)
    except (MemoryError, ValueError) as err:
        raise AllocationError(
            f"failed to allocate memory for {width}x{height} pixels") from err
    return rows, pixels


def read_bmp(path: str | Path) -> ImageBuffer:
    """
    Decode a 24-bit uncompressed BMP.

    Raises:
      IoError: open/seek/read failure or truncated pixel data
      FormatError: bad signature or negative width
      UnsupportedFormatError: anything but 24-bit BI_RGB with a 40+ byte header
      AllocationError: pixel buffer could not be allocated
    """
    path = Path(path)
    try:
        f = open(path, "rb")
    except OSError as err:
        raise IoError(f"failed to open file {path}: {err}") from err

    with f:
        data_offset, width, height = _parse_headers(f)

        # positive height: rows stored bottom to top
        top_down = height < 0
        height = abs(height)

        try:
            f.seek(data_offset)
        except (OSError, ValueError) as err:
            raise IoError(f"failed to seek to pixel data at {data_offset}: {err}") from err

        rows, pixels = _allocate(width, height)

        stride = row_stride(width)
        row_bytes = width * BYTES_PER_PIXEL
        last = height - 1
        for i in range(height if row_bytes else 0):
            y = i if top_down else last - i
            # the final stored row may come without its padding
            chunk = _read_exact(f, row_bytes if i == last else stride, f"pixel row {y}")
            rows[y] = np.frombuffer(chunk, dtype=np.uint8, count=row_bytes).reshape(
                width, BYTES_PER_PIXEL)

    # stored as B, G, R
    flat = rows.reshape(-1, BYTES_PER_PIXEL)
    pixels["blue"] = flat[:, 0]
    pixels["green"] = flat[:, 1]
    pixels["red"] = flat[:, 2]
    pixels["original_position"] = np.arange(width * height, dtype=np.uint64)

    logger.debug("decoded %s: %dx%d (%s)", path, width, height,
                 "top-down" if top_down else "bottom-up")
    return ImageBuffer(pixels=pixels, width=width, height=height)
