"""Writing pixel data as uncompressed 24-bit BMP images."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from pathlib import Path

from spheretrace.canvas import Colour

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_DATA_OFFSET = _FILE_HEADER.size + _INFO_HEADER.size


def encode_bmp(pixels: Sequence[Colour], width: int, height: int) -> bytes:
    """Encode row-major, top-to-bottom pixels as a 24-bit BMP; alpha is dropped."""
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if len(pixels) < width * height:
        raise ValueError("not enough pixels for the given dimensions")

    row_stride = width * 3
    padding = b"\x00" * ((4 - row_stride % 4) % 4)
    pixel_data_size = (row_stride + len(padding)) * height

    file_header = _FILE_HEADER.pack(0x4D42, _DATA_OFFSET + pixel_data_size, 0, 0, _DATA_OFFSET)
    info_header = _INFO_HEADER.pack(40, width, height, 1, 24, 0, pixel_data_size, 0, 0, 0, 0)

    rows = (pixels[y * width:(y + 1) * width] for y in reversed(range(height)))
    body = b"".join(
        b"".join(bytes((c.blue, c.green, c.red)) for c in row) + padding for row in rows
    )
    return file_header + info_header + body


def save_as_bmp(
    pixels: Sequence[Colour],
    width: int,
    height: int,
    filename: str,
    directory: str | Path = "renders",
) -> Path:
    """Write the image to ``directory/filename``, creating the directory; return the path."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / filename
    path.write_bytes(encode_bmp(pixels, width, height))
    return path