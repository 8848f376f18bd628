import io
from datetime import datetime

import pytest
from PIL import Image


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def png_bytes():
    img = Image.new("RGB", (8, 8), (200, 30, 30))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes():
    img = Image.new("RGB", (8, 8), (30, 30, 200))
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=60)
    return buf.getvalue()


@pytest.fixture
def mpo_bytes():
    first = Image.new("RGB", (8, 8), (10, 120, 10))
    second = Image.new("RGB", (8, 8), (120, 10, 10))
    buf = io.BytesIO()
    first.save(buf, format="MPO", save_all=True, append_images=[second])
    return buf.getvalue()


@pytest.fixture
def oversized_png_header():
    """PNG signature + IHDR declaring 20000x20000 RGB, no pixel data."""
    import struct
    import zlib

    def chunk(cid, data):
        return struct.pack(">I", len(data)) + cid + data + struct.pack(">I", zlib.crc32(cid + data) & 0xFFFFFFFF)

    ihdr = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IDAT", b"")
