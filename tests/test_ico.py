import io
import struct

import pytest
from PIL import Image

from pawtools.ico import (
    BMP_FILE_HEADER_SIZE,
    ICO_HEADER,
    ICON_ENTRY_SIZE,
    ICON_HEADER_SIZE,
    BitmapFileHeader,
    IconDirectoryEntry,
    IconHeader,
    IcoError,
    decode,
)


def _png_bytes(size, color):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


def _ico_bytes_from_bmp(size, color):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="BMP")
    bmp = buf.getvalue()[BMP_FILE_HEADER_SIZE:]
    width, height = size
    # double the height as ICO does, then append the AND mask
    bmp = bmp[:8] + struct.pack("<i", height * 2) + bmp[12:]
    mask_row = ((width + 31) // 32) * 4
    return bmp + b"\x00" * (mask_row * height)


def _make_ico(payloads):
    header = IconHeader(0, 1, len(payloads)).pack()
    offset = ICON_HEADER_SIZE + ICON_ENTRY_SIZE * len(payloads)
    entries = b""
    body = b""
    for width, payload in payloads:
        entries += IconDirectoryEntry(
            width=width,
            height=width,
            planes=1,
            bit_count=24,
            bytes_in_res=len(payload),
            image_offset=offset,
        ).pack()
        body += payload
        offset += len(payload)
    return header + entries + body


def test_icon_header_pack_starts_with_signature():
    packed = IconHeader(0, 1, 2).pack()
    assert packed[:4] == ICO_HEADER
    assert len(packed) == ICON_HEADER_SIZE


def test_struct_sizes_match_format():
    assert len(IconDirectoryEntry().pack()) == ICON_ENTRY_SIZE
    assert len(BitmapFileHeader().pack()) == BMP_FILE_HEADER_SIZE
    assert BitmapFileHeader(size=20).pack()[:2] == b"BM"


def test_decode_png_payload():
    data = _make_ico([(16, _png_bytes((16, 16), (255, 0, 0)))])
    img = decode(io.BytesIO(data))
    assert img.size == (16, 16)
    assert img.convert("RGB").getpixel((3, 3)) == (255, 0, 0)


def test_decode_picks_widest_entry():
    data = _make_ico(
        [
            (16, _png_bytes((16, 16), (0, 0, 255))),
            (32, _png_bytes((32, 32), (0, 255, 0))),
        ]
    )
    img = decode(io.BytesIO(data))
    assert img.size == (32, 32)
    assert img.convert("RGB").getpixel((0, 0)) == (0, 255, 0)


def test_decode_bmp_payload():
    data = _make_ico([(4, _ico_bytes_from_bmp((4, 4), (10, 20, 30)))])
    img = decode(io.BytesIO(data))
    assert img.size == (4, 4)
    assert img.convert("RGB").getpixel((2, 1)) == (10, 20, 30)


def test_reserved_must_be_zero():
    data = IconHeader(1, 1, 0).pack()
    with pytest.raises(IcoError, match="invalid signature"):
        decode(io.BytesIO(data))


def test_cursor_type_rejected():
    data = IconHeader(0, 2, 0).pack()
    with pytest.raises(IcoError, match="invalid signature"):
        decode(io.BytesIO(data))


def test_truncated_header():
    with pytest.raises(IcoError, match="could not read file header"):
        decode(io.BytesIO(b"\x00\x00"))


def test_truncated_entry():
    data = IconHeader(0, 1, 1).pack() + b"\x10\x10"
    with pytest.raises(IcoError, match="icon directory entry"):
        decode(io.BytesIO(data))


def test_truncated_image_data():
    data = _make_ico([(16, _png_bytes((16, 16), (1, 2, 3)))])
    with pytest.raises(IcoError, match="could not read image data"):
        decode(io.BytesIO(data[:-10]))


def test_short_non_png_data():
    data = _make_ico([(8, b"garbage")])
    with pytest.raises(IcoError, match="BitmapInfoHeader"):
        decode(io.BytesIO(data))


def test_no_entries_cannot_discard():
    data = IconHeader(0, 1, 0).pack()
    with pytest.raises(IcoError, match="could not discard"):
        decode(io.BytesIO(data))