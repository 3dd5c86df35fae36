"""Minimal ICO image decoder that picks the widest image in the file."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

from PIL import Image

BMP_FILE_HEADER_SIZE = 14
BMP_INFO_HEADER_SIZE = 40
ICO_HEADER = b"\x00\x00\x01\x00"
ICON_HEADER_SIZE = 6
ICON_ENTRY_SIZE = 16

_UINT32_MASK = 0xFFFFFFFF
_DISCARD_CHUNK = 64 * 1024


class IcoError(ValueError):
    """Raised when an ICO stream cannot be decoded."""


@dataclass
class IconHeader:
    """The icon directory header."""

    reserved: int = 0
    type: int = 1
    count: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HHH")

    def pack(self) -> bytes:
        return self.FORMAT.pack(self.reserved, self.type, self.count)

    @classmethod
    def _unpack(cls, raw: bytes) -> "IconHeader":
        return cls(*cls.FORMAT.unpack(raw))


@dataclass
class IconDirectoryEntry:
    """One entry of the icon directory."""

    width: int = 0
    height: int = 0
    color_count: int = 0
    reserved: int = 0
    planes: int = 0
    bit_count: int = 0
    bytes_in_res: int = 0
    image_offset: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<BBBBHHII")

    def pack(self) -> bytes:
        return self.FORMAT.pack(
            self.width,
            self.height,
            self.color_count,
            self.reserved,
            self.planes,
            self.bit_count,
            self.bytes_in_res,
            self.image_offset,
        )

    @classmethod
    def _unpack(cls, raw: bytes) -> "IconDirectoryEntry":
        return cls(*cls.FORMAT.unpack(raw))


@dataclass
class BitmapFileHeader:
    """The BMP file header that ICO files leave out."""

    type: bytes = b"BM"
    size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    offset_bits: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<2sIHHI")

    def pack(self) -> bytes:
        return self.FORMAT.pack(
            self.type, self.size, self.reserved1, self.reserved2, self.offset_bits
        )


@dataclass
class BitmapInfoHeader:
    """The leading fields of a BMP info header as stored in ICO data."""

    size: int = 0
    width: int = 0
    height: int = 0
    planes: int = 0
    bit_count: int = 0
    compression: int = 0
    size_image: int = 0
    x_pixels_per_meter: int = 0
    y_pixels_per_meter: int = 0
    colors_used: int = 0
    colors_important: int = 0

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<IiiHHIIiiIB")

    def pack(self) -> bytes:
        return self.FORMAT.pack(
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bit_count,
            self.compression,
            self.size_image,
            self.x_pixels_per_meter,
            self.y_pixels_per_meter,
            self.colors_used,
            self.colors_important,
        )

    @classmethod
    def _unpack(cls, raw: bytes) -> "BitmapInfoHeader":
        return cls(*cls.FORMAT.unpack(raw))


def _read_exact(stream: BinaryIO, size: int, message: str) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise IcoError(f"{message}: unexpected EOF")
    return data


def _discard(stream: BinaryIO, size: int) -> None:
    remaining = size
    while remaining > 0:
        chunk = stream.read(min(remaining, _DISCARD_CHUNK))
        if not chunk:
            raise IcoError("could not discard file data: EOF")
        remaining -= len(chunk)


def _halve(value: int) -> int:
    return value // 2 if value >= 0 else -((-value) // 2)


def _try_png(data: bytes) -> Image.Image | None:
    try:
        img = Image.open(io.BytesIO(data), formats=["PNG"])
        img.load()
    except Exception:
        return None
    return img


def decode(stream: BinaryIO) -> Image.Image:
    """Decode the widest image of an ICO stream, stored as PNG or BMP."""
    header = IconHeader._unpack(
        _read_exact(stream, IconHeader.FORMAT.size, "could not read file header")
    )
    if header.reserved != 0 or header.type != 1:
        raise IcoError("invalid signature")

    entry = IconDirectoryEntry()
    for _ in range(header.count):
        candidate = IconDirectoryEntry._unpack(
            _read_exact(
                stream,
                IconDirectoryEntry.FORMAT.size,
                "could not read icon directory entry signature",
            )
        )
        if candidate.width > entry.width:
            entry = candidate

    discard = (
        entry.image_offset - ICON_HEADER_SIZE - ICON_ENTRY_SIZE * header.count
    ) & _UINT32_MASK
    _discard(stream, discard)

    data = _read_exact(stream, entry.bytes_in_res, "could not read image data")

    img = _try_png(data)
    if img is not None:
        return img

    info_size = BitmapInfoHeader.FORMAT.size
    if len(data) < info_size:
        raise IcoError("could not read the BitmapInfoHeader")
    info = BitmapInfoHeader._unpack(data[:info_size])
    # ICO stores the height of the XOR and AND masks together.
    info.height = _halve(info.height)

    file_header = BitmapFileHeader(
        size=(BMP_FILE_HEADER_SIZE + entry.bytes_in_res) & _UINT32_MASK,
        offset_bits=BMP_FILE_HEADER_SIZE + BMP_INFO_HEADER_SIZE,
    )
    bmp = file_header.pack() + info.pack() + data[info_size:]
    try:
        img = Image.open(io.BytesIO(bmp), formats=["BMP"])
        img.load()
    except (OSError, ValueError, SyntaxError, struct.error) as exc:
        raise IcoError(f"could not decode BMP data: {exc}") from exc
    return img