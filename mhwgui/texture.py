"""Reading of TEX texture files and conversion to DDS.

Two variants are understood: the regular one (version 0x10) with a linear
pixel layout, and the MHGU one (version 0x80A0) whose pixels are stored in the
Tegra block-linear layout and are deswizzled on load.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag

__all__ = [
    "TextureFormat",
    "DxgiFormat",
    "Texture",
    "TextureError",
    "make_fourcc",
    "convert_format",
    "format_to_fourcc",
    "is_4bpp",
    "is_16bpp",
    "get_block_size",
    "read_texture",
]

_U32_MAX = 0xFFFFFFFF


class TextureError(ValueError):
    """Raised for a TEX file that cannot be read or converted."""


class TextureFormat(IntEnum):
    """Pixel format codes stored in TEX files.

    The regular and MHGU variants reuse some numbers for different formats,
    so several names here are aliases of the same value.
    """

    UNKNOWN = 0
    R8G8B8A8_UNORM = 7
    R8G8B8A8_UNORM_SRGB = 9
    R8G8_UNORM = 19
    BC1_UNORM = 22
    BC1_UNORM_SRGB = 23
    BC4_UNORM = 24
    BC5_UNORM = 26
    BC6H_UF16 = 28
    BC7_UNORM = 30
    BC7_UNORM_SRGB = 31

    MHGU_UNKNOWN = 0
    MHGU_R8G8B8A8_UNORM = 7
    MHGU_BC1_UNORM = 19
    MHGU_BC1_UNORM_SRGB = 20
    MHGU_BC3_UNORM = 23
    MHGU_BCX_GRAYSCALE = 25
    MHGU_BCX_NM2 = 31
    MHGU_BC7 = 42


class DxgiFormat(IntEnum):
    """The DXGI formats a TEX format can map to."""

    UNKNOWN = 0
    R8G8B8A8_UNORM = 28
    R8G8B8A8_UNORM_SRGB = 29
    R8G8_UNORM = 49
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC3_UNORM = 77
    BC4_UNORM = 80
    BC5_UNORM = 83
    BC6H_UF16 = 95
    BC7_UNORM = 98
    BC7_UNORM_SRGB = 99


class _DdsFlags(IntFlag):
    CAPS = 0x1
    HEIGHT = 0x2
    WIDTH = 0x4
    PITCH = 0x8
    PIXELFORMAT = 0x1000
    MIPMAPCOUNT = 0x20000
    LINEARSIZE = 0x80000
    DEPTH = 0x800000


class _DdsCaps(IntFlag):
    COMPLEX = 0x8
    TEXTURE = 0x1000
    MIPMAP = 0x400000


_DDPF_FOURCC = 0x4
_DDS_HEADER_SIZE = 124
_DDS_PIXELFORMAT_SIZE = 32
_RESOURCE_DIMENSION_TEXTURE2D = 3


def make_fourcc(code: str | bytes) -> int:
    """Pack a four-character code into a little-endian 32-bit integer."""
    raw = code.encode("latin-1") if isinstance(code, str) else bytes(code)
    if len(raw) != 4:
        raise ValueError(f"a four-character code needs 4 characters, got {len(raw)}")
    return int.from_bytes(raw, "little")


_TEX_MAGIC = make_fourcc("TEX\0")
_DX10 = make_fourcc("DX10")
_UNKN = make_fourcc("UNKN")
_DDS_MAGIC = b"DDS "

_MHW_VERSION = 0x10
_MHGU_VERSION = 0x80A0

_DXGI_REGULAR: dict[int, DxgiFormat] = {
    0: DxgiFormat.UNKNOWN,
    7: DxgiFormat.R8G8B8A8_UNORM,
    9: DxgiFormat.R8G8B8A8_UNORM_SRGB,
    19: DxgiFormat.R8G8_UNORM,
    22: DxgiFormat.BC1_UNORM,
    23: DxgiFormat.BC1_UNORM_SRGB,
    24: DxgiFormat.BC4_UNORM,
    26: DxgiFormat.BC5_UNORM,
    28: DxgiFormat.BC6H_UF16,
    30: DxgiFormat.BC7_UNORM,
    31: DxgiFormat.BC7_UNORM_SRGB,
}

_DXGI_MHGU: dict[int, DxgiFormat] = {
    0: DxgiFormat.UNKNOWN,
    7: DxgiFormat.R8G8B8A8_UNORM,
    19: DxgiFormat.BC1_UNORM,
    20: DxgiFormat.BC1_UNORM_SRGB,
    23: DxgiFormat.BC3_UNORM,
    25: DxgiFormat.BC4_UNORM,
    31: DxgiFormat.BC5_UNORM,
    42: DxgiFormat.BC7_UNORM,
}

_FOURCC_REGULAR: dict[int, str] = {
    0: "UNKN",
    7: "DX10",
    9: "DX10",
    28: "DX10",
    30: "DX10",
    19: "DX10",
    23: "DX10",
    31: "DX10",
    22: "DXT1",
    24: "BC4U",
    26: "BC5U",
}

_FOURCC_MHGU: dict[int, str] = {
    0: "UNKN",
    7: "DX10",
    19: "DXT1",
    20: "DXT1",
    23: "DXT5",
    25: "ATI1",
    31: "ATI2",
    42: "DX10",
}

_FOUR_BPP = frozenset({22, 23, 24, 20, 25})
_SIXTEEN_BPP = frozenset({19, 26, 31})

_BLOCK_SIZES: dict[int, tuple[int, int]] = {
    20: (8, 4),
    19: (8, 4),
    7: (4, 1),
    25: (8, 4),
    23: (16, 4),
    31: (16, 4),
    42: (16, 4),
}


def convert_format(fmt: int, mhgu: bool = False) -> DxgiFormat:
    """Return the DXGI format for a TEX format code, or UNKNOWN."""
    table = _DXGI_MHGU if mhgu else _DXGI_REGULAR
    return table.get(int(fmt), DxgiFormat.UNKNOWN)


def format_to_fourcc(fmt: int, mhgu: bool = False) -> int:
    """Return the DDS four-character code for a TEX format code."""
    table = _FOURCC_MHGU if mhgu else _FOURCC_REGULAR
    return make_fourcc(table.get(int(fmt), "UNKN"))


def is_4bpp(fmt: int) -> bool:
    """Whether the format stores four bits per pixel."""
    return int(fmt) in _FOUR_BPP


def is_16bpp(fmt: int) -> bool:
    """Whether the format stores sixteen bits per pixel."""
    return int(fmt) in _SIXTEEN_BPP


def get_block_size(fmt: int) -> tuple[int, int]:
    """Return (bytes per block, block edge in pixels) for an MHGU format.

    Unknown formats give ``(1, 0)``.
    """
    return _BLOCK_SIZES.get(int(fmt), (1, 0))


# --- Tegra block-linear layout -------------------------------------------

_GOB_WIDTH = 64
_GOB_HEIGHT = 8
_GOB_SIZE = _GOB_WIDTH * _GOB_HEIGHT


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _block_height_mip0(height: int) -> int:
    scaled = height + height // 2
    for limit, block_height in ((128, 16), (64, 8), (32, 4), (16, 2)):
        if scaled >= limit:
            return block_height
    return 1


def _mip_block_height(mip_height: int, block_height: int) -> int:
    while mip_height <= (block_height // 2) * _GOB_HEIGHT and block_height > 1:
        block_height //= 2
    return block_height


def _swizzled_size(width_bytes: int, height: int, block_height: int) -> int:
    width_in_gobs = _ceil_div(width_bytes, _GOB_WIDTH)
    rows_of_blocks = _ceil_div(height, _GOB_HEIGHT * block_height)
    return width_in_gobs * rows_of_blocks * _GOB_SIZE * block_height


def _swizzled_offset(x: int, y: int, width_in_gobs: int, block_height: int) -> int:
    block_rows = _GOB_HEIGHT * block_height
    return (
        (y // block_rows) * _GOB_SIZE * block_height * width_in_gobs
        + (x // _GOB_WIDTH) * _GOB_SIZE * block_height
        + ((y % block_rows) // _GOB_HEIGHT) * _GOB_SIZE
        + ((x % 64) // 32) * 256
        + ((y % 8) // 2) * 64
        + ((x % 32) // 16) * 32
        + (y % 2) * 16
        + (x % 16)
    )


def _runs(width_bytes: int, height: int, block_height: int):
    """Yield (linear offset, swizzled offset, length) for 16-byte runs."""
    width_in_gobs = _ceil_div(width_bytes, _GOB_WIDTH)
    for y in range(height):
        row = y * width_bytes
        for x in range(0, width_bytes, 16):
            yield (
                row + x,
                _swizzled_offset(x, y, width_in_gobs, block_height),
                min(16, width_bytes - x),
            )


def _deswizzle(data: bytes, width_bytes: int, height: int, block_height: int) -> bytes:
    required = _swizzled_size(width_bytes, height, block_height)
    if len(data) < required:
        raise TextureError(
            f"swizzled surface needs {required} bytes, got {len(data)}"
        )
    out = bytearray(width_bytes * height)
    for linear, swizzled, length in _runs(width_bytes, height, block_height):
        out[linear:linear + length] = data[swizzled:swizzled + length]
    return bytes(out)


def _swizzle(data: bytes, width_bytes: int, height: int, block_height: int) -> bytes:
    if len(data) < width_bytes * height:
        raise TextureError(
            f"linear surface needs {width_bytes * height} bytes, got {len(data)}"
        )
    out = bytearray(_swizzled_size(width_bytes, height, block_height))
    for linear, swizzled, length in _runs(width_bytes, height, block_height):
        out[swizzled:swizzled + length] = data[linear:linear + length]
    return bytes(out)


def _surface_geometry(width: int, height: int, fmt: int) -> tuple[int, int, int]:
    """Return (width in bytes, height in blocks, GOB block height)."""
    block_size, block_dim = get_block_size(fmt)
    width_blocks = _ceil_div(width, block_dim)
    height_blocks = _ceil_div(height, block_dim)
    block_height = _mip_block_height(height_blocks, _block_height_mip0(height))
    return width_blocks * block_size, height_blocks, block_height


# --- Texture --------------------------------------------------------------


@dataclass
class Texture:
    """A decoded texture: its dimensions, format code and linear pixel data."""

    width: int
    height: int
    mip_count: int
    format: int
    pixel_data: bytes
    mhgu: bool = False

    @property
    def dxgi_format(self) -> DxgiFormat:
        return convert_format(self.format, self.mhgu)

    @property
    def fourcc(self) -> int:
        return format_to_fourcc(self.format, self.mhgu)

    def _linear_size(self) -> int:
        if self.mhgu:
            return len(self.pixel_data) // self.mip_count
        area = self.width * self.height
        if is_4bpp(self.format):
            return area // 2
        if is_16bpp(self.format):
            return area * 2
        return area

    def to_dds(self) -> bytes:
        """Return the texture as the bytes of a DDS file."""
        dxgi = self.dxgi_format
        if dxgi is DxgiFormat.UNKNOWN:
            raise TextureError(f"Unknown format: {int(self.format)}")

        flags = (
            _DdsFlags.CAPS
            | _DdsFlags.HEIGHT
            | _DdsFlags.WIDTH
            | _DdsFlags.PIXELFORMAT
            | _DdsFlags.LINEARSIZE
        )
        if self.mhgu:
            caps = _DdsCaps.TEXTURE
            mip_count = 1
        else:
            flags |= _DdsFlags.MIPMAPCOUNT
            caps = _DdsCaps.COMPLEX | _DdsCaps.MIPMAP | _DdsCaps.TEXTURE
            mip_count = self.mip_count

        fourcc = self.fourcc
        header = struct.pack(
            "<7I44x8I5I",
            _DDS_HEADER_SIZE,
            int(flags),
            self.height & _U32_MAX,
            self.width & _U32_MAX,
            self._linear_size() & _U32_MAX,
            1,
            mip_count & _U32_MAX,
            _DDS_PIXELFORMAT_SIZE,
            _DDPF_FOURCC,
            fourcc,
            0, 0, 0, 0, 0,
            int(caps),
            0, 0, 0, 0,
        )
        parts = [_DDS_MAGIC, header]
        if fourcc == _DX10:
            parts.append(
                struct.pack(
                    "<5I", int(dxgi), _RESOURCE_DIMENSION_TEXTURE2D, 0, 1, 0
                )
            )
        parts.append(bytes(self.pixel_data))
        return b"".join(parts)


def _unpack(fmt: str, data: bytes, offset: int) -> tuple:
    try:
        return struct.unpack_from(fmt, data, offset)
    except struct.error:
        raise TextureError("TEX file is truncated") from None


def _read_regular(data: bytes) -> Texture:
    mip_count, width, height = _unpack("<3I", data, 0x14)
    (fmt,) = _unpack("<I", data, 0x24)
    (offset,) = _unpack("<q", data, 0xB8)
    if not 0 <= offset <= len(data):
        raise TextureError(f"pixel data offset {offset} lies outside the file")
    if convert_format(fmt) is DxgiFormat.UNKNOWN:
        raise TextureError(f"Unknown format: {fmt}")
    return Texture(
        width=width,
        height=height,
        mip_count=mip_count,
        format=fmt,
        pixel_data=bytes(data[offset:]),
    )


def _read_mhgu(data: bytes) -> Texture:
    _, _, word1, word2 = _unpack("<4I", data, 0)
    level_count = word1 & 0x3F
    width = (word1 >> 6) & 0x1FFF
    height = (word1 >> 19) & 0x1FFF
    fmt = (word2 >> 8) & 0xFF

    (length,) = _unpack("<I", data, 16)
    start = 20 + 4 * level_count
    if start + length > len(data):
        raise TextureError("TEX file is truncated")
    swizzled = bytes(data[start:start + length])

    if convert_format(fmt, mhgu=True) is DxgiFormat.UNKNOWN:
        raise TextureError(f"Unknown format: {fmt}")

    width_bytes, height_blocks, block_height = _surface_geometry(width, height, fmt)
    pixels = _deswizzle(swizzled, width_bytes, height_blocks, block_height)
    return Texture(
        width=width,
        height=height,
        mip_count=1,
        format=fmt,
        pixel_data=pixels,
        mhgu=True,
    )


def read_texture(data: bytes) -> Texture:
    """Read a TEX file; the variant is told apart by its version field.

    Raises TextureError for a bad magic or version, an unknown pixel format
    or a truncated file.
    """
    magic, version_word = _unpack("<2I", data, 0)
    if magic != _TEX_MAGIC:
        raise TextureError("Invalid TEX file")
    if version_word == _MHW_VERSION:
        return _read_regular(data)
    if version_word & 0xFFFF == _MHGU_VERSION:
        return _read_mhgu(data)
    raise TextureError("Invalid TEX file")