import struct

import pytest

from mhwgui.texture import (
    DxgiFormat,
    Texture,
    TextureError,
    TextureFormat,
    _deswizzle,
    _surface_geometry,
    _swizzle,
    convert_format,
    format_to_fourcc,
    get_block_size,
    is_16bpp,
    is_4bpp,
    make_fourcc,
    read_texture,
)


def build_regular(width, height, mips, fmt, pixels, version=0x10, magic=b"TEX\0"):
    header = bytearray(0xC0)
    struct.pack_into("<4sI", header, 0, magic, version)
    struct.pack_into("<3I", header, 0x14, mips, width, height)
    struct.pack_into("<I", header, 0x24, fmt)
    struct.pack_into("<q", header, 0xB8, 0xC0)
    return bytes(header) + pixels


def build_mhgu(width, height, fmt, swizzled, level_count=1):
    word0 = 0x80A0
    word1 = level_count | (width << 6) | (height << 19)
    word2 = 1 | (fmt << 8) | (1 << 16)
    head = struct.pack("<4s3I", b"TEX\0", word0, word1, word2)
    head += struct.pack("<I", len(swizzled))
    head += bytes(4 * level_count)
    return head + swizzled


def test_make_fourcc_matches_dds_magic():
    assert make_fourcc(b"DDS ") == 0x20534444


def test_make_fourcc_str_and_bytes_agree():
    assert make_fourcc("DX10") == make_fourcc(b"DX10")


def test_make_fourcc_rejects_wrong_length():
    with pytest.raises(ValueError):
        make_fourcc("DXT")


@pytest.mark.parametrize(
    "fmt, mhgu, expected",
    [
        (TextureFormat.BC7_UNORM, False, DxgiFormat.BC7_UNORM),
        (TextureFormat.BC6H_UF16, False, DxgiFormat.BC6H_UF16),
        (19, False, DxgiFormat.R8G8_UNORM),
        (19, True, DxgiFormat.BC1_UNORM),
        (31, False, DxgiFormat.BC7_UNORM_SRGB),
        (31, True, DxgiFormat.BC5_UNORM),
        (TextureFormat.MHGU_BC7, True, DxgiFormat.BC7_UNORM),
        (42, False, DxgiFormat.UNKNOWN),
        (9, True, DxgiFormat.UNKNOWN),
    ],
)
def test_convert_format(fmt, mhgu, expected):
    assert convert_format(fmt, mhgu) is expected


@pytest.mark.parametrize(
    "fmt, mhgu, code",
    [
        (22, False, "DXT1"),
        (24, False, "BC4U"),
        (26, False, "BC5U"),
        (30, False, "DX10"),
        (0, False, "UNKN"),
        (99, False, "UNKN"),
        (23, True, "DXT5"),
        (25, True, "ATI1"),
        (31, True, "ATI2"),
        (42, True, "DX10"),
    ],
)
def test_format_to_fourcc(fmt, mhgu, code):
    assert format_to_fourcc(fmt, mhgu) == make_fourcc(code)


def test_bits_per_pixel_classification():
    assert is_4bpp(TextureFormat.BC1_UNORM)
    assert is_4bpp(TextureFormat.MHGU_BCX_GRAYSCALE)
    assert not is_4bpp(TextureFormat.BC7_UNORM)
    assert is_16bpp(TextureFormat.BC5_UNORM)
    assert is_16bpp(TextureFormat.MHGU_BCX_NM2)
    assert not is_16bpp(TextureFormat.R8G8B8A8_UNORM)


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (TextureFormat.MHGU_BC1_UNORM, (8, 4)),
        (TextureFormat.MHGU_R8G8B8A8_UNORM, (4, 1)),
        (TextureFormat.MHGU_BCX_GRAYSCALE, (8, 4)),
        (TextureFormat.MHGU_BC7, (16, 4)),
        (TextureFormat.MHGU_UNKNOWN, (1, 0)),
    ],
)
def test_get_block_size(fmt, expected):
    assert get_block_size(fmt) == expected


def test_read_regular_texture():
    pixels = bytes(range(256)) * 8
    tex = read_texture(build_regular(64, 64, 1, 22, pixels))
    assert (tex.width, tex.height, tex.mip_count, tex.format) == (64, 64, 1, 22)
    assert tex.pixel_data == pixels
    assert tex.mhgu is False


def test_regular_dds_bc1_has_no_dx10_header():
    pixels = bytes(2048)
    tex = read_texture(build_regular(64, 64, 1, 22, pixels))
    dds = tex.to_dds()
    assert dds[:4] == b"DDS "
    assert struct.unpack_from("<I", dds, 4)[0] == 124
    assert len(dds) == 4 + 124 + len(pixels)
    height, width = struct.unpack_from("<2I", dds, 12)
    assert (width, height) == (64, 64)
    assert struct.unpack_from("<I", dds, 84)[0] == make_fourcc("DXT1")
    assert dds[128:] == pixels


def test_regular_dds_bc7_has_dx10_header():
    pixels = bytes(100)
    tex = read_texture(build_regular(8, 8, 3, 30, pixels))
    dds = tex.to_dds()
    assert len(dds) == 4 + 124 + 20 + len(pixels)
    assert struct.unpack_from("<I", dds, 28)[0] == 3
    dxgi, dimension, _, array_size, _ = struct.unpack_from("<5I", dds, 128)
    assert dxgi == DxgiFormat.BC7_UNORM
    assert array_size == 1
    assert dimension == 3


def test_read_rejects_bad_magic():
    with pytest.raises(TextureError):
        read_texture(build_regular(4, 4, 1, 22, bytes(8), magic=b"XET\0"))


def test_read_rejects_bad_version():
    with pytest.raises(TextureError):
        read_texture(build_regular(4, 4, 1, 22, bytes(8), version=0x11))


def test_read_rejects_unknown_format():
    with pytest.raises(TextureError):
        read_texture(build_regular(4, 4, 1, 5, bytes(8)))


def test_read_rejects_truncated_file():
    with pytest.raises(TextureError):
        read_texture(build_regular(4, 4, 1, 22, b"")[:0x30])


def test_swizzle_round_trip():
    width_bytes, height, block_height = _surface_geometry(128, 96, 42)
    linear = bytes((i * 7) % 251 for i in range(width_bytes * height))
    swizzled = _swizzle(linear, width_bytes, height, block_height)
    assert len(swizzled) >= len(linear)
    assert _deswizzle(swizzled, width_bytes, height, block_height) == linear


def test_deswizzle_rejects_short_data():
    with pytest.raises(TextureError):
        _deswizzle(bytes(10), 16, 4, 1)


def test_read_mhgu_rgba_texture_deswizzles_single_gob():
    swizzled = bytes(range(256)) * 2
    tex = read_texture(build_mhgu(4, 4, 7, swizzled))
    assert tex.mhgu is True
    assert (tex.width, tex.height, tex.mip_count) == (4, 4, 1)
    rows = [tex.pixel_data[i * 16:(i + 1) * 16] for i in range(4)]
    assert rows[0] == swizzled[0:16]
    assert rows[1] == swizzled[16:32]
    assert rows[2] == swizzled[64:80]
    assert rows[3] == swizzled[80:96]


def test_read_mhgu_round_trip_through_swizzle():
    width_bytes, height, block_height = _surface_geometry(64, 64, 23)
    linear = bytes((i * 13) % 256 for i in range(width_bytes * height))
    swizzled = _swizzle(linear, width_bytes, height, block_height)
    tex = read_texture(build_mhgu(64, 64, 23, swizzled, level_count=2))
    assert tex.pixel_data == linear
    assert tex.dxgi_format is DxgiFormat.BC3_UNORM


def test_mhgu_dds_header():
    swizzled = bytes(512)
    tex = read_texture(build_mhgu(4, 4, 7, swizzled))
    dds = tex.to_dds()
    flags = struct.unpack_from("<I", dds, 8)[0]
    assert flags & 0x20000 == 0
    assert struct.unpack_from("<I", dds, 20)[0] == len(tex.pixel_data)
    assert struct.unpack_from("<I", dds, 28)[0] == 1
    assert struct.unpack_from("<I", dds, 108)[0] == 0x1000
    assert struct.unpack_from("<I", dds, 128)[0] == DxgiFormat.R8G8B8A8_UNORM


def test_mhgu_rejects_unknown_format():
    with pytest.raises(TextureError):
        read_texture(build_mhgu(4, 4, 9, bytes(512)))


def test_mhgu_rejects_truncated_data():
    data = build_mhgu(4, 4, 7, bytes(512))
    with pytest.raises(TextureError):
        read_texture(data[:-100])


def test_to_dds_rejects_unknown_format():
    tex = Texture(width=4, height=4, mip_count=1, format=5, pixel_data=b"")
    with pytest.raises(TextureError):
        tex.to_dds()