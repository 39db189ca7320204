"""Key-value buffers that keyframe values are written into."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = ["KeyValueConfig", "KeyValueBuffers", "Vector4"]

Vector4 = tuple[float, float, float, float]

KV8_SIZE = 1
KV32_SIZE = 4
KV128_SIZE = 16

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


def _float_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _check_u32(value: int) -> int:
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value {value} does not fit in 32 bits")
    return value


def _as_u32(value: int | float) -> int:
    if isinstance(value, float):
        return _float_bits(value)
    return _check_u32(int(value))


def _as_vector4(value: Iterable[float]) -> Vector4:
    vec = tuple(float(component) for component in value)
    if len(vec) != 4:
        raise ValueError(f"a vector4 needs 4 components, got {len(vec)}")
    return vec  # type: ignore[return-value]


def _split_u64(value: int) -> tuple[int, int]:
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"value {value} does not fit in 64 bits")
    return value & _U32_MAX, value >> 32


def _find_run(haystack: Sequence, needle: Sequence) -> int | None:
    """Return the index where ``needle`` first occurs in ``haystack`` as a run."""
    width = len(needle)
    if width == 0:
        return 0 if haystack else None
    needle_list = list(needle)
    return next(
        (
            start
            for start in range(len(haystack) - width + 1)
            if list(haystack[start:start + width]) == needle_list
        ),
        None,
    )


@dataclass
class KeyValueConfig:
    """Whether identical values may be shared between several references."""

    multiple_kv8_refs: bool = False
    multiple_kv32_refs: bool = False
    multiple_kv128_refs: bool = False


@dataclass
class KeyValueBuffers:
    """The 8-, 32- and 128-bit value pools plus extended data.

    Every insert method returns the byte offset of the inserted value within
    its pool.
    """

    kv8: bytearray = field(default_factory=bytearray)
    kv32: list[int] = field(default_factory=list)
    kv128: list[Vector4] = field(default_factory=list)
    extend_data: bytearray = field(default_factory=bytearray)
    config: KeyValueConfig = field(default_factory=KeyValueConfig)

    def insert8(self, value: int) -> int:
        """Insert one byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"value {value} does not fit in 8 bits")
        if self.config.multiple_kv8_refs:
            found = self.kv8.find(bytes([value]))
            if found != -1:
                return found * KV8_SIZE
        idx = len(self.kv8)
        self.kv8.append(value)
        return idx * KV8_SIZE

    def insert8_many(self, values: Iterable[int]) -> int:
        """Insert a run of bytes."""
        run = bytes(values)
        if self.config.multiple_kv8_refs:
            found = _find_run(self.kv8, run)
            if found is not None:
                return found * KV8_SIZE
        idx = len(self.kv8)
        self.kv8 += run
        return idx * KV8_SIZE

    def insert32(self, value: int) -> int:
        """Insert one unsigned 32-bit value."""
        value = _check_u32(value)
        if self.config.multiple_kv32_refs and value in self.kv32:
            return self.kv32.index(value) * KV32_SIZE
        idx = len(self.kv32)
        self.kv32.append(value)
        return idx * KV32_SIZE

    def insert32_float(self, value: float) -> int:
        """Insert a float as its single-precision bit pattern."""
        return self.insert32(_float_bits(value))

    def insert32_many(self, values: Iterable[int | float]) -> int:
        """Insert a run of 32-bit values; floats are stored as their bits.

        Sharing of an existing run is governed by the 8-bit sharing option.
        """
        run = [_as_u32(v) for v in values]
        if self.config.multiple_kv8_refs:
            found = _find_run(self.kv32, run)
            if found is not None:
                return found * KV32_SIZE
        idx = len(self.kv32)
        self.kv32.extend(run)
        return idx * KV32_SIZE

    def insert64(self, value: int) -> int:
        """Insert a 64-bit value as two little-endian 32-bit halves."""
        halves = list(_split_u64(value))
        if self.config.multiple_kv32_refs:
            found = _find_run(self.kv32, halves)
            if found is not None:
                return found * KV32_SIZE
        idx = len(self.kv32)
        self.kv32.extend(halves)
        return idx * KV32_SIZE

    def insert64_many(self, values: Iterable[int]) -> int:
        """Insert a run of 64-bit values, each as two 32-bit halves."""
        run = [half for v in values for half in _split_u64(v)]
        if self.config.multiple_kv32_refs:
            found = _find_run(self.kv32, run)
            if found is not None:
                return found * KV32_SIZE
        idx = len(self.kv32)
        self.kv32.extend(run)
        return idx * KV32_SIZE

    def insert128(self, value: Iterable[float]) -> int:
        """Insert one four-component vector.

        Sharing is governed by the 8-bit sharing option.
        """
        vec = _as_vector4(value)
        if self.config.multiple_kv8_refs and vec in self.kv128:
            return self.kv128.index(vec) * KV128_SIZE
        idx = len(self.kv128)
        self.kv128.append(vec)
        return idx * KV128_SIZE

    def insert128_many(self, values: Iterable[Iterable[float]]) -> int:
        """Insert a run of four-component vectors."""
        run = [_as_vector4(v) for v in values]
        if self.config.multiple_kv8_refs:
            found = _find_run(self.kv128, run)
            if found is not None:
                return found * KV128_SIZE
        idx = len(self.kv128)
        self.kv128.extend(run)
        return idx * KV128_SIZE