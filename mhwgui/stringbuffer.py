"""A growing buffer of null-terminated strings."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["StringBuffer"]


def _to_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


class StringBuffer:
    """Holds strings back to back, each normally followed by a null byte.

    Positions returned by the append methods are byte offsets into the buffer.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def append(self, text: str | bytes) -> int:
        """Append ``text`` and a null terminator; return its offset."""
        pos = len(self._buffer)
        self._buffer += _to_bytes(text)
        self._buffer.append(0)
        return pos

    def append_raw(self, data: str | bytes) -> int:
        """Append ``data`` without a terminator; return its offset."""
        pos = len(self._buffer)
        self._buffer += _to_bytes(data)
        return pos

    def append_no_duplicate(self, text: str | bytes) -> int:
        """Append ``text`` unless a whole string equal to it is already present."""
        existing = self.find(text)
        if existing is not None:
            return existing
        return self.append(text)

    def find(self, text: str | bytes) -> int | None:
        """Return the offset of ``text`` as a whole string, or None if absent.

        A match counts only when it starts at the buffer's start or after a
        null byte, and ends at the buffer's end or before a null byte.
        """
        needle = _to_bytes(text)
        buf = self._buffer
        end = len(buf)
        start = 0
        while True:
            idx = buf.find(needle, start)
            if idx == -1 or idx >= end:
                return None
            after = idx + len(needle)
            if (idx == 0 or buf[idx - 1] == 0) and (after == end or buf[after] == 0):
                return idx
            start = idx + 1

    def view(self) -> bytes:
        """Return the whole buffer contents."""
        return bytes(self._buffer)

    def data(self) -> bytes:
        """Return the whole buffer contents."""
        return bytes(self._buffer)

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, (str, bytes)):
            return False
        return self.find(text) is not None

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._buffer))

    def __reversed__(self) -> Iterator[int]:
        return reversed(bytes(self._buffer))

    def __getitem__(self, index):
        result = self._buffer[index]
        return bytes(result) if isinstance(index, slice) else result

    def __setitem__(self, index: int, value: int) -> None:
        self._buffer[index] = value