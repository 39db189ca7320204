"""Parsing of rich text with simple XML-like formatting tags.

Supported tags: ``<B>``, ``<I>``, ``<U>``, ``<S>`` and ``<C RRGGBBAA>``, each
closed by ``</B>``, ``</I>``, ``</U>``, ``</S>`` or ``</C>``. Colour tags nest.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["TagType", "TaggedText", "RichTextError", "parse_rich_text"]

DEFAULT_COLOR = 0xFFFFFFFF
_U32_MAX = 0xFFFFFFFF

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class TagType(Enum):
    NONE = 0
    Bold = 1
    Italic = 2
    Underline = 3
    StrikeThrough = 4
    Color = 5


@dataclass(frozen=True)
class TaggedText:
    """A run of text sharing the same formatting."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_through: bool = False
    color: int = DEFAULT_COLOR


class RichTextError(ValueError):
    """Raised when colour tags are not balanced."""


def _parse_hex(text: str) -> int:
    """Read a leading hexadecimal number the way ``strtoul`` does, as 32 bits."""
    match = _HEX_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = min(int(digits, 16), _U32_MAX)
    if sign == "-":
        value = -value
    return value & _U32_MAX


def parse_rich_text(text: str, default_color: int = DEFAULT_COLOR) -> list[TaggedText]:
    """Split ``text`` into formatted runs, removing the tags.

    Unknown tags are kept as literal text. Raises RichTextError on an
    unmatched ``</C>``, a missing ``</C>`` or an unterminated ``<C ...`` tag.
    """
    size = len(text)

    def char_at(pos: int) -> str:
        return text[pos] if pos < size else "\0"

    result: list[TaggedText] = []
    bold = italic = underline = strike = False
    colors = [default_color]

    def emit(start: int, end: int, color: int) -> None:
        result.append(
            TaggedText(
                text=text[start:end],
                bold=bold,
                italic=italic,
                underline=underline,
                strike_through=strike,
                color=color,
            )
        )

    last = 0
    i = 0
    while i < size:
        if text[i] != "<":
            i += 1
            continue
        if size >= 3 and i >= size - 3:
            break  # not enough characters left for a tag

        pre_color = colors[-1]

        if char_at(i + 1) == "/":
            kind = char_at(i + 2)
            if kind == "B":
                bold = False
            elif kind == "I":
                italic = False
            elif kind == "U":
                underline = False
            elif kind == "S":
                strike = False
            elif kind == "C":
                if len(colors) > 1:
                    colors.pop()
                else:
                    raise RichTextError("Closing color tag without opening tag")
            else:
                i += 1
                continue

            if i != last:
                emit(last, i, pre_color)
            i += 4
            last = i
        else:
            pre_pos = i
            kind = char_at(i + 1)
            if kind == "B":
                bold = True
                i += 3
            elif kind == "I":
                italic = True
                i += 3
            elif kind == "U":
                underline = True
                i += 3
            elif kind == "S":
                strike = True
                i += 3
            elif kind == "C":
                begin = i + 3
                end = text.find(">", begin)
                if end == -1:
                    raise RichTextError(f"Unterminated color tag in string '{text}'")
                colors.append(_parse_hex(text[begin:]))
                i = end + 1
            else:
                i += 1
                continue

            if pre_pos != last:
                emit(last, pre_pos, pre_color)
            last = i

    if last < size:
        emit(last, size, colors[-1])

    if len(colors) > 1:
        raise RichTextError(f"Missing closing color tag in string '{text}'")

    return result