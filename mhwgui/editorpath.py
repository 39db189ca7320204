"""Paths that address an element of a GUI file inside the editor.

A path is a chain of ``Category:accessor:value`` elements joined by ``/``,
where the accessor is ``i`` (index), ``x`` (hexadecimal id) or ``n`` (name).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "EditorPathCategory",
    "EditorPathAccessorType",
    "EditorPath",
    "EditorPathError",
    "parse_editor_path",
]

_ELEMENT = re.compile(r"([^:]+):([ixn]):(.+)", re.DOTALL)
_DECIMAL = re.compile(r"[0-9]+", re.ASCII)
_HEX = re.compile(r"[0-9a-fA-F]+", re.ASCII)
_U32_MAX = 0xFFFFFFFF


class EditorPathError(ValueError):
    """Raised for a malformed editor path."""


class EditorPathCategory(Enum):
    Animations = "Animations"
    Objects = "Objects"
    Sequences = "Sequences"
    ObjectSequences = "ObjectSequences"
    InitParams = "InitParams"
    Params = "Params"
    Instances = "Instances"
    FontFilters = "FontFilters"
    Keyframes = "Keyframes"
    FlowProcesses = "FlowProcesses"
    Flows = "Flows"
    GeneralResources = "GeneralResources"
    Messages = "Messages"
    Resources = "Resources"
    Textures = "Textures"
    Vertices = "Vertices"

    @property
    def supported(self) -> bool:
        """Whether the editor can address elements of this category yet."""
        return self not in _UNSUPPORTED


_UNSUPPORTED = frozenset(
    {
        EditorPathCategory.FlowProcesses,
        EditorPathCategory.Flows,
        EditorPathCategory.GeneralResources,
        EditorPathCategory.Messages,
        EditorPathCategory.Resources,
        EditorPathCategory.Textures,
        EditorPathCategory.Vertices,
    }
)


class EditorPathAccessorType(Enum):
    Index = "i"
    Id = "x"
    Name = "n"


@dataclass(frozen=True)
class EditorPath:
    """One element of an editor path and the rest of the chain below it."""

    category: EditorPathCategory
    accessor: EditorPathAccessorType
    value: int | str
    child: EditorPath | None = None

    @classmethod
    def parse(cls, path: str) -> EditorPath:
        return parse_editor_path(path)


def _parse_number(text: str, pattern: re.Pattern[str], base: int) -> int:
    if not pattern.fullmatch(text):
        raise EditorPathError(f"invalid number {text!r}")
    value = int(text, base)
    if value > _U32_MAX:
        raise EditorPathError(f"number {text!r} does not fit in 32 bits")
    return value


def parse_editor_path(path: str) -> EditorPath:
    """Parse ``path`` into a chain of EditorPath elements."""
    element, slash, rest = path.partition("/")
    match = _ELEMENT.fullmatch(element)
    if match is None:
        raise EditorPathError(f"malformed path element {element!r}")

    name, accessor_code, raw = match.groups()
    try:
        category = EditorPathCategory(name)
    except ValueError:
        raise EditorPathError(f"unknown category {name!r}") from None

    accessor = EditorPathAccessorType(accessor_code)
    value: int | str
    if accessor is EditorPathAccessorType.Index:
        value = _parse_number(raw, _DECIMAL, 10)
    elif accessor is EditorPathAccessorType.Id:
        value = _parse_number(raw, _HEX, 16)
    else:
        value = raw

    child = parse_editor_path(rest) if slash else None
    return EditorPath(category, accessor, value, child)