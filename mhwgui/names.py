"""Display names for the GUI enumerations."""

from __future__ import annotations

from enum import IntEnum
from functools import cache

from .gui_types import (
    Alignment,
    AutoWrap,
    Billboard,
    BlendState,
    ColorControl,
    DepthState,
    DrawPass,
    EndConditionType,
    FlowType,
    FontStyle,
    KeyMode,
    KeyValueType,
    LetterHAlign,
    LetterVAlign,
    MaskType,
    ObjectType,
    ParamType,
    ResolutionAdjust,
    SamplerMode,
    TilingMode,
)

__all__ = ["enum_to_string", "enum_names", "object_type_from_name"]

INVALID = "INVALID"
UNNAMED = "N/A"

# Enumerations that have a lookup table indexed by value.
_INDEXED_ENUMS: frozenset[type[IntEnum]] = frozenset(
    {
        FlowType,
        BlendState,
        SamplerMode,
        Alignment,
        ResolutionAdjust,
        AutoWrap,
        ColorControl,
        EndConditionType,
        LetterHAlign,
        LetterVAlign,
        DepthState,
        Billboard,
        DrawPass,
        MaskType,
        TilingMode,
        KeyMode,
        ParamType,
        FontStyle,
    }
)

# Enumerations that can be converted to a single display string.
_STRING_ENUMS: frozenset[type[IntEnum]] = _INDEXED_ENUMS | {KeyValueType, ObjectType}

# Members that have no display string of their own.
_INVALID_MEMBERS: frozenset[IntEnum] = frozenset({KeyValueType.NONE, Alignment.NONE})

_SPECIAL_NAMES: dict[IntEnum, str] = {ObjectType.NONE: "None"}

# Values whose slot in an index table is shown as unnamed even though a member exists.
_UNNAMED_SLOTS: dict[type[IntEnum], frozenset[int]] = {Alignment: frozenset({0})}


def enum_to_string(value: IntEnum) -> str:
    """Return the display name of an enumeration member.

    Members without a display name give ``"INVALID"``. Raises TypeError for
    enumerations that have no display names.
    """
    enum_cls = type(value)
    if enum_cls not in _STRING_ENUMS:
        raise TypeError(f"no display names for {enum_cls.__name__}")
    if value in _INVALID_MEMBERS:
        return INVALID
    return _SPECIAL_NAMES.get(value, value.name)


@cache
def enum_names(enum_cls: type[IntEnum]) -> tuple[str, ...]:
    """Return display names indexed by value, with ``"N/A"`` in the gaps."""
    if enum_cls not in _INDEXED_ENUMS:
        raise TypeError(f"no indexed name table for {enum_cls.__name__}")
    by_value = {member.value: member for member in enum_cls}
    unnamed = _UNNAMED_SLOTS.get(enum_cls, frozenset())
    return tuple(
        UNNAMED
        if index in unnamed or index not in by_value
        else enum_to_string(by_value[index])
        for index in range(max(by_value) + 1)
    )


@cache
def _object_types_by_name() -> dict[str, ObjectType]:
    return {enum_to_string(member): member for member in ObjectType}


def object_type_from_name(name: str) -> ObjectType:
    """Return the object type with the given display name; KeyError if unknown."""
    try:
        return _object_types_by_name()[name]
    except KeyError:
        raise KeyError(f"unknown object type name: {name!r}") from None