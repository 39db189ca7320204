import pytest

from mhwgui.gui_types import (
    Alignment,
    BlendState,
    ControlPoint,
    DrawPass,
    FlowType,
    FontStyle,
    KeyMode,
    KeyValueType,
    ObjectType,
    ParamType,
    ScalingType,
)
from mhwgui.names import enum_names, enum_to_string, object_type_from_name


def test_enum_to_string_plain_members():
    assert enum_to_string(BlendState.AddRGB) == "AddRGB"
    assert enum_to_string(FlowType.END_0) == "END_0"
    assert enum_to_string(KeyValueType.KV128) == "KV128"
    assert enum_to_string(ObjectType.cGUIInstGauge) == "cGUIInstGauge"


def test_enum_to_string_special_members():
    assert enum_to_string(ObjectType.NONE) == "None"
    assert enum_to_string(KeyValueType.NONE) == "INVALID"
    assert enum_to_string(Alignment.NONE) == "INVALID"


@pytest.mark.parametrize("member", [ControlPoint.TL, ScalingType.FULL])
def test_enum_to_string_rejects_unsupported(member):
    with pytest.raises(TypeError):
        enum_to_string(member)


def test_enum_names_rejects_unindexed():
    with pytest.raises(TypeError):
        enum_names(ObjectType)
    with pytest.raises(TypeError):
        enum_names(KeyValueType)


def test_alignment_first_slot_unnamed():
    names = enum_names(Alignment)
    assert names[0] == "N/A"
    assert names[Alignment.RB] == "RB"
    assert len(names) == max(Alignment) + 1


def test_draw_pass_gaps():
    names = enum_names(DrawPass)
    assert names[DrawPass.USER_OFFSET] == "USER_OFFSET"
    assert len(names) == DrawPass.USER_OFFSET + 1
    assert all(names[i] == "N/A" for i in range(DrawPass.NUM + 1, DrawPass.USER_OFFSET))


def test_font_style_gaps():
    names = enum_names(FontStyle)
    values = {m.value for m in FontStyle}
    gaps = [i for i, name in enumerate(names) if name == "N/A"]
    assert gaps == [i for i in range(len(names)) if i not in values]
    assert names[FontStyle.MOJI_ORANGE_SELECTED2] == "MOJI_ORANGE_SELECTED2"


@pytest.mark.parametrize("enum_cls", [FontStyle, KeyMode, ParamType, BlendState, DrawPass])
def test_names_agree_with_enum_to_string(enum_cls):
    names = enum_names(enum_cls)
    for member in enum_cls:
        assert names[member] == enum_to_string(member)


def test_object_type_round_trip():
    for member in ObjectType:
        assert object_type_from_name(enum_to_string(member)) is member


def test_object_type_none_name():
    assert object_type_from_name("None") is ObjectType.NONE


def test_object_type_unknown_name():
    with pytest.raises(KeyError):
        object_type_from_name("cGUIObjDoesNotExist")