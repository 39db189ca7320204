"""The fixed-size header at the start of a GUI file.

Two layouts exist: the regular one, whose section offsets are 64-bit and
which ends in an explicit padding field, and the MHGU one, whose offsets are
32-bit. All values are little-endian; the revision date is a signed 64-bit
timestamp in both layouts.
"""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass, fields

__all__ = [
    "GuiHeader",
    "parse_gui_header",
    "MHW_HEADER_SIZE",
    "MHGU_HEADER_SIZE",
]

_LEADING_FIELDS = ("file_type", "gui_version", "file_size", "attr", "revision_date")

_COUNT_FIELDS = (
    "instance_id",
    "flow_id",
    "variable_id",
    "start_instance_index",
    "animation_num",
    "sequence_num",
    "object_num",
    "obj_sequence_num",
    "init_param_num",
    "param_num",
    "key_num",
    "instance_num",
    "flow_num",
    "flow_process_num",
    "flow_input_num",
    "flow_switch_num",
    "flow_function_num",
    "action_num",
    "input_condition_num",
    "switch_condition_num",
    "switch_operator_num",
    "variable_num",
    "texture_num",
    "font_num",
    "font_filter_num",
    "message_num",
    "gui_resource_num",
    "general_resource_num",
    "camera_setting_num",
    "inst_exe_param_num",
    "vertex_buffer_size",
    "option_bit_flag",
    "view_size_width",
    "view_size_height",
)

_OFFSET_FIELDS = (
    "start_flow_index",
    "animation_offset",
    "sequence_offset",
    "object_offset",
    "obj_sequence_offset",
    "init_param_offset",
    "param_offset",
    "instance_offset",
    "flow_offset",
    "flow_process_offset",
    "flow_input_offset",
    "flow_switch_offset",
    "flow_function_offset",
    "action_offset",
    "input_condition_offset",
    "switch_operator_offset",
    "switch_condition_offset",
    "variable_offset",
    "texture_offset",
    "font_offset",
    "font_filter_offset",
    "message_offset",
    "gui_resource_offset",
    "general_resource_offset",
    "camera_setting_offset",
    "string_offset",
    "key_offset",
    "key_value8_offset",
    "key_value32_offset",
    "key_value128_offset",
    "extend_data_offset",
    "inst_exe_param_offset",
    "vertex_offset",
)

_MHW_STRUCT = struct.Struct(
    f"<4s3Iq{len(_COUNT_FIELDS)}I{len(_OFFSET_FIELDS) + 1}Q"
)
# The MHGU layout keeps the 8-byte alignment of the timestamp, so it ends in
# four bytes of tail padding.
_MHGU_STRUCT = struct.Struct(
    f"<4s3Iq{len(_COUNT_FIELDS)}I{len(_OFFSET_FIELDS)}I4x"
)

MHW_HEADER_SIZE = _MHW_STRUCT.size
MHGU_HEADER_SIZE = _MHGU_STRUCT.size


def _layout(mhgu: bool) -> struct.Struct:
    return _MHGU_STRUCT if mhgu else _MHW_STRUCT


@dataclass
class GuiHeader:
    """All fields of a GUI file header.

    ``inst_exe_param_offset`` is stored in the slot the regular layout also
    uses as the instance parameter entry start index. ``padding`` only exists
    in the regular layout and is dropped when writing the MHGU one.
    """

    file_type: bytes = bytes(4)
    gui_version: int = 0
    file_size: int = 0
    attr: int = 0
    revision_date: int = 0

    instance_id: int = 0
    flow_id: int = 0
    variable_id: int = 0
    start_instance_index: int = 0
    animation_num: int = 0
    sequence_num: int = 0
    object_num: int = 0
    obj_sequence_num: int = 0
    init_param_num: int = 0
    param_num: int = 0
    key_num: int = 0
    instance_num: int = 0
    flow_num: int = 0
    flow_process_num: int = 0
    flow_input_num: int = 0
    flow_switch_num: int = 0
    flow_function_num: int = 0
    action_num: int = 0
    input_condition_num: int = 0
    switch_condition_num: int = 0
    switch_operator_num: int = 0
    variable_num: int = 0
    texture_num: int = 0
    font_num: int = 0
    font_filter_num: int = 0
    message_num: int = 0
    gui_resource_num: int = 0
    general_resource_num: int = 0
    camera_setting_num: int = 0
    inst_exe_param_num: int = 0
    vertex_buffer_size: int = 0
    option_bit_flag: int = 0
    view_size_width: int = 0
    view_size_height: int = 0

    start_flow_index: int = 0
    animation_offset: int = 0
    sequence_offset: int = 0
    object_offset: int = 0
    obj_sequence_offset: int = 0
    init_param_offset: int = 0
    param_offset: int = 0
    instance_offset: int = 0
    flow_offset: int = 0
    flow_process_offset: int = 0
    flow_input_offset: int = 0
    flow_switch_offset: int = 0
    flow_function_offset: int = 0
    action_offset: int = 0
    input_condition_offset: int = 0
    switch_operator_offset: int = 0
    switch_condition_offset: int = 0
    variable_offset: int = 0
    texture_offset: int = 0
    font_offset: int = 0
    font_filter_offset: int = 0
    message_offset: int = 0
    gui_resource_offset: int = 0
    general_resource_offset: int = 0
    camera_setting_offset: int = 0
    string_offset: int = 0
    key_offset: int = 0
    key_value8_offset: int = 0
    key_value32_offset: int = 0
    key_value128_offset: int = 0
    extend_data_offset: int = 0
    inst_exe_param_offset: int = 0
    vertex_offset: int = 0
    padding: int = 0

    @property
    def base_z(self) -> int:
        """Bits 0-1 of the option flags."""
        return self.option_bit_flag & 0b11

    @property
    def framerate_mode(self) -> int:
        """Bit 2 of the option flags."""
        return (self.option_bit_flag >> 2) & 0b1

    @property
    def language_setting_no(self) -> int:
        """Bits 3-4 of the option flags."""
        return (self.option_bit_flag >> 3) & 0b11

    def to_bytes(self, mhgu: bool = False) -> bytes:
        """Serialise the header in the regular or the MHGU layout.

        Raises ValueError if a field does not fit the chosen layout.
        """
        if len(self.file_type) != 4:
            raise ValueError(
                f"file type must be 4 bytes, got {len(self.file_type)}"
            )
        values = astuple(self)
        if mhgu:
            values = values[:-1]
        try:
            return _layout(mhgu).pack(*values)
        except struct.error as exc:
            layout = "MHGU" if mhgu else "regular"
            raise ValueError(f"header does not fit the {layout} layout: {exc}") from exc


_FIELD_NAMES = tuple(f.name for f in fields(GuiHeader))
assert _FIELD_NAMES == _LEADING_FIELDS + _COUNT_FIELDS + _OFFSET_FIELDS + ("padding",)


def parse_gui_header(data: bytes, mhgu: bool = False) -> GuiHeader:
    """Read a header from the start of ``data``; trailing bytes are ignored.

    Raises ValueError if ``data`` is shorter than the header.
    """
    layout = _layout(mhgu)
    if len(data) < layout.size:
        raise ValueError(
            f"GUI header needs {layout.size} bytes, got {len(data)}"
        )
    values = layout.unpack_from(data)
    return GuiHeader(**dict(zip(_FIELD_NAMES, values)))