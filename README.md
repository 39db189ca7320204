# mhwgui

Building blocks for working with GUI layout files and the TEX textures they
use: the format's enumerations, the file header, the key-value and string
pools, rich-text labels, editor paths, editor settings and texture decoding.

## Installation

```
pip install mhwgui
```

For running the tests:

```
pip install "mhwgui[test]"
pytest
```

## Modules

- `mhwgui.gui_types`: `IntEnum`s used by the format, such as `ObjectType`,
  `ParamType`, `BlendState`, `SamplerMode`, `KeyMode`, `DrawPass`,
  `KeyValueType` and `FontStyle`.
- `mhwgui.names`:
  - `enum_to_string(value)` gives a member's display name, `"INVALID"` for
    members without one (`KeyValueType.NONE`, `Alignment.NONE`), and raises
    `TypeError` for enumerations that have no display names.
  - `enum_names(enum_cls)` gives a tuple of names indexed by value, with
    `"N/A"` in the gaps.
  - `object_type_from_name(name)` maps a name back to an `ObjectType`,
    raising `KeyError` if unknown.
- `mhwgui.header`: `parse_gui_header(data, mhgu=False)` reads the fixed-size
  file header into a `GuiHeader` (regular layout with 64-bit offsets, or the
  MHGU layout with 32-bit offsets); `GuiHeader.to_bytes(mhgu=False)` writes it
  back. Both raise `ValueError` when the data does not fit. The option flags
  are exposed as `base_z`, `framerate_mode` and `language_setting_no`.
- `mhwgui.keyvalues`: `KeyValueBuffers` holds the 8-bit, 32-bit and 128-bit
  value pools. `insert8`, `insert8_many`, `insert32`, `insert32_float`,
  `insert32_many`, `insert64`, `insert64_many`, `insert128` and
  `insert128_many` return the byte offset of what was stored. With the flags
  of `KeyValueConfig` set, an equal value or run already in the pool is
  reused instead of appended; `insert32_many`, `insert128` and
  `insert128_many` follow the `multiple_kv8_refs` flag.
- `mhwgui.stringbuffer`: `StringBuffer`, a table of null-terminated strings.
  `append`, `append_raw` and `append_no_duplicate` return byte offsets;
  `find` returns the offset of a whole string or `None`.
- `mhwgui.richtext`: `parse_rich_text(text, default_color)` splits text marked
  up with `<B>`, `<I>`, `<U>`, `<S>` and nested `<C RRGGBBAA>` tags into
  `TaggedText` runs. Unknown tags stay as literal text; unbalanced or
  unterminated colour tags raise `RichTextError`.
- `mhwgui.editorpath`: `parse_editor_path(path)` reads paths such as
  `Objects:i:3/Params:n:Width` into a chain of `EditorPath` elements. The
  accessor is `i` (decimal index), `x` (hexadecimal id) or `n` (name);
  malformed paths raise `EditorPathError`.
- `mhwgui.settings`: `Settings` with `load()` and `save()` for the editor's
  TOML settings file (`Config.toml` in the working directory by default, or
  the `path` given). A default file is written when none exists; read or
  write failures raise `SettingsError`.
- `mhwgui.texture`: `read_texture(data)` reads a TEX file, regular or MHGU
  (whose block-linear pixels are deswizzled), into a `Texture`;
  `Texture.to_dds()` returns the bytes of a DDS file. Helpers
  `convert_format`, `format_to_fourcc`, `make_fourcc`, `is_4bpp`, `is_16bpp`
  and `get_block_size` are available too. Bad files raise `TextureError`.

## Examples

```python
from mhwgui.stringbuffer import StringBuffer

strings = StringBuffer()
first = strings.append_no_duplicate("root")
again = strings.append_no_duplicate("root")
assert first == again == 0
```

```python
from mhwgui.richtext import parse_rich_text

for run in parse_rich_text("plain <B>bold</B> <C FF0000FF>red</C>", 0xFFFFFFFF):
    print(run.text, run.bold, hex(run.color))
```

```python
from mhwgui.editorpath import parse_editor_path

path = parse_editor_path("Objects:i:3/Params:n:Width")
print(path.category, path.value, path.child.value)
```

```python
from pathlib import Path
from mhwgui.texture import read_texture

texture = read_texture(Path("icon.tex").read_bytes())
Path("icon.dds").write_bytes(texture.to_dds())
```

## What it does not do

This is a library only. It has no editor window, no rendering or texture
display, and no command-line tool. Of a GUI file it reads and writes only the
header; the sections the header points to are not parsed.