"""Enums, header, key-value and string pools, rich text, editor paths, settings and TEX textures for GUI layout files."""

__version__ = "0.1.0"

__all__ = [
    "editorpath",
    "gui_types",
    "header",
    "keyvalues",
    "names",
    "richtext",
    "settings",
    "stringbuffer",
    "texture",
]