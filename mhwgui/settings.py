"""Editor settings stored in a TOML file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w

__all__ = ["Settings", "SettingsError", "DEFAULT_SETTINGS_FILE"]

DEFAULT_SETTINGS_FILE = "Config.toml"


class SettingsError(Exception):
    """Raised when the settings file cannot be read or written."""


def _lookup(doc: dict[str, Any], *keys: str) -> Any:
    node: Any = doc
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def _str(doc: dict[str, Any], *keys: str) -> str:
    value = _lookup(doc, *keys)
    return value if isinstance(value, str) else ""


def _bool(doc: dict[str, Any], *keys: str) -> bool:
    value = _lookup(doc, *keys)
    return value if isinstance(value, bool) else False


@dataclass
class Settings:
    """Editor settings. A default file is written if none exists yet."""

    chunk_path: str = ""
    native_path: str = ""
    arcfs_path: str = ""
    theme: str = ""
    allow_multiple_kv8_references: bool = False
    allow_multiple_kv32_references: bool = False
    allow_multiple_kv128_references: bool = False
    auto_adjust_key_frames: bool = False
    path: Path = field(default=Path(DEFAULT_SETTINGS_FILE))

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        if not self.path.exists():
            self.save()

    def load(self) -> None:
        """Read the settings file; missing or mistyped entries get defaults."""
        try:
            with self.path.open("rb") as fh:
                doc = tomllib.load(fh)
        except (OSError, ValueError) as exc:
            raise SettingsError(f"cannot read settings from {self.path}: {exc}") from exc

        self.chunk_path = _str(doc, "General", "ChunkDirectory")
        self.native_path = _str(doc, "General", "NativeDirectory")
        self.arcfs_path = _str(doc, "General", "ArcfsDirectory")
        self.theme = _str(doc, "General", "Theme")

        refs = ("Optimization", "AllowMultipleReferences")
        self.allow_multiple_kv8_references = _bool(doc, *refs, "KV8")
        self.allow_multiple_kv32_references = _bool(doc, *refs, "KV32")
        self.allow_multiple_kv128_references = _bool(doc, *refs, "KV128")

        self.auto_adjust_key_frames = _bool(doc, "Utility", "AutoAdjustKeyFrames")

    def save(self) -> None:
        """Write the settings file."""
        config = {
            "General": {
                "ChunkDirectory": self.chunk_path,
                "NativeDirectory": self.native_path,
                "ArcfsDirectory": self.arcfs_path,
                "Theme": self.theme,
            },
            "Optimization": {
                "AllowMultipleReferences": {
                    "KV8": self.allow_multiple_kv8_references,
                    "KV32": self.allow_multiple_kv32_references,
                    "KV128": self.allow_multiple_kv128_references,
                }
            },
            "Utility": {"AutoAdjustKeyFrames": self.auto_adjust_key_frames},
        }
        try:
            self.path.write_text(tomli_w.dumps(config), encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"cannot write settings to {self.path}: {exc}") from exc