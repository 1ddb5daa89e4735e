"""
config.py

Responsibility: Load resolver options from a YAML file into a typed model.

Expected layout (every section optional):

    html:
      src_path: src/pages
      level: 1
      key_type: folderName   # or fileName
    js:
      src_path: src/pages
      file_name: main
      extensions: [js, jsx, ts, tsx]
      key_prefix: "js/"
      level: 1
    sprite:
      src_path: src/sprites

Relative `src_path` values are resolved against the config file's directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from entrykit.entries import DEFAULT_JS_EXTENSIONS, DEFAULT_JS_FILE_NAME, KeyType


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class HtmlOptions:
    src_path: str = ""
    level: int = 0
    key_type: KeyType = KeyType.FOLDER_NAME


@dataclass(frozen=True)
class JsOptions:
    src_path: str = ""
    file_name: str = DEFAULT_JS_FILE_NAME
    extensions: tuple[str, ...] = DEFAULT_JS_EXTENSIONS
    key_prefix: str = ""
    level: int = 0


@dataclass(frozen=True)
class SpriteOptions:
    src_path: str = ""


@dataclass(frozen=True)
class EntryConfig:
    """Options for each resolver; a section left out resolves nothing."""

    html: HtmlOptions | None = None
    js: JsOptions | None = None
    sprite: SpriteOptions | None = None
    base_dir: Path = field(default_factory=Path.cwd)


def _section(data: dict[str, Any], name: str) -> dict[str, Any] | None:
    raw = data.get(name)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigError(f"`{name}` must be an object/mapping when provided.")
    return raw


def _src_path(raw: dict[str, Any], base_dir: Path) -> str:
    value = str(raw.get("src_path") or "").strip()
    if not value:
        return ""
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _level(raw: dict[str, Any], name: str) -> int:
    level = raw.get("level", 0) or 0
    if level not in (0, 1):
        raise ConfigError(f"`{name}.level` must be 0 or 1, got {level!r}.")
    return int(level)


def parse_config(data: dict[str, Any], base_dir: Path) -> EntryConfig:
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping/object at the top level.")

    html = js = sprite = None

    raw = _section(data, "html")
    if raw is not None:
        try:
            key_type = KeyType(raw.get("key_type") or KeyType.FOLDER_NAME)
        except ValueError as e:
            raise ConfigError(f"`html.key_type` is invalid: {raw.get('key_type')!r}") from e
        html = HtmlOptions(src_path=_src_path(raw, base_dir), level=_level(raw, "html"), key_type=key_type)

    raw = _section(data, "js")
    if raw is not None:
        exts = raw.get("extensions")
        if exts is None:
            exts = list(DEFAULT_JS_EXTENSIONS)
        if not isinstance(exts, list):
            raise ConfigError("`js.extensions` must be a list when provided.")
        js = JsOptions(
            src_path=_src_path(raw, base_dir),
            file_name=str(raw.get("file_name") or DEFAULT_JS_FILE_NAME),
            extensions=tuple(str(e).lstrip(".") for e in exts),
            key_prefix=str(raw.get("key_prefix") or ""),
            level=_level(raw, "js"),
        )

    raw = _section(data, "sprite")
    if raw is not None:
        sprite = SpriteOptions(src_path=_src_path(raw, base_dir))

    return EntryConfig(html=html, js=js, sprite=sprite, base_dir=base_dir)


def load_config(config_path: str | Path) -> EntryConfig:
    """Read and parse a YAML config file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file does not exist: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e

    return parse_config(data, path.resolve().parent)
