"""
entries.py

Responsibility: Discover build entry files on disk by directory convention.

Rules:
- A missing source directory is "no entries", never an error.
- Directory listings are sorted by name so tie-breaks are reproducible.
- Level 0 looks at the source directory itself; level 1 looks one
  subdirectory deeper.

This module does not filter entries; see `filters.py`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

DEFAULT_JS_FILE_NAME = "main"
DEFAULT_JS_EXTENSIONS: tuple[str, ...] = ("js", "jsx", "ts", "tsx")


class KeyType(str, Enum):
    """How HTML entry keys are derived."""

    FOLDER_NAME = "folderName"
    FILE_NAME = "fileName"


@dataclass(frozen=True)
class Entry:
    """A build input: derived key plus the file (or folder) path."""

    key: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "path": self.path}


def _list_dir(path: str | Path) -> list[str]:
    return sorted(os.listdir(path))


def _list_subdirs(path: str | Path) -> list[str]:
    return [name for name in _list_dir(path) if os.path.isdir(os.path.join(path, name))]


def _html_entries(src_path: str, names: Sequence[str], key_type: KeyType, folder: str = "") -> list[Entry]:
    entries: list[Entry] = []
    for name in names:
        if not name.endswith(".html"):
            continue
        file_key = name[: -len(".html")]
        key = file_key if key_type is KeyType.FILE_NAME else (folder or file_key)
        entries.append(Entry(key=key, path=os.path.join(src_path, folder, name)))
    return entries


def get_html_entry(
    *,
    src_path: str | Path = "",
    level: int = 0,
    key_type: KeyType | str = KeyType.FOLDER_NAME,
) -> list[Entry]:
    """
    Return HTML entries under src_path.

    - level 0: `<src>/<name>.html`, key is `<name>`.
    - level 1: `<src>/<folder>/<name>.html`, key is `<folder>` (or `<name>`
      with key_type "fileName"). Several pages in one folder produce several
      entries sharing the folder key.
    """
    src = str(src_path)
    key_type = KeyType(key_type)
    if not src or not os.path.exists(src):
        logger.debug("html source %r not found, no entries", src)
        return []

    entries: list[Entry] = []
    if level:
        for folder in _list_subdirs(src):
            entries.extend(_html_entries(src, _list_dir(os.path.join(src, folder)), key_type, folder))
    else:
        files = [name for name in _list_dir(src) if os.path.isfile(os.path.join(src, name))]
        entries.extend(_html_entries(src, files, key_type))

    logger.debug("resolved %d html entries from %s", len(entries), src)
    return entries


def get_sprite_entry(*, src_path: str | Path = "") -> list[Entry]:
    """
    Return one entry per extension-less name directly under src_path.

    Only the first level matters; each such name groups the sprite images
    inside it.
    """
    src = str(src_path)
    if not src or not os.path.exists(src):
        logger.debug("sprite source %r not found, no entries", src)
        return []

    entries = [Entry(key=name, path=os.path.join(src, name)) for name in _list_dir(src) if "." not in name]
    logger.debug("resolved %d sprite entries from %s", len(entries), src)
    return entries


def get_js_entry(
    *,
    src_path: str | Path = "",
    file_name: str = DEFAULT_JS_FILE_NAME,
    extensions: Sequence[str] | None = None,
    key_prefix: str = "",
    level: int = 0,
) -> dict[str, list[str]]:
    """
    Return a mapping of entry key to a one-element list with the script path.

    - level 0: checks `<src>/<file_name>.<ext>` for every extension; every
      existing one overwrites the key, so the last existing extension wins.
    - level 1: checks `<src>/<item>/<file_name>.<ext>` for every listed item;
      the first existing extension per item sets `<key_prefix><item>`.
    """
    src = str(src_path)
    exts = list(DEFAULT_JS_EXTENSIONS if extensions is None else extensions)
    js_files: dict[str, list[str]] = {}

    if not src or not os.path.exists(src):
        logger.debug("js source %r not found, no entries", src)
        return js_files

    if level:
        # Every listed item is probed; plain files never match since
        # `<file>/<file_name>.<ext>` cannot exist.
        for item in _list_dir(src):
            key = key_prefix + item
            for ext in exts:
                js_path = os.path.join(src, item, f"{file_name}.{ext}")
                if os.path.exists(js_path) and key not in js_files:
                    js_files[key] = [js_path]
    else:
        for ext in exts:
            js_path = os.path.join(src, f"{file_name}.{ext}")
            if os.path.exists(js_path):
                js_files[key_prefix + file_name] = [js_path]

    logger.debug("resolved %d js entries from %s", len(js_files), src)
    return js_files
