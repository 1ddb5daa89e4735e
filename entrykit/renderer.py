"""
renderer.py

Responsibility: Copy a project template and fill its `<% name %>` placeholders.

Rules:
- Walk files in sorted order so rewrites happen in a stable sequence.
- Placeholders match case-insensitively, with exactly one space on each
  side of the name.
- Files are rewritten in place; read/write errors propagate as is and
  files already rewritten stay rewritten.

This module intentionally does NOT know about entries or CLI parsing.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
from pathlib import Path
from typing import Any, Mapping, Sequence

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    pass


class TemplateExistsError(RenderError, FileExistsError):
    """Destination of a template copy already exists."""


def _raise(err: OSError) -> None:
    raise err


def _iter_template_files(folder: Path) -> list[Path]:
    """
    Return all files under folder, in deterministic lexicographic order
    (relative path ordering). Unreadable directories raise.
    """
    files: list[Path] = []
    for root, _dirs, filenames in os.walk(folder, onerror=_raise):
        root_path = Path(root)
        for name in filenames:
            files.append(root_path / name)
    files.sort(key=lambda p: str(p.relative_to(folder)).replace(os.sep, "/"))
    return files


def _read_text(path: Path) -> str | None:
    """
    Read a file as UTF-8 keeping its line endings; None for binary files.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError:
        return None


def _placeholder(key: str) -> re.Pattern[str]:
    return re.compile("<% " + re.escape(key) + " %>", re.IGNORECASE)


def replace_placeholders(text: str, replace_obj: Mapping[str, Any]) -> str:
    """Substitute every `<% key %>` in text, one key at a time."""
    for key, value in replace_obj.items():
        replacement = str(value)
        text = _placeholder(key).sub(lambda _m: replacement, text)
    return text


def walk_and_replace(
    folder: str | Path,
    extensions: Sequence[str] | None = None,
    replace_obj: Mapping[str, Any] | None = None,
) -> list[Path]:
    """
    Rewrite placeholders in every file under folder.

    - extensions: allow-list including the dot (".html"); empty means all files.
    - Files that are not UTF-8 text are left untouched.
    - Returns the rewritten paths.
    """
    exts = list(extensions or [])
    table = dict(replace_obj or {})

    files = _iter_template_files(Path(folder))
    if exts:
        files = [p for p in files if p.suffix in exts]

    rewritten: list[Path] = []
    for path in files:
        content = _read_text(path)
        if content is None:
            logger.debug("skipped binary file %s", path)
            continue
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(replace_placeholders(content, table))
        rewritten.append(path)
        logger.debug("rewrote %s", path)

    return rewritten


def copy_template(src_folder: str | Path, dest_folder: str | Path) -> Path:
    """
    Copy src_folder to dest_folder.

    Refuses (TemplateExistsError) when dest_folder already exists.
    """
    dst = Path(dest_folder)
    if dst.exists():
        raise TemplateExistsError(f"{dest_folder} exists")

    shutil.copytree(src_folder, dst)
    logger.debug("copied template %s -> %s", src_folder, dst)
    return dst
