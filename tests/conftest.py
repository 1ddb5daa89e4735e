"""
Shared filesystem fixtures.
"""

from pathlib import Path

import pytest


def _touch(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def touch():
    """Create a file (and its parents) with optional text."""
    return _touch


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """
    src/pages layout:
    - index.html, about.html, readme.md   (level 0)
    - home/index.html, home/main.js        (level 1)
    - user/index.html, user/main.ts
    """
    root = tmp_path / "pages"
    _touch(root / "index.html")
    _touch(root / "about.html")
    _touch(root / "readme.md")
    _touch(root / "home" / "index.html")
    _touch(root / "home" / "main.js")
    _touch(root / "user" / "index.html")
    _touch(root / "user" / "main.ts")
    return root
