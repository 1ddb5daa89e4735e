"""
webpack.py

Responsibility: Small helpers for mutating a bundler configuration mapping.
"""

from __future__ import annotations

from typing import Any, MutableMapping


def add_plugins(conf: MutableMapping[str, Any], plugin: Any) -> MutableMapping[str, Any]:
    """
    Append an already-built plugin instance to `conf["plugins"]`.

    The plugin is opaque here; construct it before calling.
    """
    conf.setdefault("plugins", []).append(plugin)
    return conf


def add_protocol(url: str) -> str:
    """Prefix protocol-relative URLs (`//host/x.js`) with `http:`."""
    if "http:" in url or "https:" in url:
        return url
    return "http:" + url
