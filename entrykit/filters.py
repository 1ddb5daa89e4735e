"""
filters.py

Responsibility: Narrow resolved entries with glob patterns.

A key is kept when any pattern matches it (shell-style, case sensitive).
Keys are path-like: `*`, `?` and `[...]` stay inside one `/` segment, `**`
spans segments. No patterns means no filtering.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Mapping, Sequence, TypeVar

from entrykit.argvs import get_npm_argvs, split_entry
from entrykit.entries import Entry

V = TypeVar("V")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    """
    Translate a glob pattern into an anchored regular expression.
    """
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if pattern.startswith("**/", i):
            # `a/**/b` also matches `a/b`
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif c == "*":
            out.append("[^/]*")
            i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                out.append(re.escape(c))
                i += 1
                continue
            body = pattern[i + 1 : end].replace("\\", "\\\\")
            if body[0] in "!^":
                out.append("(?!/)[^" + body[1:] + "]")
            else:
                out.append("(?!/)[" + body + "]")
            i = end + 1
        else:
            out.append(re.escape(c))
            i += 1
    return re.compile("".join(out), re.DOTALL)


def _matches(key: str, patterns: Sequence[str]) -> bool:
    return any(_compile(pattern).fullmatch(key) for pattern in patterns)


def filter_js_file(js_files: Mapping[str, V], patterns: Sequence[str] | None) -> Mapping[str, V]:
    if not patterns:
        return js_files
    return {key: value for key, value in js_files.items() if _matches(key, patterns)}


def filter_html_file(html_files: Sequence[Entry], patterns: Sequence[str] | None) -> Sequence[Entry]:
    if not patterns:
        return html_files
    return [entry for entry in html_files if _matches(entry.key, patterns)]


def filter_js_file_by_cmd(
    js_files: Mapping[str, V], argvs: Mapping[str, Any] | None = None
) -> Mapping[str, V]:
    """
    Filter with the `--entry` value of parsed arguments.

    argvs defaults to the npm-recorded command line.
    """
    if argvs is None:
        argvs = get_npm_argvs()
    return filter_js_file(js_files, split_entry(argvs))


def filter_html_file_by_cmd(
    html_files: Sequence[Entry], argvs: Mapping[str, Any] | None = None
) -> Sequence[Entry]:
    if argvs is None:
        argvs = get_npm_argvs()
    return filter_html_file(html_files, split_entry(argvs))
