"""
argvs.py

Responsibility: Turn command-line input into the `entry` filter value.

Two sources are supported:
- an explicit argument vector (or `sys.argv`)
- the original command line npm records in `npm_config_argv`
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, Mapping, NoReturn, Sequence

NPM_ARGV_ENV = "npm_config_argv"


class _ArgvParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ValueError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgvParser(add_help=False, allow_abbrev=False)
    p.add_argument("--entry", default=None)
    return p


def get_argvs(argv: Sequence[str] | None = None) -> dict[str, Any]:
    """
    Parse an argument vector into `{flag: value}`.

    Unknown arguments are ignored, so a full `npm run build -- --entry x`
    vector can be passed as is. A malformed vector parses as empty.
    """
    args = list(sys.argv if argv is None else argv)
    try:
        known, _rest = _build_parser().parse_known_args(args)
    except ValueError:
        return {}
    return {k: v for k, v in vars(known).items() if v is not None}


def get_npm_argvs(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Parse the npm-recorded command line (`npm_config_argv` -> `original`).

    Missing or malformed data parses as an empty command line.
    """
    env = os.environ if environ is None else environ
    raw = env.get(NPM_ARGV_ENV) or "{}"
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        data = {}

    original = data.get("original") if isinstance(data, dict) else None
    if not isinstance(original, list):
        original = []
    return get_argvs([str(a) for a in original])


def split_entry(argvs: Mapping[str, Any] | None) -> list[str]:
    """Return the comma separated `entry` value as a pattern list."""
    if not argvs:
        return []
    value = argvs.get("entry")
    if not value or not isinstance(value, str):
        return []
    return [p for p in value.split(",") if p]
