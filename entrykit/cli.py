"""
cli.py

Responsibility: CLI entrypoint for entrykit.

Commands:
- `entries`: resolve html/js/sprite entries from a YAML config, filter by
  `--entry`, print JSON
- `replace`: fill `<% name %>` placeholders in a directory tree
- `copy`: copy a template directory, then optionally fill its placeholders

This module should orchestrate behavior but keep concerns isolated:
- Config: `config.py`
- Resolving / filtering: `entries.py`, `filters.py`
- Rewriting / copying: `renderer.py`
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from entrykit import reporter
from entrykit.argvs import get_argvs
from entrykit.config import ConfigError, load_config
from entrykit.entries import get_html_entry, get_js_entry, get_sprite_entry
from entrykit.filters import filter_html_file_by_cmd, filter_js_file_by_cmd
from entrykit.renderer import RenderError, copy_template, walk_and_replace


class CLIError(RuntimeError):
    pass


def _parse_assignments(pairs: list[str] | None) -> dict[str, str]:
    """
    Parse `KEY=VALUE` strings into a replacement table.
    """
    table: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise CLIError(f"Expected KEY=VALUE, got: {pair!r}")
        table[key.strip()] = value
    return table


def entries_cmd(args: argparse.Namespace) -> int:
    conf = load_config(args.config)
    # Only the parsed --entry value flows into the filters.
    argvs: dict[str, Any] = get_argvs(["--entry", args.entry]) if args.entry else {}

    result: dict[str, Any] = {}
    if conf.html is not None:
        html = get_html_entry(src_path=conf.html.src_path, level=conf.html.level, key_type=conf.html.key_type)
        result["html"] = [e.to_dict() for e in filter_html_file_by_cmd(html, argvs)]
    if conf.js is not None:
        js = get_js_entry(
            src_path=conf.js.src_path,
            file_name=conf.js.file_name,
            extensions=conf.js.extensions,
            key_prefix=conf.js.key_prefix,
            level=conf.js.level,
        )
        result["js"] = dict(filter_js_file_by_cmd(js, argvs))
    if conf.sprite is not None:
        result["sprite"] = [e.to_dict() for e in get_sprite_entry(src_path=conf.sprite.src_path)]

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def replace_cmd(args: argparse.Namespace) -> int:
    table = _parse_assignments(args.set)
    files = walk_and_replace(args.root, args.ext, table)
    reporter.success(f"Rewrote {len(files)} file(s) in {args.root}")
    return 0


def copy_cmd(args: argparse.Namespace) -> int:
    table = _parse_assignments(args.set)
    dest = copy_template(args.src, args.dest)
    reporter.success(f"Copied {args.src} -> {dest}")
    if table:
        files = walk_and_replace(dest, args.ext, table)
        reporter.info(f"Rewrote {len(files)} file(s)")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="entrykit", description="Entry discovery and template helpers for build configs")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    e = sub.add_parser("entries", help="Resolve entries from a YAML config and print them as JSON")
    e.add_argument("--config", default="entrykit.yaml", help="Config file (default: entrykit.yaml)")
    e.add_argument("--entry", default=None, help="Comma separated glob patterns selecting entry keys")
    e.set_defaults(func=entries_cmd)

    r = sub.add_parser("replace", help="Replace <% name %> placeholders in a directory tree")
    r.add_argument("root", help="Directory to rewrite in place")
    r.add_argument("--ext", action="append", default=None, help="Only rewrite files with this extension, e.g. .html")
    r.add_argument("--set", action="append", default=None, metavar="KEY=VALUE", help="Placeholder value")
    r.set_defaults(func=replace_cmd)

    c = sub.add_parser("copy", help="Copy a template directory to a new destination")
    c.add_argument("src", help="Template directory")
    c.add_argument("dest", help="Destination directory (must not exist)")
    c.add_argument("--ext", action="append", default=None, help="Only rewrite files with this extension")
    c.add_argument("--set", action="append", default=None, metavar="KEY=VALUE", help="Placeholder value")
    c.set_defaults(func=copy_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except (CLIError, ConfigError, RenderError, OSError) as e:
        reporter.error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
