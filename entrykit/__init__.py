"""
entrykit package

Helpers for bundler build configurations.

Key responsibilities are split across modules:
- `entries.py`: discover html / js / sprite entries by directory convention
- `filters.py`: narrow entries with glob patterns (explicit or `--entry`)
- `argvs.py`: parse the `--entry` flag from argv or npm's recorded command line
- `renderer.py`: copy project templates and fill `<% name %>` placeholders
- `reporter.py`: colored console status lines
- `webpack.py`: bundler config helpers (plugins, URL protocol)
- `config.py`: YAML configuration for the resolvers
- `cli.py`: CLI entrypoint
"""

from __future__ import annotations

from entrykit.argvs import get_argvs, get_npm_argvs
from entrykit.entries import Entry, KeyType, get_html_entry, get_js_entry, get_sprite_entry
from entrykit.filters import filter_html_file, filter_html_file_by_cmd, filter_js_file, filter_js_file_by_cmd
from entrykit.renderer import RenderError, TemplateExistsError, copy_template, walk_and_replace
from entrykit.reporter import error, info, log, success, warn
from entrykit.webpack import add_plugins, add_protocol

__all__ = [
    "__version__",
    "Entry",
    "KeyType",
    "RenderError",
    "TemplateExistsError",
    "add_plugins",
    "add_protocol",
    "copy_template",
    "error",
    "filter_html_file",
    "filter_html_file_by_cmd",
    "filter_js_file",
    "filter_js_file_by_cmd",
    "get_argvs",
    "get_html_entry",
    "get_js_entry",
    "get_npm_argvs",
    "get_sprite_entry",
    "info",
    "log",
    "success",
    "walk_and_replace",
    "warn",
]

__version__ = "0.1.0"
