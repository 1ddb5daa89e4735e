"""
test_cli.py - entrykit command line
"""

import json
from pathlib import Path

from entrykit.cli import main


class TestEntriesCommand:
    def test_prints_filtered_entries(self, tmp_path: Path, pages_dir: Path, touch, capsys):
        config = touch(
            tmp_path / "entrykit.yaml",
            f"html:\n  src_path: {pages_dir.name}\n  level: 1\n"
            f"js:\n  src_path: {pages_dir.name}\n  level: 1\n",
        )

        assert main(["entries", "--config", str(config), "--entry", "user"]) == 0

        out = json.loads(capsys.readouterr().out)
        assert [e["key"] for e in out["html"]] == ["user"]
        assert list(out["js"]) == ["user"]
        assert "sprite" not in out

    def test_missing_config(self, tmp_path: Path, capsys):
        assert main(["entries", "--config", str(tmp_path / "none.yaml")]) == 1
        assert "does not exist" in capsys.readouterr().out


class TestReplaceCommand:
    def test_rewrites(self, tmp_path: Path, touch, capsys):
        touch(tmp_path / "site" / "index.html", "<% TITLE %>")

        assert main(["replace", str(tmp_path / "site"), "--ext", ".html", "--set", "TITLE=Home"]) == 0

        assert (tmp_path / "site" / "index.html").read_text(encoding="utf-8") == "Home"
        assert "Rewrote 1 file(s)" in capsys.readouterr().out

    def test_missing_root(self, tmp_path: Path, capsys):
        assert main(["replace", str(tmp_path / "nope"), "--set", "A=b"]) == 1
        assert "nope" in capsys.readouterr().out

    def test_bad_assignment(self, tmp_path: Path, capsys):
        assert main(["replace", str(tmp_path), "--set", "TITLE"]) == 1
        assert "KEY=VALUE" in capsys.readouterr().out


class TestCopyCommand:
    def test_copy_and_fill(self, tmp_path: Path, touch):
        touch(tmp_path / "tpl" / "package.json", '{"name": "<% name %>"}')
        dest = tmp_path / "app"

        assert main(["copy", str(tmp_path / "tpl"), str(dest), "--set", "name=app"]) == 0

        assert (dest / "package.json").read_text(encoding="utf-8") == '{"name": "app"}'

    def test_existing_destination(self, tmp_path: Path, capsys):
        (tmp_path / "tpl").mkdir()
        (tmp_path / "app").mkdir()

        assert main(["copy", str(tmp_path / "tpl"), str(tmp_path / "app")]) == 1
        assert "exists" in capsys.readouterr().out
