"""
test_filters.py - glob filtering of resolved entries
"""

from entrykit.entries import Entry
from entrykit.filters import filter_html_file, filter_html_file_by_cmd, filter_js_file, filter_js_file_by_cmd

HTML = [Entry("home", "/p/home/index.html"), Entry("user", "/p/user/index.html"), Entry("help", "/p/help/index.html")]


class TestFilterJsFile:
    def test_prefix_pattern(self):
        assert filter_js_file({"a": 1, "b": 2, "abc": 3}, ["a*"]) == {"a": 1, "abc": 3}

    def test_patterns_are_ored(self):
        assert filter_js_file({"a": 1, "b": 2, "c": 3}, ["a", "c"]) == {"a": 1, "c": 3}

    def test_no_patterns_returns_input(self):
        files = {"a": 1}
        assert filter_js_file(files, []) is files
        assert filter_js_file(files, None) is files

    def test_path_like_keys(self):
        files = {"js/home": 1, "js/user/profile": 2, "css/home": 3}
        assert filter_js_file(files, ["js/**"]) == {"js/home": 1, "js/user/profile": 2}

    def test_question_mark_and_class(self):
        assert filter_js_file({"p1": 1, "p2": 2, "p10": 3}, ["p[12]"]) == {"p1": 1, "p2": 2}
        assert filter_js_file({"p1": 1, "p10": 3}, ["p?"]) == {"p1": 1}


class TestFilterHtmlFile:
    def test_keeps_order(self):
        assert filter_html_file(HTML, ["h*"]) == [HTML[0], HTML[2]]

    def test_no_match(self):
        assert filter_html_file(HTML, ["zzz"]) == []

    def test_no_patterns_returns_input(self):
        assert filter_html_file(HTML, []) is HTML


class TestByCmd:
    def test_js_by_explicit_argvs(self):
        assert filter_js_file_by_cmd({"a": 1, "b": 2}, {"entry": "b"}) == {"b": 2}

    def test_html_by_explicit_argvs(self):
        assert filter_html_file_by_cmd(HTML, {"entry": "home,user"}) == HTML[:2]

    def test_absent_entry_is_no_filter(self):
        files = {"a": 1}
        assert filter_js_file_by_cmd(files, {}) is files
        assert filter_html_file_by_cmd(HTML, {"other": "x"}) is HTML

    def test_falls_back_to_npm_argv(self, monkeypatch):
        monkeypatch.setenv("npm_config_argv", '{"original": ["run", "build", "--entry=user"]}')
        assert filter_html_file_by_cmd(HTML) == [HTML[1]]
        assert filter_js_file_by_cmd({"user": 1, "home": 2}) == {"user": 1}

    def test_npm_argv_unset(self, monkeypatch):
        monkeypatch.delenv("npm_config_argv", raising=False)
        assert filter_html_file_by_cmd(HTML) is HTML


class TestGlobSegments:
    """`*` stays inside one `/` segment, `**` crosses them."""

    def test_star_does_not_cross_slash(self):
        assert filter_js_file({"js/home": 1, "home": 2}, ["*"]) == {"home": 2}

    def test_prefix_star_one_level(self):
        files = {"js/home": 1, "js/user/profile": 2}
        assert filter_js_file(files, ["js/*"]) == {"js/home": 1}

    def test_globstar_middle(self):
        files = {"js/home": 1, "js/user/home": 2, "css/home": 3}
        assert filter_js_file(files, ["js/**/home"]) == {"js/home": 1, "js/user/home": 2}

    def test_question_mark_does_not_match_slash(self):
        assert filter_js_file({"a/b": 1, "axb": 2}, ["a?b"]) == {"axb": 2}

    def test_negated_class(self):
        assert filter_js_file({"p1": 1, "p2": 2, "p/": 3}, ["p[!1]"]) == {"p2": 2}

    def test_literal_regex_characters(self):
        assert filter_js_file({"a.b": 1, "axb": 2, "a+": 3}, ["a.b", "a+"]) == {"a.b": 1, "a+": 3}

    def test_unclosed_bracket_is_literal(self):
        assert filter_js_file({"a[b": 1, "ab": 2}, ["a[b"]) == {"a[b": 1}
