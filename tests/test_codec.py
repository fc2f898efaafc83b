"""Tests for the properties codec."""

import pytest

from propedit import codec


class TestLoads:
    def test_separators(self):
        text = "a=1\nb = 2\nc:3\nd 4\n"
        assert codec.loads(text) == {"a": "1", "b": "2", "c": "3", "d": "4"}

    def test_comments_and_blank_lines(self):
        text = "# comment\n! also a comment\n\n   \n  e=5\n"
        assert codec.loads(text) == {"e": "5"}

    def test_key_without_value(self):
        assert codec.loads("alone\n") == {"alone": ""}

    def test_crlf_line_endings(self):
        assert codec.loads("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    def test_continuation_line(self):
        text = "key=one \\\n    two\n"
        assert codec.loads(text) == {"key": "one two"}

    def test_even_backslashes_do_not_continue(self):
        text = "path=c:\\\\\nnext=1\n"
        assert codec.loads(text) == {"path": "c:\\", "next": "1"}

    def test_comment_marker_inside_continuation(self):
        text = "k=a\\\n#b\n"
        assert codec.loads(text) == {"k": "a#b"}

    def test_escaped_separator_in_key(self):
        assert codec.loads("a\\=b=c\n") == {"a=b": "c"}

    def test_escaped_space_in_key(self):
        assert codec.loads("my\\ key = v\n") == {"my key": "v"}

    def test_control_escapes(self):
        assert codec.loads("k=a\\tb\\nc\n") == {"k": "a\tb\nc"}

    def test_unicode_escape(self):
        assert codec.loads("k=caf\\u00e9\n") == {"k": "café"}

    def test_surrogate_pair(self):
        assert codec.loads("k=\\uD83D\\uDE00\n") == {"k": "\U0001F600"}

    def test_lone_surrogate_kept(self):
        assert codec.loads("k=\\uDC80\nother=kept\n") == {"k": "\udc80", "other": "kept"}

    def test_malformed_unicode_escape(self):
        with pytest.raises(ValueError, match="Malformed"):
            codec.loads("k=\\u12\n")

    def test_later_duplicate_wins(self):
        assert codec.loads("k=1\nk=2\n") == {"k": "2"}


class TestDumps:
    def test_simple(self):
        assert codec.dumps({"a": "1", "b": "2"}, timestamp=False) == "a=1\nb=2\n"

    def test_empty(self):
        assert codec.dumps({}, timestamp=False) == ""

    def test_spaces(self):
        text = codec.dumps({"key with space": " lead and inner"}, timestamp=False)
        assert text == "key\\ with\\ space=\\ lead and inner\n"

    def test_special_characters(self):
        text = codec.dumps({"x": "a=b:c#d!e\\f"}, timestamp=False)
        assert text == "x=a\\=b\\:c\\#d\\!e\\\\f\n"

    def test_newline_in_value(self):
        assert codec.dumps({"k": "a\nb"}, timestamp=False) == "k=a\\nb\n"

    def test_non_ascii(self):
        assert codec.dumps({"k": "é"}, timestamp=False) == "k=\\u00E9\n"

    def test_astral_character(self):
        text = codec.dumps({"k": "\U0001F600"}, timestamp=False)
        assert text == "k=\\uD83D\\uDE00\n"

    def test_comments(self):
        text = codec.dumps({}, comments="hello\n!bang", timestamp=False)
        assert text == "#hello\n!bang\n"

    def test_timestamp_line(self):
        lines = codec.dumps({"a": "1"}).splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("#")
        assert lines[1] == "a=1"

    def test_output_reads_back(self):
        entries = {
            "plain": "value",
            " lead": "  spaced  ",
            "sep=:": "#!\\",
            "multi": "line\none\r\ttab",
            "uni": "naïve \U0001F600",
            "empty": "",
        }
        assert codec.loads(codec.dumps(entries)) == entries


class TestFiles:
    def test_dump_and_load(self, workdir):
        path = workdir / "app.properties"
        codec.dump({"k": "v"}, path)
        assert codec.load(path) == {"k": "v"}

    def test_dump_replaces_contents(self, workdir):
        path = workdir / "app.properties"
        codec.dump({"old": "1"}, path)
        codec.dump({"new": "2"}, path)
        assert codec.load(path) == {"new": "2"}

    def test_load_missing_file(self, workdir):
        with pytest.raises(FileNotFoundError):
            codec.load(workdir / "missing.properties")
