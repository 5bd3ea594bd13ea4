"""Tests for the comment/string normalizer."""

from ts_analyzer.scanning.normalizer import PLACEHOLDER, normalize


class TestNormalize:
    def test_plain_code_unchanged(self):
        code = "const x = a && b;\nif (x) { run(); }\n"
        assert normalize(code) == code

    def test_removes_line_comments(self):
        out = normalize("const x = 1; // if (a) {}\nconst y = 2;")
        assert "if" not in out
        assert "const y = 2;" in out

    def test_removes_block_comments_across_lines(self):
        out = normalize("/*\n * function hidden() {}\n */\nfunction shown() {}")
        assert "hidden" not in out
        assert "shown" in out

    def test_replaces_quoted_strings(self):
        out = normalize("const a = 'if (x)'; const b = \"for (;;)\";")
        assert "if" not in out
        assert "for" not in out
        assert out.count(PLACEHOLDER) == 2

    def test_replaces_multiline_template_literals(self):
        out = normalize("const t = `line one\nwhile (true) {}\n`;\nconst z = 1;")
        assert "while" not in out
        assert "const z = 1;" in out

    def test_slashes_inside_template_are_not_comments(self):
        out = normalize("const url = `http://example.com`; if (ok) {}")
        assert "if (ok)" in out

    def test_quote_inside_block_comment_does_not_open_string(self):
        out = normalize("/* don't */ if (a) {} const s = 'x';")
        assert "if (a)" in out

    def test_empty_input(self):
        assert normalize("") == ""
