"""Tests for the JavaScript lexical helpers and the SourceFile model."""
from __future__ import annotations
import textwrap
from guidelint.parsing.js_scanner import (
    find_comments, iter_parameter_lists, mask_source, matching_brace, bracket_pairs, split_statements,
)
from tests.conftest import make_source


def _statements(body: str) -> list[str]:
    masked = mask_source(body)
    return [masked[s:e] for s, e in split_statements(masked, 0, len(masked))]


class TestMaskSource:
    def test_preserves_length_and_newlines(self) -> None:
        text = 'const a = "x // y";\n// note\nconst b = 1;'
        masked = mask_source(text)
        assert len(masked) == len(text)
        assert masked.count("\n") == text.count("\n")
        assert masked.splitlines()[2] == "const b = 1;"

    def test_blanks_string_contents_but_keeps_quotes(self) -> None:
        assert mask_source('x = "a || b";') == 'x = "      ";'

    def test_blanks_comments(self) -> None:
        assert mask_source("a(); /* function b() {} */").strip() == "a();"

    def test_regex_literal_is_masked_but_division_is_not(self) -> None:
        masked = mask_source("const re = /a{2}/g;\nconst n = 4 / 2;")
        first, second = masked.splitlines()
        assert "{" not in first
        assert second == "const n = 4 / 2;"

    def test_multiline_template_keeps_line_count(self) -> None:
        text = "const s = `line one\n${value}\nline three`;\nrun();"
        masked = mask_source(text)
        assert masked.count("\n") == 3
        assert "value" not in masked
        assert masked.endswith("run();")

    def test_jsx_apostrophe_masks_rest_of_line(self) -> None:
        masked = mask_source("const A = () => <p>Don't {x ?? 1}</p>;\nconst b = 1;")
        first, second = masked.splitlines()
        assert "??" not in first and second == "const b = 1;"


class TestFindComments:
    def test_line_and_block_comments(self) -> None:
        text = "// heading\nconst a = 1; // trailing\n/* block\n comment */\n"
        comments = find_comments(text)
        assert [(c.kind, c.line, c.own_line) for c in comments] == [
            ("line", 1, True), ("line", 2, False), ("block", 3, True),
        ]
        assert comments[0].text == "heading"

    def test_comment_markers_inside_strings_are_ignored(self) -> None:
        assert find_comments('const url = "http://example.com";') == []


class TestBrackets:
    def test_matching_brace(self) -> None:
        text = "if (a) { b(); }"
        assert matching_brace(text, text.index("{")) == len(text) - 1

    def test_unbalanced_returns_minus_one(self) -> None:
        assert matching_brace("{ (a }", 0) == -1

    def test_non_bracket_offset(self) -> None:
        assert matching_brace("abc", 1) == -1

    def test_bracket_pairs(self) -> None:
        assert bracket_pairs("f([1], {})") == {1: 9, 2: 4, 7: 8}


class TestSplitStatements:
    def test_semicolons_and_asi(self) -> None:
        assert _statements("a = 1;\nb = 2\nc = 3") == ["a = 1;", "b = 2", "c = 3"]

    def test_multiline_call_is_one_statement(self) -> None:
        body = textwrap.dedent("""\
            await client.send({
              id: 1,
              body: payload,
            });
        """)
        assert len(_statements(body)) == 1

    def test_if_else_is_one_statement(self) -> None:
        assert len(_statements("if (x) {\n  y();\n} else {\n  z();\n}")) == 1

    def test_method_chain_continues_across_lines(self) -> None:
        assert len(_statements("fetch(url)\n  .then(parse)\nfoo()")) == 2

    def test_brace_less_if_header_waits_for_body(self) -> None:
        assert len(_statements("if (ready)\n  start()\nstop()")) == 2


class TestParameterLists:
    def _lists(self, text: str) -> list[str]:
        masked = mask_source(text)
        return [masked[o + 1:c] for o, c in iter_parameter_lists(masked, bracket_pairs(masked))]

    def test_function_declaration(self) -> None:
        assert self._lists("function add(a, b) { return a + b; }") == ["a, b"]

    def test_arrow_function(self) -> None:
        assert self._lists("const add = (a, b) => a + b;") == ["a, b"]

    def test_method_shorthand(self) -> None:
        assert self._lists("class A {\n  render(props) {\n  }\n}") == ["props"]

    def test_calls_and_control_flow_are_not_parameters(self) -> None:
        assert self._lists("run(a);\nif (x) {\n  y();\n}\nwhile (z) {\n}") == []


class TestSourceFile:
    def test_line_of(self) -> None:
        source = make_source("a\nbb\nccc")
        assert [source.line_of(i) for i in (0, 2, 5, 7)] == [1, 2, 3, 3]

    def test_lines_strip_carriage_returns(self) -> None:
        assert make_source("a\r\nb").lines == ["a", "b"]
