"""Lexical helpers for JavaScript/TypeScript source text.

The rules in GuideLint are pattern checks, not a parser. Everything here
works on a *masked* copy of the source where the bodies of strings,
template literals, regex literals and comments are replaced by spaces.
Offsets and newlines are preserved, so a match in the masked text maps
one-to-one onto the original text.

JSX is not understood. An apostrophe in JSX text (`<p>Don't {x}</p>`)
opens a string literal that runs to the end of the line, so the rest of
that line is hidden from every rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

__all__ = [
    "Comment",
    "scan",
    "mask_source",
    "find_comments",
    "bracket_pairs",
    "matching_brace",
    "split_top_level",
    "split_statements",
    "iter_parameter_lists",
    "CONTROL_KEYWORDS",
]

CONTROL_KEYWORDS: frozenset[str] = frozenset(
    {"if", "for", "while", "switch", "catch", "with", "return", "typeof", "function"}
)

_REGEX_PRECEDERS = set("(,=:[!&|?{};+-*%<>~^")
_REGEX_KEYWORDS = {
    "return", "typeof", "instanceof", "in", "of", "new", "delete",
    "void", "throw", "case", "do", "else", "yield", "await",
}
_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")": "(", "]": "[", "}": "{"}

# Tokens that keep a statement going onto the next line.
_CONTINUES_AT_END = tuple("+-*/%=&|^!<>?:,.([{") + ("=>",)
_CONTINUES_AT_START = tuple(".?:+-*/%&|^=,)]}") + ("&&", "||")
_HEADER_START_RE = re.compile(r"(?:else\s+)?(?:if|for|while)\s*(?=\()")

_FUNCTION_BEFORE_RE = re.compile(r"\bfunction\s*\*?\s*(?:[A-Za-z_$][\w$]*)?\s*$")
_ARROW_AFTER_RE = re.compile(r"\s*=>")
_BLOCK_AFTER_RE = re.compile(r"\s*\{")
_METHOD_PREFIX_RE = re.compile(
    r"\s*(?:(?:async|static|get|set|public|private|protected|readonly)\s+)*\*?\s*([A-Za-z_$][\w$]*)\s*"
)


@dataclass(frozen=True)
class Comment:
    """A single ``//`` or ``/* */`` comment found in the source."""

    offset: int
    line: int
    text: str
    kind: str
    own_line: bool


def _blank(chunk: str) -> str:
    return re.sub(r"[^\n]", " ", chunk)


def _quoted_end(text: str, start: int, quote: str) -> int:
    """Return the offset just past the closing *quote*, or where the literal stops."""
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            return i
        i += 1
    return n


def _regex_end(text: str, start: int) -> int | None:
    i = start + 1
    n = len(text)
    in_class = False
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "\n":
            return None
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            i += 1
            while i < n and (text[i].isalnum() or text[i] == "_"):
                i += 1
            return i
        i += 1
    return None


def _make_comment(text: str, offset: int, body: str, kind: str) -> Comment:
    line_start = text.rfind("\n", 0, offset) + 1
    return Comment(
        offset=offset,
        line=text.count("\n", 0, offset) + 1,
        text=body.strip(),
        kind=kind,
        own_line=not text[line_start:offset].strip(),
    )


def scan(text: str) -> tuple[str, list[Comment]]:
    """Return the masked text and the comments of *text* in a single pass."""
    out: list[str] = []
    comments: list[Comment] = []
    prev = ""
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < n else ""

        if ch == "/" and nxt == "/":
            end = text.find("\n", i)
            end = n if end == -1 else end
            comments.append(_make_comment(text, i, text[i + 2:end], "line"))
            out.append(" " * (end - i))
            i = end
            continue

        if ch == "/" and nxt == "*":
            close = text.find("*/", i + 2)
            body_end, end = (n, n) if close == -1 else (close, close + 2)
            comments.append(_make_comment(text, i, text[i + 2:body_end], "block"))
            out.append(_blank(text[i:end]))
            i = end
            continue

        if ch in "'\"`":
            end = _quoted_end(text, i, ch)
            terminated = end - 1 > i and text[end - 1] == ch
            if terminated:
                out.append(ch + _blank(text[i + 1:end - 1]) + ch)
            else:
                out.append(ch + _blank(text[i + 1:end]))
            prev = "lit"
            i = end
            continue

        if ch == "/" and (prev == "" or prev in _REGEX_PRECEDERS or prev in _REGEX_KEYWORDS):
            end = _regex_end(text, i)
            if end is not None:
                out.append("/" + _blank(text[i + 1:end]))
                prev = "lit"
                i = end
                continue

        if ch.isalpha() or ch in "_$":
            j = i + 1
            while j < n and (text[j].isalnum() or text[j] in "_$"):
                j += 1
            prev = text[i:j]
            out.append(prev)
            i = j
            continue

        if ch.isdigit():
            j = i + 1
            while j < n and (text[j].isalnum() or text[j] in "_."):
                j += 1
            prev = "lit"
            out.append(text[i:j])
            i = j
            continue

        if not ch.isspace():
            prev = ch
        out.append(ch)
        i += 1
    return "".join(out), comments


def mask_source(text: str) -> str:
    return scan(text)[0]


def find_comments(text: str) -> list[Comment]:
    return scan(text)[1]


def bracket_pairs(masked: str) -> dict[int, int]:
    """Map the offset of every balanced opening bracket to its closing offset."""
    pairs: dict[int, int] = {}
    stack: list[int] = []
    for i, ch in enumerate(masked):
        if ch in _OPENERS:
            stack.append(i)
        elif ch in _CLOSERS:
            if stack and masked[stack[-1]] == _CLOSERS[ch]:
                pairs[stack.pop()] = i
    return pairs


def matching_brace(masked: str, open_offset: int) -> int:
    """Return the offset of the bracket closing the one at *open_offset*, or -1."""
    if open_offset >= len(masked) or masked[open_offset] not in _OPENERS:
        return -1
    stack: list[str] = []
    for i in range(open_offset, len(masked)):
        ch = masked[i]
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[ch]:
                return -1
            stack.pop()
            if not stack:
                return i
    return -1


def _trimmed(masked: str, start: int, end: int) -> tuple[int, int] | None:
    while start < end and masked[start].isspace():
        start += 1
    while end > start and masked[end - 1].isspace():
        end -= 1
    if start == end or masked[start:end] == ";":
        return None
    return start, end


def split_top_level(masked: str, start: int, end: int, sep: str = ",") -> list[tuple[int, int]]:
    """Split ``masked[start:end]`` on *sep* characters outside any brackets."""
    parts: list[tuple[int, int]] = []
    depth = 0
    seg_start = start
    for i in range(start, end):
        ch = masked[i]
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == sep and depth == 0:
            span = _trimmed(masked, seg_start, i)
            if span is not None:
                parts.append(span)
            seg_start = i + 1
    span = _trimmed(masked, seg_start, end)
    if span is not None:
        parts.append(span)
    return parts


def _next_code(masked: str, pos: int, end: int) -> str:
    """Return the rest of the first non-blank line at or after *pos*."""
    while pos < end:
        line_end = masked.find("\n", pos, end)
        line_end = end if line_end == -1 else line_end
        chunk = masked[pos:line_end].strip()
        if chunk:
            return chunk
        pos = line_end + 1
    return ""


def _block_ends_statement(masked: str, close: int, end: int) -> bool:
    following = masked[close + 1:end].lstrip()
    if not following:
        return True
    if following[0] in ")],;.?:":
        return False
    return re.match(r"(?:else|catch|finally|while)\b", following) is None


def _is_open_header(current: str) -> bool:
    """True for ``if (...)``, ``else`` and friends still waiting for a body."""
    if current in ("else", "do"):
        return True
    header = _HEADER_START_RE.match(current)
    if header is None:
        return False
    return matching_brace(current, header.end()) == len(current) - 1


def _asi_break(masked: str, seg_start: int, newline: int, end: int) -> bool:
    current = masked[seg_start:newline].strip()
    if not current:
        return False
    if _is_open_header(current):
        return False
    if current.endswith(_CONTINUES_AT_END) and not current.endswith(("++", "--")):
        return False
    following = _next_code(masked, newline + 1, end)
    if not following:
        return True
    return not following.startswith(_CONTINUES_AT_START)


def split_statements(masked: str, start: int, end: int) -> list[tuple[int, int]]:
    """Split a block body into its top-level statements.

    A statement ends at a ``;`` at depth zero, at a ``}`` that closes a
    nested block at depth zero (unless ``else``/``catch``/``finally`` or an
    operator follows), or at a newline where automatic semicolon insertion
    would apply. The ASI handling is approximate: a line ending in an
    operator or opening bracket, or a next line starting with one, keeps
    the statement going.
    """
    statements: list[tuple[int, int]] = []
    depth = 0
    seg_start = start

    def close(at: int) -> None:
        nonlocal seg_start
        span = _trimmed(masked, seg_start, at)
        if span is not None:
            statements.append(span)
        seg_start = at

    for i in range(start, end):
        ch = masked[i]
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if ch == "}" and depth == 0 and _block_ends_statement(masked, i, end):
                close(i + 1)
        elif ch == ";" and depth == 0:
            close(i + 1)
        elif ch == "\n" and depth == 0 and _asi_break(masked, seg_start, i, end):
            close(i)
    close(end)
    return statements


def iter_parameter_lists(masked: str, pairs: dict[int, int]) -> Iterator[tuple[int, int]]:
    """Yield ``(open, close)`` offsets of parenthesised function parameter lists.

    Recognises ``function name(...)``, arrow functions ``(...) =>`` and
    class/object method shorthand ``name(...) {`` written at the start of
    a line.
    """
    for open_offset in sorted(pairs):
        if masked[open_offset] != "(":
            continue
        close_offset = pairs[open_offset]
        before = masked[max(0, open_offset - 200):open_offset]
        if _FUNCTION_BEFORE_RE.search(before):
            yield open_offset, close_offset
            continue
        if _ARROW_AFTER_RE.match(masked, close_offset + 1):
            yield open_offset, close_offset
            continue
        if _BLOCK_AFTER_RE.match(masked, close_offset + 1):
            line_start = masked.rfind("\n", 0, open_offset) + 1
            method = _METHOD_PREFIX_RE.fullmatch(masked, line_start, open_offset)
            if method and method.group(1) not in CONTROL_KEYWORDS:
                yield open_offset, close_offset
