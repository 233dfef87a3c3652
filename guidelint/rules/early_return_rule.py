"""Rule: Detect deeply nested conditionals that should invert to an early return."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.parsing.js_scanner import CONTROL_KEYWORDS
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["EarlyReturnRule"]

_IF_HEADER_RE = re.compile(r"^\s*(?:else\s+)?if\s*\(", re.MULTILINE)
_ELSE_HEADER_RE = re.compile(r"^else$")
_ARROW_HEADER_RE = re.compile(r"=>\s*$")
_FUNCTION_HEADER_RE = re.compile(r"\bfunction\b")
_METHOD_HEADER_RE = re.compile(
    r"^(?:(?:async|static|get|set|public|private|protected)\s+)*\*?\s*([A-Za-z_$][\w$]*)\s*\(.*\)\s*$",
    re.DOTALL,
)

# A brace after one of these opens an object literal, not a block.
_LITERAL_PRECEDERS = "(,=:[?|&!"

_IF = "if"
_ELSE = "else"
_FUNCTION = "function"
_OTHER = "other"


def _block_kind(header: str) -> str:
    if _ARROW_HEADER_RE.search(header):
        return _FUNCTION
    if header and header[-1] in _LITERAL_PRECEDERS:
        return _OTHER
    if _IF_HEADER_RE.search(header):
        return _IF
    if _ELSE_HEADER_RE.match(header):
        return _ELSE
    if _FUNCTION_HEADER_RE.search(header):
        return _FUNCTION
    method = _METHOD_HEADER_RE.match(header)
    if method and method.group(1) not in CONTROL_KEYWORDS:
        return _FUNCTION
    return _OTHER


def _conditional_depth(stack: list[str]) -> int:
    depth = 0
    for kind in reversed(stack):
        if kind == _FUNCTION:
            break
        if kind in (_IF, _ELSE):
            depth += 1
    return depth


class EarlyReturnRule(BaseRule):
    """Tracks how deeply ``if``/``else`` blocks nest inside one function.

    Only braced blocks count; a brace-less ``if`` body is invisible to the
    rule. Loops between two ``if`` blocks do not reset the depth, so nested
    loop-and-condition code can be reported even where an early
    ``continue`` is the better fix.
    """

    rule_id = "prefer-early-return"
    description = "Flags if blocks nested deeper than the limit; invert the condition and return early."

    def __init__(self, max_depth: int = 2) -> None:
        self.max_depth = max_depth

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = source.masked
        openers = {close: open_ for open_, close in source.brackets.items()}
        stack: list[str] = []
        boundary = 0
        for i, ch in enumerate(masked):
            if ch == "{":
                kind = _block_kind(self._header(masked, openers, boundary, i))
                stack.append(kind)
                if kind == _IF:
                    depth = _conditional_depth(stack)
                    if depth > self.max_depth:
                        violations.append(self.violation(
                            source, source.line_of(i),
                            f"if block nested {depth} levels deep (max {self.max_depth})",
                            "Invert the outer condition and return early to flatten the nesting.",
                        ))
                boundary = i + 1
            elif ch == "}":
                if stack:
                    stack.pop()
                boundary = i + 1
            elif ch == ";":
                boundary = i + 1
        return violations

    @staticmethod
    def _header(masked: str, openers: dict[int, int], boundary: int, brace: int) -> str:
        # A condition may hold braces of its own (callbacks, object literals),
        # so a header ending in ")" is read from before its opening paren.
        header = masked[boundary:brace].rstrip()
        close = boundary + len(header) - 1
        if not header.endswith(")") or close not in openers:
            return header.strip()
        open_paren = openers[close]
        start = max(masked.rfind(c, 0, open_paren) for c in ";{}") + 1
        return masked[start:open_paren].strip() + "()"
