"""Rule: A guard clause must be followed by a blank line."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["GuardSpacingRule"]

_ONE_LINE_GUARD_RE = re.compile(r"^if\s*\(.*\)\s*(?:(?:return|throw)\b[^{}]*|\{\s*(?:return|throw)\b[^{}]*\}\s*;?)$")
_GUARD_OPEN_RE = re.compile(r"^if\s*\(.*\)\s*\{$")
_GUARD_BODY_RE = re.compile(r"^(?:return|throw)\b[^{}]*$")
_ALLOWED_NEXT_RE = re.compile(r"^(?:\}|\)|\]|else\b|case\b|default\b)")


class GuardSpacingRule(BaseRule):
    """Recognises one-line guards (``if (x) return;``, ``if (x) { throw e; }``)
    and three-line braced guards whose body is a single ``return``/``throw``.
    Consecutive guards may be stacked without blank lines between them."""

    rule_id = "blank-line-after-guard"
    description = "Flags guard clauses that are not followed by a blank line."

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = [line.strip() for line in source.masked_lines]
        idx = 0
        while idx < len(masked):
            end = self._guard_end(masked, idx)
            if end is None:
                idx += 1
                continue
            following = end + 1
            if following < len(masked) and self._needs_blank_line(source, masked, following):
                violations.append(self.violation(
                    source, end + 1,
                    "missing blank line after guard clause",
                    "Insert an empty line between the guard clause and the code that follows.",
                ))
            idx = end + 1
        return violations

    @staticmethod
    def _guard_end(masked: list[str], idx: int) -> int | None:
        line = masked[idx]
        if _ONE_LINE_GUARD_RE.match(line):
            return idx
        if (
            _GUARD_OPEN_RE.match(line)
            and idx + 2 < len(masked)
            and _GUARD_BODY_RE.match(masked[idx + 1])
            and masked[idx + 2] in ("}", "};")
        ):
            return idx + 2
        return None

    def _needs_blank_line(self, source: SourceFile, masked: list[str], idx: int) -> bool:
        if not source.lines[idx].strip():
            return False
        if _ALLOWED_NEXT_RE.match(masked[idx]):
            return False
        return self._guard_end(masked, idx) is None
