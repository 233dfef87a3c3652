"""Rule: Keep ``try`` blocks down to the statement that can actually throw."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.parsing.js_scanner import split_statements
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["TryScopeRule"]

_TRY_RE = re.compile(r"\btry\s*\{")


class TryScopeRule(BaseRule):
    """Counts the top-level statements of each ``try`` block.

    The default limit of two allows the risky call plus one statement that
    uses its result. Statements are split heuristically (see
    ``split_statements``), so code relying on automatic semicolon insertion
    in unusual ways may be over- or under-counted.
    """

    rule_id = "narrow-try-scope"
    description = "Flags try blocks that wrap more than the risky call and one follow-up statement."

    def __init__(self, max_statements: int = 2) -> None:
        self.max_statements = max_statements

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = source.masked
        for match in _TRY_RE.finditer(masked):
            open_offset = match.end() - 1
            close_offset = source.brackets.get(open_offset)
            if close_offset is None:
                continue
            count = len(split_statements(masked, open_offset + 1, close_offset))
            if count > self.max_statements:
                violations.append(self.violation(
                    source, source.line_of(match.start()),
                    f"try block wraps {count} statements (max {self.max_statements})",
                    "Move statements that cannot throw out of the try block.",
                ))
        return violations
