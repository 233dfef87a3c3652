"""Rule: Prefer arrow functions over ``function`` declarations and expressions."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["ArrowFunctionRule"]

# Generators have no arrow form and are left alone.
_FUNCTION_RE = re.compile(r"(?<![\w$.])function\b(?!\s*\*)\s*([A-Za-z_$][\w$]*)?")


class ArrowFunctionRule(BaseRule):
    """Reports every use of the ``function`` keyword.

    Class and object-literal method shorthand (``run() {}``) has no
    ``function`` keyword and is not reported.
    """

    rule_id = "prefer-arrow-function"
    description = "Flags function declarations and expressions that should be arrow functions."

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        for match in _FUNCTION_RE.finditer(source.masked):
            name = match.group(1)
            if name:
                message = f"function '{name}' should be an arrow function"
                fix = f"const {name} = (...) => {{ ... }};"
            else:
                message = "anonymous function expression should be an arrow function"
                fix = "(...) => { ... }"
            violations.append(self.violation(source, source.line_of(match.start()), message, fix))
        return violations
