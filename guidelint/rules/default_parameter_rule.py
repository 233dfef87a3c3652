"""Rule: Detect default values in function parameter lists."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.parsing.js_scanner import iter_parameter_lists, split_top_level
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["DefaultParameterRule"]

_PARAM_NAME_RE = re.compile(r"(?:\.\.\.)?\s*([A-Za-z_$][\w$]*)")


class DefaultParameterRule(BaseRule):
    rule_id = "no-default-parameter"
    description = "Flags parameters declared with a default value."

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = source.masked
        for open_offset, close_offset in iter_parameter_lists(masked, source.brackets):
            for start, end in split_top_level(masked, open_offset + 1, close_offset):
                assign = self._top_level_assign(masked, start, end)
                if assign is None:
                    continue
                name = _PARAM_NAME_RE.match(masked, start)
                label = name.group(1) if name else masked[start:assign].strip()
                violations.append(self.violation(
                    source, source.line_of(assign),
                    f"parameter '{label}' has a default value",
                    "Require the argument and let callers pass the value explicitly.",
                ))
        return violations

    @staticmethod
    def _top_level_assign(masked: str, start: int, end: int) -> int | None:
        depth = 0
        for i in range(start, end):
            ch = masked[i]
            if ch in "([{":
                depth += 1
            elif ch in ")]}":
                depth -= 1
            elif depth == 0 and ch == "=" and masked[i - 1] not in "=<>!" and masked[i + 1:i + 2] not in ("=", ">"):
                return i
        return None
