"""Rule: Detect default-value fallbacks written with ``||`` and ``??``."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["DefaultFallbackRule"]

_NULLISH_RE = re.compile(r"\?\?=?")
# `||` only counts as a fallback when its right-hand side is a literal value.
_OR_LITERAL_RE = re.compile(r"\|\|=?(?=\s*(?:-?\d|['\"`\[{]))")
_OPERAND_END_RE = re.compile(r"[;,)\]}\n]")
_MAX_SNIPPET = 30


class DefaultFallbackRule(BaseRule):
    rule_id = "no-default-fallback"
    description = "Flags `?? value` and `|| literal` fallbacks that hide missing values."

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = source.masked
        matches = sorted(
            [*_NULLISH_RE.finditer(masked), *_OR_LITERAL_RE.finditer(masked)],
            key=lambda m: m.start(),
        )
        for match in matches:
            snippet = self._snippet(source, match.start(), match.end())
            violations.append(self.violation(
                source, source.line_of(match.start()),
                f"default fallback '{snippet}' hides a missing value",
                "Validate the value where it is produced and handle its absence explicitly.",
            ))
        return violations

    @staticmethod
    def _snippet(source: SourceFile, start: int, operand_start: int) -> str:
        stop = _OPERAND_END_RE.search(source.masked, operand_start)
        end = stop.start() if stop else len(source.text)
        snippet = source.text[start:end].strip()
        if len(snippet) > _MAX_SNIPPET:
            snippet = snippet[:_MAX_SNIPPET - 3] + "..."
        return snippet
