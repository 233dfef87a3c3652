"""Rule: Relative import and require paths must spell out the file extension."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["FileExtensionRule"]

_SPECIFIER_RES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\brequire\s*\(\s*(['\"`])"), "require()"),
    (re.compile(r"\bimport\s*\(\s*(['\"`])"), "dynamic import()"),
    (re.compile(r"\bfrom\s*(['\"])"), "import"),
    (re.compile(r"\bimport\s*(['\"])"), "import"),
]


def _is_relative(specifier: str) -> bool:
    return specifier in (".", "..") or specifier.startswith(("./", "../"))


def _has_extension(specifier: str) -> bool:
    last = specifier.rstrip("/").rsplit("/", 1)[-1]
    if last in ("", ".", ".."):
        return False
    return "." in last.lstrip(".")


class FileExtensionRule(BaseRule):
    rule_id = "missing-file-extension"
    description = "Flags relative import/require paths that omit the file extension."

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        masked = source.masked
        for pattern, kind in _SPECIFIER_RES:
            for match in pattern.finditer(masked):
                quote_offset = match.start(1)
                close = masked.find(match.group(1), quote_offset + 1)
                if close == -1:
                    continue
                specifier = source.text[quote_offset + 1:close]
                if "${" in specifier or not _is_relative(specifier) or _has_extension(specifier):
                    continue
                violations.append(self.violation(
                    source, source.line_of(match.start()),
                    f"{kind} path '{specifier}' is missing a file extension",
                    f"Use the full file name, e.g. '{specifier.rstrip('/')}.js'.",
                ))
        return sorted(violations, key=lambda v: v.line)
