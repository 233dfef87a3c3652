"""Rule: Declared identifiers must be camelCase, with acronyms written like words."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING, Iterator
from guidelint.parsing.js_scanner import iter_parameter_lists, split_top_level
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["NamingCaseRule", "to_camel_case"]

_VARIABLE_RE = re.compile(r"\b(?:const|let|var)\s+([A-Za-z_$][\w$]*)")
_FUNCTION_RE = re.compile(r"\bfunction\b\s*\*?\s*([A-Za-z_$][\w$]*)")
_CLASS_RE = re.compile(r"\bclass\s+([A-Za-z_$][\w$]*)")
_BARE_ARROW_PARAM_RE = re.compile(r"(?<![\w$)])([A-Za-z_$][\w$]*)\s*=>")
_PARAM_RE = re.compile(r"(?:\.\.\.)?\s*([A-Za-z_$][\w$]*)")
_CAMEL_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_PASCAL_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
_ACRONYM_RE = re.compile(r"[A-Z]{2,}")
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+")
_RESERVED = frozenset({"async", "await", "enum", "of", "in", "static", "yield"})


def to_camel_case(name: str, pascal: bool = False) -> str:
    words = [w.lower() for part in name.split("_") for w in _WORD_RE.findall(part)]
    if not words:
        return name
    head = words[0].capitalize() if pascal else words[0]
    return head + "".join(w.capitalize() for w in words[1:])


class NamingCaseRule(BaseRule):
    """Checks names introduced by declarations, never property accesses.

    Variables, functions and parameters must be camelCase. Class names and
    ``const`` bindings may also be PascalCase (classes, components). Runs of
    two or more capitals are treated as an all-uppercase acronym and
    reported, so ``userID`` must be written ``userId``. Destructured names
    are skipped since they mirror the shape of the source object. Leading
    underscores are ignored.
    """

    rule_id = "camel-case-naming"
    description = "Flags declared identifiers that are not camelCase or that spell acronyms in capitals."

    def __init__(self, allowed_identifiers: list[str] | None = None) -> None:
        self.allowed_identifiers = frozenset(allowed_identifiers or [])

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        for offset, name, allow_pascal in self._declarations(source):
            message = self._problem(name, allow_pascal)
            if message is None:
                continue
            pascal = allow_pascal and name.lstrip("_$")[:1].isupper()
            violations.append(self.violation(
                source, source.line_of(offset), message,
                f"Rename to '{to_camel_case(name.lstrip('_$'), pascal=pascal)}'.",
            ))
        return violations

    def _problem(self, name: str, allow_pascal: bool) -> str | None:
        if name in self.allowed_identifiers or name in _RESERVED:
            return None
        bare = name.lstrip("_$")
        if not bare:
            return None
        if "_" in bare:
            return f"'{name}' is not camelCase"
        if _ACRONYM_RE.search(bare):
            return f"'{name}' spells an acronym in capitals; write it as a word"
        if _CAMEL_RE.match(bare) or (allow_pascal and _PASCAL_RE.match(bare)):
            return None
        return f"'{name}' is not camelCase"

    def _declarations(self, source: SourceFile) -> Iterator[tuple[int, str, bool]]:
        masked = source.masked
        found: list[tuple[int, str, bool]] = []
        found.extend((m.start(1), m.group(1), m.group(0).startswith("const")) for m in _VARIABLE_RE.finditer(masked))
        found.extend((m.start(1), m.group(1), False) for m in _FUNCTION_RE.finditer(masked))
        found.extend((m.start(1), m.group(1), True) for m in _CLASS_RE.finditer(masked))
        found.extend(
            (m.start(1), m.group(1), False) for m in _BARE_ARROW_PARAM_RE.finditer(masked)
            if not masked[:m.start(1)].rstrip().endswith(":")
        )
        for open_offset, close_offset in iter_parameter_lists(masked, source.brackets):
            for start, _end in split_top_level(masked, open_offset + 1, close_offset):
                param = _PARAM_RE.match(masked, start)
                if param:
                    found.append((param.start(1), param.group(1), False))
        seen: set[int] = set()
        for offset, name, allow_pascal in sorted(found):
            if offset not in seen:
                seen.add(offset)
                yield offset, name, allow_pascal
