"""Rule: Source file names must be snake_case."""
from __future__ import annotations
import re
from pathlib import PurePath
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["SnakeCaseFilenameRule", "to_snake_case"]

_SNAKE_RE = re.compile(r"^_?[a-z0-9]+(?:_[a-z0-9]+)*$")
_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(part: str) -> str:
    spaced = _BOUNDARY_RE.sub("_", part)
    return re.sub(r"[^a-z0-9]+", "_", spaced.lower()).strip("_")


class SnakeCaseFilenameRule(BaseRule):
    """Every dot-separated part of the name before the extension is checked,
    so ``user_card.test.js`` passes and ``userCard.test.js`` does not.
    Dotfiles are ignored."""

    rule_id = "snake-case-filename"
    description = "Flags file names that are not snake_case."

    def check(self, source: SourceFile) -> list[Violation]:
        name = PurePath(source.path).name
        if not name or name.startswith("."):
            return []
        parts = name.split(".")
        stem_parts = parts[:-1] if len(parts) > 1 else parts
        if all(_SNAKE_RE.match(p) for p in stem_parts):
            return []
        expected = ".".join([*(to_snake_case(p) for p in stem_parts), *parts[len(stem_parts):]])
        return [self.violation(
            source, 1, f"file name '{name}' is not snake_case",
            f"Rename the file to '{expected}'.",
        )]
