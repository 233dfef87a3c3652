"""Normalized representation of a source file handed to the rules."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from functools import cached_property

from guidelint.parsing.js_scanner import Comment, bracket_pairs, scan

__all__ = ["SourceFile"]


@dataclass(frozen=True)
class SourceFile:
    """File path plus text, with lazily derived views shared by all rules."""

    path: str
    text: str

    @cached_property
    def _scanned(self) -> tuple[str, list[Comment]]:
        return scan(self.text)

    @property
    def masked(self) -> str:
        return self._scanned[0]

    @property
    def comments(self) -> list[Comment]:
        return self._scanned[1]

    @cached_property
    def lines(self) -> list[str]:
        return [line.rstrip("\r") for line in self.text.split("\n")]

    @cached_property
    def masked_lines(self) -> list[str]:
        return [line.rstrip("\r") for line in self.masked.split("\n")]

    @cached_property
    def brackets(self) -> dict[int, int]:
        return bracket_pairs(self.masked)

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self.text) if ch == "\n")
        return starts

    def line_of(self, offset: int) -> int:
        """Return the 1-based line number containing *offset*."""
        return bisect_right(self._line_starts, offset)
