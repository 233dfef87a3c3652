"""Rule: Detect comments that merely restate the code below them."""
from __future__ import annotations
import re
from typing import TYPE_CHECKING
from guidelint.rules.base_rule import BaseRule, Violation
if TYPE_CHECKING:
    from guidelint.parsing.js_scanner import Comment
    from guidelint.parsing.source_file import SourceFile

__all__ = ["RedundantCommentRule"]

_WORD_RE = re.compile(r"[A-Za-z]+")
_IDENT_RE = re.compile(r"[A-Za-z_$][\w$]*")
_IDENT_PART_RE = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])")
_DIRECTIVE_RE = re.compile(r"^(?:eslint|@ts-|prettier-ignore|istanbul|TODO|FIXME|XXX|HACK|NOTE)", re.IGNORECASE)
_STOPWORDS = frozenset({
    "a", "an", "the", "to", "of", "and", "or", "in", "on", "for", "with", "is", "are",
    "be", "this", "that", "it", "its", "we", "our", "from", "by", "as", "at", "then",
    "if", "into", "here", "now", "so", "all", "some", "will", "just",
})
_MIN_WORDS = 2


def _stem(word: str) -> str:
    for suffix in ("ing", "ed", "es", "s"):
        if word.endswith(suffix) and len(word) - len(suffix) >= 3:
            return word[: -len(suffix)]
    return word


def _comment_words(text: str) -> set[str]:
    return {_stem(w.lower()) for w in _WORD_RE.findall(text) if w.lower() not in _STOPWORDS and len(w) > 1}


def _code_words(code: str) -> set[str]:
    words: set[str] = set()
    for ident in _IDENT_RE.findall(code):
        words.update(_stem(part.lower()) for part in _IDENT_PART_RE.findall(ident))
    return words


class RedundantCommentRule(BaseRule):
    """Compares an own-line ``//`` comment with the identifiers of the next line.

    A comment is redundant when at least ``similarity`` of its significant
    words (stopwords removed, crudely stemmed) appear among the split
    identifiers of the following code line. Comments in multi-line groups,
    tool directives and TODO-style markers are skipped. Synonyms are not
    recognised ("increment" does not match ``count++``), so this misses
    paraphrased restatements, and a genuinely useful comment reusing the
    code's vocabulary can be flagged.
    """

    rule_id = "no-redundant-comment"
    description = "Flags comments that restate the statement that follows them."

    def __init__(self, similarity: float = 0.75) -> None:
        self.similarity = similarity

    def check(self, source: SourceFile) -> list[Violation]:
        violations: list[Violation] = []
        comment_lines = {c.line for c in source.comments if c.own_line}
        for comment in source.comments:
            if not self._candidate(comment, comment_lines):
                continue
            code = self._next_code_line(source, comment.line)
            if not code:
                continue
            words = _comment_words(comment.text)
            if len(words) < _MIN_WORDS:
                continue
            overlap = len(words & _code_words(code)) / len(words)
            if overlap >= self.similarity:
                violations.append(self.violation(
                    source, comment.line,
                    f"comment restates the code below it: '{comment.text}'",
                    "Delete the comment or explain why the code does this.",
                ))
        return violations

    @staticmethod
    def _candidate(comment: Comment, comment_lines: set[int]) -> bool:
        if comment.kind != "line" or not comment.own_line:
            return False
        if comment.line - 1 in comment_lines or comment.line + 1 in comment_lines:
            return False
        return _DIRECTIVE_RE.match(comment.text) is None

    @staticmethod
    def _next_code_line(source: SourceFile, line: int) -> str:
        for masked in source.masked_lines[line:]:
            if masked.strip():
                return masked
        return ""
