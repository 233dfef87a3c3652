"""Base rule interface and violation model for the GuideLint rule checker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guidelint.parsing.source_file import SourceFile

__all__ = ["ViolationSeverity", "Violation", "BaseRule"]


class ViolationSeverity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Violation:
    rule_id: str
    file_path: str
    line: int
    message: str
    severity: ViolationSeverity = ViolationSeverity.WARNING
    suggested_fix: str = ""

    def render(self) -> str:
        return f"{self.file_path}:{self.line}: [{self.rule_id}] {self.message}"


class BaseRule(ABC):
    rule_id: str = "base"
    description: str = ""
    severity: ViolationSeverity = ViolationSeverity.WARNING

    @abstractmethod
    def check(self, source: SourceFile) -> list[Violation]:
        """Inspect a source file and return any violations found."""

    def violation(self, source: SourceFile, line: int, message: str, suggested_fix: str = "") -> Violation:
        return Violation(
            rule_id=self.rule_id, file_path=source.path, line=line,
            message=message, severity=self.severity, suggested_fix=suggested_fix,
        )
