"""Orchestration engine – ties file discovery, reading and the rule checker together."""

from __future__ import annotations

import logging
import os
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from guidelint.config.settings import GuideLintSettings
from guidelint.core.checker import RuleChecker, build_rules
from guidelint.rules.base_rule import Violation, ViolationSeverity

__all__ = ["GuideLintEngine", "FileResult", "LintResult", "discover_files", "READ_ERROR"]

logger = logging.getLogger(__name__)

READ_ERROR = "read-error"


@dataclass(frozen=True)
class FileResult:
    path: str
    violations: list[Violation] = field(default_factory=list)


class LintResult:
    def __init__(self, files: list[FileResult]) -> None:
        self.files = files

    @property
    def violations(self) -> list[Violation]:
        return [v for f in self.files for v in f.violations]

    @property
    def has_violations(self) -> bool:
        return any(f.violations for f in self.files)

    @property
    def has_errors(self) -> bool:
        return any(v.severity == ViolationSeverity.ERROR for v in self.violations)

    @property
    def exit_code(self) -> int:
        return 1 if self.has_violations else 0

    def counts_by_rule(self) -> dict[str, int]:
        return dict(sorted(Counter(v.rule_id for v in self.violations).items()))


def _is_excluded(path: Path, root: Path, exclude: set[str]) -> bool:
    return any(part in exclude for part in path.relative_to(root).parts[:-1])


def discover_files(paths: Iterable[Path], settings: GuideLintSettings) -> list[Path]:
    """Expand directories into source files; explicit file arguments are always kept."""
    suffixes = {s.lower() for s in settings.extensions}
    exclude = set(settings.exclude)
    found: set[Path] = set()
    for root in paths:
        if root.is_dir():
            for candidate in root.rglob("*"):
                if candidate.suffix.lower() in suffixes and candidate.is_file() and not _is_excluded(candidate, root, exclude):
                    found.add(candidate)
        else:
            found.add(root)
    return sorted(found)


class GuideLintEngine:
    """Central orchestrator for GuideLint runs."""

    def __init__(self, settings: GuideLintSettings | None = None) -> None:
        self.settings = settings or GuideLintSettings()
        self.checker = RuleChecker(build_rules(self.settings.rules))

    @property
    def jobs(self) -> int:
        return self.settings.jobs or os.cpu_count() or 1

    def check_text(self, path: str, text: str) -> FileResult:
        return FileResult(path=path, violations=self.checker.check(path, text))

    def check_file(self, path: Path) -> FileResult:
        display = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", display, exc)
            return FileResult(path=display, violations=[Violation(
                rule_id=READ_ERROR, file_path=display, line=1,
                message=f"cannot read file: {exc}", severity=ViolationSeverity.ERROR,
            )])
        return self.check_text(display, text)

    def run(self, paths: Iterable[Path]) -> LintResult:
        files = discover_files(paths, self.settings)
        jobs = min(self.jobs, len(files)) or 1
        logger.debug("Checking %d file(s) with %d worker(s)", len(files), jobs)
        if jobs > 1:
            with ThreadPoolExecutor(max_workers=jobs) as ex:
                results = list(ex.map(self.check_file, files))
        else:
            results = [self.check_file(f) for f in files]
        return LintResult(files=results)
