"""Plain-text and JSON renderings of a lint run."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guidelint.core.engine import LintResult

__all__ = ["render_text", "render_json"]


def render_text(result: LintResult) -> list[str]:
    """One ``path:line: [rule-id] message`` line per violation."""
    return [v.render() for v in result.violations]


def render_json(result: LintResult) -> str:
    payload = {
        "files_checked": len(result.files),
        "violation_count": len(result.violations),
        "counts_by_rule": result.counts_by_rule(),
        "violations": [
            {
                "path": v.file_path,
                "line": v.line,
                "rule_id": v.rule_id,
                "severity": v.severity.value,
                "message": v.message,
                "suggested_fix": v.suggested_fix,
            }
            for v in result.violations
        ],
    }
    return json.dumps(payload, indent=2)
