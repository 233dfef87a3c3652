"""RuleChecker – applies a fixed rule set to one file and aggregates violations."""

from __future__ import annotations

import logging

from guidelint.config.settings import ConfigError, RulesConfig
from guidelint.parsing.source_file import SourceFile
from guidelint.rules.base_rule import BaseRule, Violation, ViolationSeverity
from guidelint.rules.arrow_function_rule import ArrowFunctionRule
from guidelint.rules.try_scope_rule import TryScopeRule
from guidelint.rules.redundant_comment_rule import RedundantCommentRule
from guidelint.rules.early_return_rule import EarlyReturnRule
from guidelint.rules.default_fallback_rule import DefaultFallbackRule
from guidelint.rules.default_parameter_rule import DefaultParameterRule
from guidelint.rules.naming_case_rule import NamingCaseRule
from guidelint.rules.file_extension_rule import FileExtensionRule
from guidelint.rules.filename_rule import SnakeCaseFilenameRule
from guidelint.rules.guard_spacing_rule import GuardSpacingRule

__all__ = ["RuleChecker", "build_rules", "RULE_TYPES", "RULE_INTERNAL_ERROR"]

logger = logging.getLogger(__name__)

RULE_INTERNAL_ERROR = "rule-internal-error"

RULE_TYPES: tuple[type[BaseRule], ...] = (
    ArrowFunctionRule,
    TryScopeRule,
    RedundantCommentRule,
    EarlyReturnRule,
    DefaultFallbackRule,
    DefaultParameterRule,
    NamingCaseRule,
    FileExtensionRule,
    SnakeCaseFilenameRule,
    GuardSpacingRule,
)


def build_rules(cfg: RulesConfig | None = None) -> tuple[BaseRule, ...]:
    """Instantiate the default rule set in its fixed order.

    Raises ConfigError when ``cfg.disabled`` names a rule that does not exist.
    """
    cfg = cfg or RulesConfig()
    rules: list[BaseRule] = [
        ArrowFunctionRule(),
        TryScopeRule(max_statements=cfg.max_try_statements),
        RedundantCommentRule(similarity=cfg.comment_similarity),
        EarlyReturnRule(max_depth=cfg.max_if_depth),
        DefaultFallbackRule(),
        DefaultParameterRule(),
        NamingCaseRule(allowed_identifiers=cfg.allowed_identifiers),
        FileExtensionRule(),
        SnakeCaseFilenameRule(),
        GuardSpacingRule(),
    ]
    disabled = set(cfg.disabled)
    unknown = sorted(disabled - {r.rule_id for r in rules})
    if unknown:
        raise ConfigError(None, f"unknown rule id(s) in rules.disabled: {', '.join(unknown)}")
    return tuple(r for r in rules if r.rule_id not in disabled)


def _sort_key(v: Violation) -> tuple[int, str, str]:
    return (v.line, v.rule_id, v.message)


class RuleChecker:
    """Evaluates every rule independently against a single file.

    A rule that raises is reported as one ``rule-internal-error`` violation
    and never prevents the remaining rules from running.
    """

    def __init__(self, rules: tuple[BaseRule, ...] | None = None) -> None:
        self.rules: tuple[BaseRule, ...] = tuple(rules) if rules is not None else build_rules()

    def check(self, path: str, text: str) -> list[Violation]:
        source = SourceFile(path=path, text=text)
        violations: list[Violation] = []
        for rule in self.rules:
            violations.extend(self._run_rule(rule, source))
        return sorted(violations, key=_sort_key)

    @staticmethod
    def _run_rule(rule: BaseRule, source: SourceFile) -> list[Violation]:
        try:
            return list(rule.check(source))
        except Exception as exc:
            logger.warning("Rule %s failed on %s", rule.rule_id, source.path, exc_info=True)
            return [Violation(
                rule_id=RULE_INTERNAL_ERROR, file_path=source.path, line=1,
                message=f"rule '{rule.rule_id}' failed: {exc.__class__.__name__}: {exc}",
                severity=ViolationSeverity.ERROR,
            )]
