from typing import Protocol

from nolint_tree_sitter import SourceFile

from .config import RuleConfig
from .models import BaseIssue


class LintRule(Protocol):
    """Protocol for a linting rule"""

    @property
    def rule_id(self) -> str: ...

    def check(self, source_file: SourceFile) -> list[BaseIssue]: ...


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self, config: RuleConfig | None = None):
        self.config = config or RuleConfig()
        self._rules: list[LintRule] = []
        self._load_builtin_rules()

    def register(self, rule: LintRule):
        self._rules.append(rule)

    def get_all_rules(self) -> list[LintRule]:
        return self._rules

    def get_rule(self, rule_id: str) -> LintRule | None:
        for rule in self._rules:
            if rule.rule_id == rule_id:
                return rule
        return None

    def _load_builtin_rules(self):
        from .rules.nolintlint import NolintlintRule

        self.register(NolintlintRule(self.config))
