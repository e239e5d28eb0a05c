from abc import ABC, abstractmethod

from nolint_tree_sitter import SourceFile

from ..models import BaseIssue


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier, also the name directives use to target it."""
        pass

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, source_file: SourceFile) -> list[BaseIssue]:
        """Run the check and return found issues in source order."""
        pass

    def run(self, *nodes: object) -> list[BaseIssue]:
        """Check every parsed file among ``nodes``, skipping anything else."""
        issues: list[BaseIssue] = []
        for node in nodes:
            if isinstance(node, SourceFile):
                issues.extend(self.check(node))
        return issues
