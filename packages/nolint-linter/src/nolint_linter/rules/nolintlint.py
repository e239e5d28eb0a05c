import logging

from nolint_tree_sitter import Comment, CommentGroup, SourceFile

from ..config import Check, RuleConfig
from ..directive import (
    Directive,
    DirectiveSyntaxError,
    canonical_form,
    is_candidate,
    leading_space,
    names_linter,
    parse_directive,
)
from ..models import (
    BaseIssue,
    ExtraLeadingSpace,
    NoExplanation,
    NotMachineReadable,
    NotSpecificTarget,
    ParseError,
    UnusedCandidate,
)
from .base import BaseRule

logger = logging.getLogger(__name__)


class NolintlintRule(BaseRule):
    """Reports malformed, unspecific and unexplained nolint directives."""

    def __init__(self, config: RuleConfig | None = None):
        self.config = config or RuleConfig()

    @property
    def rule_id(self) -> str:
        return self.config.rule_name

    @property
    def description(self) -> str:
        return "nolint directives must be well formed, name their linters and explain themselves"

    def check(self, source_file: SourceFile) -> list[BaseIssue]:
        issues: list[BaseIssue] = []
        for group in source_file.comment_groups:
            issues.extend(self.check_group(group))
        return issues

    def check_group(self, group: CommentGroup) -> list[BaseIssue]:
        issues: list[BaseIssue] = []
        for comment in group.comments:
            issues.extend(self.check_comment(comment))
        return issues

    def check_comment(self, comment: Comment) -> list[BaseIssue]:
        text = comment.text
        if not is_candidate(text):
            return []

        if names_linter(text, self.rule_id):
            logger.debug("Skipping self-exempt directive at %s", comment.position)
            return []

        base = dict(
            full_directive=text,
            directive_with_optional_leading_space=canonical_form(text),
            position=comment.position,
        )
        issues: list[BaseIssue] = []

        # Leading space is judged before the grammar so it is reported either way
        space = leading_space(text)
        if len(space) > 1:
            issues.append(ExtraLeadingSpace(**base))
        if self.config.needs(Check.MACHINE_READABLE) and space:
            issues.append(NotMachineReadable(**base))

        try:
            directive = parse_directive(comment)
        except DirectiveSyntaxError:
            issues.append(ParseError(**base))
            return issues

        issues.extend(self.classify(directive, base))
        return issues

    def classify(self, directive: Directive, base: dict) -> list[BaseIssue]:
        """Apply the per-check policies to a well-formed directive."""
        issues: list[BaseIssue] = []
        linters = directive.linters

        if self.config.needs(Check.SPECIFIC) and not linters:
            issues.append(NotSpecificTarget(**base))

        # Every directive is a candidate, the unused pass decides what was effective
        if self.config.needs(Check.UNUSED):
            if not linters:
                issues.append(UnusedCandidate(**base))
            for linter in linters:
                issues.append(UnusedCandidate(**base, expected_linter=linter))

        if self.config.needs(Check.EXPLANATION) and not directive.has_explanation:
            exempt = self.config.allow_no_explanation
            if not linters or any(linter not in exempt for linter in linters):
                issues.append(
                    NoExplanation(
                        **base,
                        full_directive_without_explanation=directive.without_explanation,
                    )
                )

        return issues
