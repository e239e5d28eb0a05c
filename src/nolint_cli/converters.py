from nolint_linter.models import BaseIssue
from .models import LintIssue


def internal_issue_to_lint_issue(issue: BaseIssue) -> LintIssue:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    return LintIssue(
        severity=issue.severity,
        file_path=issue.position.filename,
        line_number=issue.position.line,
        column=issue.position.column,
        rule_id=issue.rule_id,
        message=issue.details(),
        suggestion=issue.suggestion,
    )
