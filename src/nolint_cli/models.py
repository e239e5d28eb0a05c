from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from nolint_linter.config import DEFAULT_RULE_NAME, Check, RuleConfig
from nolint_linter.models import Severity


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    suggestion: Optional[str] = None


class NolintlintSettings(BaseModel):
    """The [tool.nolintlint] table"""

    model_config = ConfigDict(
        alias_generator=lambda name: name.replace("_", "-"),
        populate_by_name=True,
        extra="forbid",
    )

    require_machine_readable: bool = True
    require_specific: bool = True
    require_explanation: bool = True
    allow_unused: bool = True
    allow_no_explanation: List[str] = Field(default_factory=list)
    rule_name: str = DEFAULT_RULE_NAME

    def to_rule_config(self) -> RuleConfig:
        checks = set()
        if self.require_machine_readable:
            checks.add(Check.MACHINE_READABLE)
        if self.require_specific:
            checks.add(Check.SPECIFIC)
        if self.require_explanation:
            checks.add(Check.EXPLANATION)
        if not self.allow_unused:
            checks.add(Check.UNUSED)
        return RuleConfig(
            checks=frozenset(checks),
            allow_no_explanation=frozenset(self.allow_no_explanation),
            rule_name=self.rule_name,
        )
