from dataclasses import dataclass, field
from enum import Enum


class Check(str, Enum):
    """Independently enabled directive checks"""

    MACHINE_READABLE = "machine-readable"
    SPECIFIC = "specific"
    EXPLANATION = "explanation"
    UNUSED = "unused"


# Unused candidates only make sense with a downstream pass, so they are opt-in
ALL_CHECKS = frozenset({Check.MACHINE_READABLE, Check.SPECIFIC, Check.EXPLANATION})

DEFAULT_RULE_NAME = "nolintlint"


@dataclass(frozen=True)
class RuleConfig:
    """Read-only rule configuration, built once per rule instance"""

    checks: frozenset[Check] = ALL_CHECKS
    allow_no_explanation: frozenset[str] = field(default_factory=frozenset)
    rule_name: str = DEFAULT_RULE_NAME

    def __post_init__(self):
        object.__setattr__(self, "checks", frozenset(Check(c) for c in self.checks))
        object.__setattr__(self, "allow_no_explanation", frozenset(self.allow_no_explanation))

    def needs(self, check: Check) -> bool:
        return check in self.checks
