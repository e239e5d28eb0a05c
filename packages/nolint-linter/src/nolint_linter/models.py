from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from nolint_tree_sitter import Position


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    STYLE = "STYLE"
    INFO = "INFO"


@dataclass(frozen=True)
class BaseIssue(ABC):
    """Internal representation of a directive issue"""

    rule_id: ClassVar[str]
    severity: ClassVar[Severity] = Severity.WARNING

    full_directive: str
    directive_with_optional_leading_space: str
    position: Position

    @abstractmethod
    def details(self) -> str:
        """Human-readable description of the problem"""

    @property
    def suggestion(self) -> Optional[str]:
        """Corrected directive, where one can be derived"""
        return None

    def __str__(self) -> str:
        return f"{self.details()} at {self.position}"


@dataclass(frozen=True)
class ExtraLeadingSpace(BaseIssue):
    rule_id: ClassVar[str] = "extra-leading-space"
    severity: ClassVar[Severity] = Severity.STYLE

    def details(self) -> str:
        return f"directive `{self.full_directive}` should not have more than one leading space"


@dataclass(frozen=True)
class NotMachineReadable(BaseIssue):
    rule_id: ClassVar[str] = "not-machine-readable"
    severity: ClassVar[Severity] = Severity.STYLE

    @property
    def suggestion(self) -> Optional[str]:
        return self.full_directive[:2] + self.full_directive[2:].lstrip()

    def details(self) -> str:
        return (
            f"directive `{self.full_directive}` should be written without leading space"
            f" as `{self.suggestion}`"
        )


@dataclass(frozen=True)
class NotSpecificTarget(BaseIssue):
    rule_id: ClassVar[str] = "not-specific"

    @property
    def suggestion(self) -> Optional[str]:
        return f"{self.directive_with_optional_leading_space}:my-linter"

    def details(self) -> str:
        return (
            f"directive `{self.full_directive}` should mention specific linter"
            f" such as `{self.suggestion}`"
        )


@dataclass(frozen=True)
class ParseError(BaseIssue):
    rule_id: ClassVar[str] = "parse-error"
    severity: ClassVar[Severity] = Severity.ERROR

    def details(self) -> str:
        return (
            f"directive `{self.full_directive}` should match"
            f" `{self.directive_with_optional_leading_space}"
            "[:<comma-separated-linters>] [// <explanation>]`"
        )


@dataclass(frozen=True)
class NoExplanation(BaseIssue):
    rule_id: ClassVar[str] = "no-explanation"

    full_directive_without_explanation: str = ""

    @property
    def suggestion(self) -> Optional[str]:
        return f"{self.full_directive_without_explanation} // this is why"

    def details(self) -> str:
        return f"directive `{self.full_directive}` should provide explanation such as `{self.suggestion}`"


@dataclass(frozen=True)
class UnusedCandidate(BaseIssue):
    """A directive the unused-suppression pass still has to confirm"""

    rule_id: ClassVar[str] = "unused"
    severity: ClassVar[Severity] = Severity.INFO

    expected_linter: str = ""

    def details(self) -> str:
        details = f"directive `{self.full_directive}` is unused"
        if self.expected_linter:
            details += f" for linter {self.expected_linter}"
        return details
