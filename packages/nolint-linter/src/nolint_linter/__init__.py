"""
nolintlint - checks //nolint directives

Reports directives that are malformed, carry extra leading space, don't name
the linters they suppress or don't explain why, and emits unused-suppression
candidates for a downstream pass.
"""

__version__ = "0.1.0"

from .config import ALL_CHECKS, Check, RuleConfig
from .directive import Directive, DirectiveSyntaxError, parse_directive
from .engine import LinterEngine
from .models import (
    BaseIssue,
    ExtraLeadingSpace,
    NoExplanation,
    NotMachineReadable,
    NotSpecificTarget,
    ParseError,
    Severity,
    UnusedCandidate,
)
from .rules import NolintlintRule

__all__ = [
    "ALL_CHECKS",
    "BaseIssue",
    "Check",
    "Directive",
    "DirectiveSyntaxError",
    "ExtraLeadingSpace",
    "LinterEngine",
    "NoExplanation",
    "NolintlintRule",
    "NotMachineReadable",
    "NotSpecificTarget",
    "ParseError",
    "RuleConfig",
    "Severity",
    "UnusedCandidate",
    "parse_directive",
]
