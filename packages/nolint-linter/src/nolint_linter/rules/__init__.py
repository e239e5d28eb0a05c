from .base import BaseRule
from .nolintlint import NolintlintRule

__all__ = ["BaseRule", "NolintlintRule"]
