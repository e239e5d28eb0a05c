import logging
from pathlib import Path
from typing import Iterable, List

from nolint_tree_sitter import CommentExtractor, SourceFile, SourceParser

from .config import RuleConfig
from .models import BaseIssue
from .registry import RuleRegistry

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for linting nolint directives"""

    def __init__(self, config: RuleConfig | None = None):
        self.config = config or RuleConfig()
        self.parser = SourceParser()
        self.extractor = CommentExtractor()
        self.registry = RuleRegistry(self.config)

    def load_string(self, source: str | bytes, file_path: str = "", language: str = "go") -> SourceFile:
        result = self.parser.parse_string(source, language=language)
        return self.extractor.extract(result, file_path)

    def load_file(self, file_path: Path) -> SourceFile:
        result = self.parser.parse_file(file_path)
        return self.extractor.extract(result, str(file_path))

    def analyze(self, source_file: SourceFile) -> List[BaseIssue]:
        """Run all rules on one file; issues come back in source order"""
        issues: List[BaseIssue] = []
        for rule in self.registry.get_all_rules():
            issues.extend(rule.check(source_file))
        logger.debug("%s: %d issue(s)", source_file.path or "<string>", len(issues))
        return issues

    def analyze_string(self, source: str | bytes, file_path: str = "", language: str = "go") -> List[BaseIssue]:
        return self.analyze(self.load_string(source, file_path=file_path, language=language))

    def analyze_file(self, file_path: Path) -> List[BaseIssue]:
        return self.analyze(self.load_file(file_path))

    def analyze_files(self, files: Iterable[Path]) -> List[BaseIssue]:
        issues: List[BaseIssue] = []
        for file_path in files:
            issues.extend(self.analyze_file(file_path))
        return issues
