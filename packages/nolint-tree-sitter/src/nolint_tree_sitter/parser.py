import logging
from pathlib import Path

import tree_sitter_c as tsc
import tree_sitter_go as tsgo
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .models import ParseResult
from .node_types import ERROR_NODE_TYPE, LANGUAGE_BY_SUFFIX

logger = logging.getLogger(__name__)

_GRAMMARS = {
    "go": tsgo,
    "c": tsc,
}


class UnsupportedLanguageError(ValueError):
    """Raised for a language or file suffix without a bundled grammar"""


class SourceParser:
    """Parses source code into tree-sitter trees, one parser per grammar"""

    def __init__(self):
        self._parsers: dict[str, Parser] = {}

    def _get_parser(self, language: str) -> Parser:
        if language not in _GRAMMARS:
            raise UnsupportedLanguageError(f"No grammar for language '{language}'")
        if language not in self._parsers:
            self._parsers[language] = Parser(Language(_GRAMMARS[language].language()))
        return self._parsers[language]

    @staticmethod
    def language_for(file_path: Path) -> str:
        """Pick the grammar from the file suffix"""
        try:
            return LANGUAGE_BY_SUFFIX[file_path.suffix.lower()]
        except KeyError:
            raise UnsupportedLanguageError(f"Unsupported file type: {file_path}") from None

    def parse_string(self, source: str | bytes, language: str = "go") -> ParseResult:
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self._get_parser(language).parse(source)

        # Syntax errors don't stop comment extraction, just record them
        errors = [
            f"Syntax error at line {n.start_point[0] + 1}"
            for n in ASTWalker.find_all_by_type(tree.root_node, ERROR_NODE_TYPE)
        ]
        if errors:
            logger.debug("%d syntax error(s) in %s source", len(errors), language)

        return ParseResult(tree=tree, source=source, errors=errors, language=language)

    def parse_file(self, file_path: Path) -> ParseResult:
        language = self.language_for(file_path)
        logger.debug("Parsing %s as %s", file_path, language)
        return self.parse_string(file_path.read_bytes(), language=language)
