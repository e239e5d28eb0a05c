"""Comment extraction and grouping."""

import logging

from tree_sitter import Node

from .ast_walker import ASTWalker
from .models import Comment, CommentGroup, ParseResult, Position, SourceFile

logger = logging.getLogger(__name__)


class CommentExtractor:
    """Builds the per-file comment groups from a parsed tree"""

    def extract(self, result: ParseResult, path: str = "") -> SourceFile:
        source = result.source
        groups: list[CommentGroup] = []
        previous: Node | None = None

        for node in ASTWalker.find_comments(result.tree.root_node):
            comment = Comment(
                # CRLF sources leave "\r" inside the comment node
                text=ASTWalker.get_text(node, source).replace("\r", ""),
                position=Position(
                    filename=path,
                    offset=node.start_byte,
                    line=node.start_point[0] + 1,
                    column=node.start_point[1] + 1,
                ),
            )
            if previous is not None and self._continues_group(source, previous, node):
                groups[-1].comments.append(comment)
            else:
                groups.append(CommentGroup(comments=[comment]))
            previous = node

        logger.debug("%s: %d comment group(s)", path or "<string>", len(groups))
        return SourceFile(path=path, comment_groups=groups)

    @staticmethod
    def _continues_group(source: bytes, previous: Node, current: Node) -> bool:
        gap = source[previous.end_byte : current.start_byte]
        if gap.strip() or gap.count(b"\n") > 1:
            return False

        # A comment trailing code on its line stands alone
        line_start = source.rfind(b"\n", 0, previous.start_byte) + 1
        return not source[line_start : previous.start_byte].strip()
