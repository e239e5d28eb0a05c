from tree_sitter import Node
from typing import Callable, List

from .node_types import COMMENT_NODE_TYPES


class ASTWalker:
    """Utilities for traversing and searching the syntax tree"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the AST"""
        callback(node)
        for child in node.children:
            ASTWalker.walk(child, callback)

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def find_comments(node: Node) -> List[Node]:
        """Find all comment nodes in document order"""
        results = []

        def check(n):
            if n.type in COMMENT_NODE_TYPES:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Return the source text covered by a node"""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")
