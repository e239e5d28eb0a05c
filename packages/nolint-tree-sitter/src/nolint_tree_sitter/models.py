from dataclasses import dataclass, field
from typing import List
from tree_sitter import Tree


@dataclass(frozen=True)
class Position:
    """A source location: 1-based line, 1-based byte column"""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        # file:line:column, line:column, file, or "-"
        s = self.filename
        if self.is_valid():
            if s:
                s += ":"
            s += str(self.line)
            if self.column:
                s += f":{self.column}"
        return s or "-"


@dataclass(frozen=True)
class Comment:
    """One comment as written in the source, marker included"""

    text: str
    position: Position


@dataclass
class CommentGroup:
    """Adjacent comments with no code or blank line between them"""

    comments: List[Comment] = field(default_factory=list)


@dataclass
class SourceFile:
    """Comment metadata of one parsed file"""

    path: str
    comment_groups: List[CommentGroup] = field(default_factory=list)

    def comments(self) -> List[Comment]:
        return [c for group in self.comment_groups for c in group.comments]


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: bytes
    errors: List[str]
    language: str = "go"
