from .ast_walker import ASTWalker
from .comments import CommentExtractor
from .models import Comment, CommentGroup, ParseResult, Position, SourceFile
from .parser import SourceParser, UnsupportedLanguageError

__all__ = [
    "ASTWalker",
    "Comment",
    "CommentExtractor",
    "CommentGroup",
    "ParseResult",
    "Position",
    "SourceFile",
    "SourceParser",
    "UnsupportedLanguageError",
]
