"""Grammar node type names shared by the supported languages."""

COMMENT_NODE_TYPES = frozenset({"comment", "line_comment", "block_comment"})

ERROR_NODE_TYPE = "ERROR"

# File suffix -> grammar name
LANGUAGE_BY_SUFFIX = {
    ".go": "go",
    ".c": "c",
    ".h": "c",
}
