"""Recognition and parsing of ``//nolint`` directives.

Matching happens in two tiers. ``is_candidate`` is a cheap, permissive test
that keeps ordinary comments out of the pipeline. ``parse_directive`` then
applies the strict grammar::

    //[space]nolint[:linter[,linter...]][ // explanation]

so that a comment which looks like a directive but is malformed gets
reported instead of silently ignored.
"""

import re
from dataclasses import dataclass

from nolint_tree_sitter import Comment, Position

KEYWORD = "nolint"
COMMENT_MARKER = "//"

_LINTER_LIST = r"(:\s*[\w-]+\s*(?:,\s*[\w-]+\s*)*)?"

# "nolint-" is prose ("nolint-style"), not the keyword
CANDIDATE_PATTERN = re.compile(rf"^//\s*({KEYWORD})(?!-){_LINTER_LIST}\b", re.ASCII)

# Must match the whole comment text
FULL_DIRECTIVE_PATTERN = re.compile(rf"//\s*{KEYWORD}{_LINTER_LIST}\s*(//.*)?\s*\n?", re.ASCII)

LEADING_SPACE_PATTERN = re.compile(r"^//(\s*)", re.ASCII)
TRAILING_BLANK_EXPLANATION = re.compile(r"\s*(//\s*)?\Z", re.ASCII)


class DirectiveSyntaxError(ValueError):
    """A candidate directive that does not follow the strict grammar"""

    def __init__(self, text: str):
        super().__init__(f"Malformed directive: {text!r}")
        self.text = text


def is_candidate(text: str) -> bool:
    return CANDIDATE_PATTERN.match(text) is not None


def leading_space(text: str) -> str:
    """Whitespace between the comment marker and the keyword"""
    match = LEADING_SPACE_PATTERN.match(text)
    return match.group(1) if match else ""


def keyword_section(text: str) -> str:
    """Text between the first two comment markers, up to the first ':'"""
    return _directive_body(text).split(":", 1)[0]


def names_linter(text: str, name: str) -> bool:
    """True if the directive lists ``name`` among its linters"""
    _, sep, linters = _directive_body(text).partition(":")
    if not sep:
        return False
    return any(linter.strip() == name for linter in linters.split(","))


def canonical_form(text: str) -> str:
    """Directive keyword with at most one space after the marker"""
    prefix = COMMENT_MARKER + " " if leading_space(text) else COMMENT_MARKER
    return prefix + keyword_section(text).strip()


def _directive_body(text: str) -> str:
    parts = text.split(COMMENT_MARKER, 2)
    return parts[1] if len(parts) > 1 else ""


@dataclass(frozen=True)
class Directive:
    """A parsed nolint directive from a single comment"""

    text: str
    position: Position
    leading_space: str
    linters: tuple[str, ...]
    explanation: str

    @property
    def leading_space_width(self) -> int:
        return len(self.leading_space)

    @property
    def has_explanation(self) -> bool:
        # A bare "//" with nothing after it explains nothing
        return bool(self.explanation) and self.explanation.strip() != COMMENT_MARKER

    @property
    def without_explanation(self) -> str:
        return TRAILING_BLANK_EXPLANATION.sub("", self.text)


def parse_directive(comment: Comment) -> Directive:
    """Parse a candidate comment with the strict grammar.

    Raises:
        DirectiveSyntaxError: the comment is not a well-formed directive
    """
    match = FULL_DIRECTIVE_PATTERN.fullmatch(comment.text)
    if match is None:
        raise DirectiveSyntaxError(comment.text)

    linters_text, explanation = match.group(1), match.group(2)
    linters: tuple[str, ...] = ()
    if linters_text:
        # Drop the leading ':'; duplicates are kept
        linters = tuple(s.strip() for s in linters_text[1:].split(",") if s.strip())

    return Directive(
        text=comment.text,
        position=comment.position,
        leading_space=leading_space(comment.text),
        linters=linters,
        explanation=explanation or "",
    )
