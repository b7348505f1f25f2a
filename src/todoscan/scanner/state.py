"""
Scanner states.

The comment scanner is a small state machine. Each state is an immutable
record; indexes refer to the matching entry in the active LanguageConfig.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeState:
    """Plain source code outside any comment or string."""


@dataclass(frozen=True)
class StringState:
    """Inside a string literal."""

    index: int


@dataclass(frozen=True)
class LineCommentState:
    """Inside a comment that ends at the end of the line."""

    index: int


@dataclass(frozen=True)
class MultilineCommentState:
    """Inside a block comment that started on `line`."""

    index: int
    line: int


@dataclass(frozen=True)
class LineCommentOrStringState:
    """
    After a delimiter that opens both a line comment and a string.

    Used by languages such as Vim Script, where `"` starts either. The run is
    a string if the closing delimiter appears on the same line, otherwise it
    is a comment.
    """

    line_index: int
    string_index: int


State = (
    CodeState
    | StringState
    | LineCommentState
    | MultilineCommentState
    | LineCommentOrStringState
)
