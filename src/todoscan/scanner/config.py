"""
Comment scanner configuration.

Describes a language's line comments, multi-line comments and string literals
as immutable records. Delimiters are plain strings of runes.
"""

from dataclasses import dataclass, field
from typing import Tuple

from todoscan.scanner.escape import CharEscape, EscapeRule
from todoscan.shared.domain.exceptions import ConfigurationError


def _require_delimiter(kind: str, value: str) -> None:
    if not value:
        raise ConfigurationError(f"empty {kind} delimiter", context={"kind": kind})


@dataclass(frozen=True)
class LineCommentConfig:
    """A comment running from `start` to the end of the line."""

    start: str

    def __post_init__(self):
        _require_delimiter("line comment start", self.start)


@dataclass(frozen=True)
class MultilineCommentConfig:
    """
    A block comment delimited by `start` and `end`.

    Attributes:
        at_first_column: Both delimiters only count at column 1
        at_line_start: Both delimiters only count when preceded by whitespace
            alone on their line
        nested: The start sequence may recur inside the comment
    """

    start: str
    end: str
    at_first_column: bool = False
    at_line_start: bool = False
    nested: bool = False

    def __post_init__(self):
        _require_delimiter("multi-line comment start", self.start)
        _require_delimiter("multi-line comment end", self.end)
        if self.nested and self.start == self.end:
            raise ConfigurationError(
                "nested comments need distinct start and end delimiters",
                context={"start": self.start, "end": self.end},
            )


@dataclass(frozen=True)
class StringConfig:
    """A string literal and the rule that escapes its terminator."""

    start: str
    end: str
    escape: EscapeRule = field(default_factory=CharEscape)

    def __post_init__(self):
        _require_delimiter("string start", self.start)
        _require_delimiter("string end", self.end)


@dataclass(frozen=True)
class LanguageConfig:
    """Comment and string syntax for one language."""

    line_comments: Tuple[LineCommentConfig, ...] = ()
    multiline_comments: Tuple[MultilineCommentConfig, ...] = ()
    strings: Tuple[StringConfig, ...] = ()
