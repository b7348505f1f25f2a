"""Comment tokens produced by the comment scanner."""

from dataclasses import dataclass
from typing import Optional

from todoscan.scanner.config import LineCommentConfig, MultilineCommentConfig


@dataclass(frozen=True)
class Comment:
    """
    A comment found in source code.

    Attributes:
        text: Raw comment text, delimiters included
        line: 1-indexed line the comment starts on
        multiline: Whether the comment came from a block comment rule
        line_config: Rule that matched a line comment
        multiline_config: Rule that matched a block comment
    """

    text: str
    line: int
    multiline: bool = False
    line_config: Optional[LineCommentConfig] = None
    multiline_config: Optional[MultilineCommentConfig] = None

    def __str__(self) -> str:
        return self.text
