"""
TODO Pattern Matcher

Reads comments from a CommentScanner and extracts TODO-style annotations
such as `TODO(label): message`. A single multi-line comment can hold several
annotations, one per line.
"""

import re
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Optional, Pattern, Sequence

from todoscan.scanner.comment import Comment
from todoscan.scanner.scanner import CommentScanner
from todoscan.shared.domain.base_model import BaseDomainModel

DEFAULT_TYPES = (
    "TODO",
    "Todo",
    "todo",
    "FIXME",
    "Fixme",
    "fixme",
    "BUG",
    "Bug",
    "bug",
    "HACK",
    "Hack",
    "hack",
    "XXX",
    "COMBAK",
)

# Leading whitespace and "*" decoration on lines of a block comment.
_DECORATION = re.compile(r"^[\s*]*")


@dataclass(frozen=True)
class TODO(BaseDomainModel):
    """
    A TODO annotation found in a comment.

    Attributes:
        type: Annotation type, e.g. "TODO" or "FIXME"
        text: The comment line holding the annotation
        label: Text in parentheses after the type, e.g. an issue reference
        message: Text after the type and label
        line: Line the annotation is on
        comment_line: Line the enclosing comment starts on
    """

    type: str
    text: str
    label: str
    message: str
    line: int
    comment_line: int


@dataclass(frozen=True)
class TODOConfig:
    """Settings for the TODO matcher."""

    types: Sequence[str] = DEFAULT_TYPES


def compile_pattern(types: Sequence[str], glued: bool = False) -> Pattern[str]:
    """
    Build the annotation pattern for the given TODO types.

    Matches `TYPE`, `TYPE: message`, `TYPE message`, `TYPE(label)` and
    `TYPE(label): message`, optionally prefixed with `@`.

    Args:
        types: Annotation types to recognise
        glued: Also accept a message directly after the type, as in
            `TODOfix this`. Used for line comments.
    """
    # Longest first so "TODO" cannot shadow a longer type sharing its prefix.
    ordered = sorted(set(types), key=lambda t: (-len(t), t))
    alternatives = "|".join(re.escape(t) for t in ordered if t)
    if not alternatives:
        # Matches nothing.
        return re.compile(r"(?!)")

    if glued:
        message = r"\s*[:\-/]*\s*(?P<message>.*)"
    else:
        message = r"(?:\s*[:\-/]+\s*|\s+)(?P<message>.*)"

    return re.compile(
        rf"^@?(?P<type>{alternatives})"
        r"(?:"
        r"\s*"
        r"|\((?P<label>[^)]*)\)\s*"
        r"|\((?P<label_with_message>[^)]*)\)\s*[:\-/]*\s*(?P<label_message>.*)"
        rf"|{message}"
        r")$"
    )


class TODOScanner:
    """
    Scans comments for TODO annotations.

    Usage:
        todos = TODOScanner(comment_scanner)
        for todo in todos:
            print(todo.line, todo.type, todo.message)
    """

    def __init__(self, scanner: CommentScanner, config: Optional[TODOConfig] = None):
        self.scanner = scanner
        self.config = config or TODOConfig()
        self._line_pattern = compile_pattern(self.config.types, glued=True)
        self._multiline_pattern = compile_pattern(self.config.types)
        self._pending: Deque[TODO] = deque()
        self._current: Optional[TODO] = None

    def advance(self) -> bool:
        """
        Move to the next TODO.

        Returns:
            True if a TODO is available from current().
        """
        while not self._pending:
            if not self.scanner.advance():
                self._current = None
                return False
            self._pending.extend(self._find_todos(self.scanner.current()))

        self._current = self._pending.popleft()
        return True

    def current(self) -> Optional[TODO]:
        """The TODO found by the last successful advance()."""
        return self._current

    def last_error(self) -> Optional[Exception]:
        """The error that stopped the underlying comment scanner, if any."""
        return self.scanner.last_error()

    def __iter__(self) -> Iterator[TODO]:
        while self.advance():
            yield self._current

    def _find_todos(self, comment: Comment) -> List[TODO]:
        if comment.multiline:
            return self._find_multiline(comment)

        todo = self._find_line(comment)
        return [todo] if todo else []

    def _find_line(self, comment: Comment) -> Optional[TODO]:
        text = comment.text.strip()
        body = text
        if comment.line_config is not None:
            body = body.lstrip(comment.line_config.start)
        body = body.strip()

        return self._match(self._line_pattern, body, text, comment.line, comment.line)

    def _find_multiline(self, comment: Comment) -> List[TODO]:
        config = comment.multiline_config
        found = []

        for offset, raw in enumerate(comment.text.split("\n")):
            line = raw.strip()
            body = line
            if config is not None:
                body = body.removeprefix(config.start).removesuffix(config.end)
            body = _DECORATION.sub("", body).strip()

            todo = self._match(
                self._multiline_pattern, body, line, comment.line + offset, comment.line
            )
            if todo:
                found.append(todo)

        return found

    def _match(
        self, pattern: Pattern[str], body: str, text: str, line: int, comment_line: int
    ) -> Optional[TODO]:
        match = pattern.match(body)
        if not match:
            return None

        label = match.group("label") or match.group("label_with_message") or ""
        message = match.group("message") or match.group("label_message") or ""

        return TODO(
            type=match.group("type"),
            text=text,
            label=label.strip(),
            message=message.strip(),
            line=line,
            comment_line=comment_line,
        )
