"""
Comment Scanner

Lexes source code into comments using a language's comment and string syntax.
The scanner is a state machine over a RuneReader: code is skipped, string
literals are skipped (honouring their escape rules) and comments are emitted
one at a time through advance()/current().
"""

from typing import Iterator, List, Optional

from todoscan.runes.reader import RuneReader
from todoscan.scanner.comment import Comment
from todoscan.scanner.config import LanguageConfig, MultilineCommentConfig
from todoscan.scanner.state import (
    CodeState,
    LineCommentOrStringState,
    LineCommentState,
    MultilineCommentState,
    State,
    StringState,
)
from todoscan.shared.domain.exceptions import DecodeError
from todoscan.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class _EndOfInput(Exception):
    """Raised internally when the reader has no more runes to consume."""


class CommentScanner:
    """
    Scans source code for comments.

    Usage:
        scanner = CommentScanner(RuneReader(data), get_language_config("Go"))
        while scanner.advance():
            print(scanner.current().line, scanner.current().text)
        if scanner.last_error():
            ...

    The sequence is forward-only: once advance() returns False it keeps
    returning False.
    """

    def __init__(
        self,
        reader: RuneReader,
        config: LanguageConfig,
        language: Optional[str] = None,
    ):
        self.reader = reader
        self.config = config
        self.language = language

        self._state: State = CodeState()
        self._text: List[str] = []
        self._start_line = 0
        self._at_line_start = True

        self._current: Optional[Comment] = None
        self._error: Optional[Exception] = None
        self._done = False

    def advance(self) -> bool:
        """
        Move to the next comment.

        Returns:
            True if a comment is available from current(), False at end of
            input or after an error (see last_error()).
        """
        self._current = None
        if self._done:
            return False

        try:
            while self._current is None:
                self._step()
        except _EndOfInput:
            self._done = True
            return False
        except DecodeError as e:
            self._done = True
            self._error = e
            logger.debug(
                "scan_halted",
                language=self.language,
                line=self.reader.line,
                error=str(e),
            )
            return False

        return True

    def current(self) -> Optional[Comment]:
        """The comment found by the last successful advance()."""
        return self._current

    def last_error(self) -> Optional[Exception]:
        """The error that stopped scanning, if any."""
        return self._error

    def __iter__(self) -> Iterator[Comment]:
        while self.advance():
            yield self._current

    def _step(self) -> None:
        state = self._state
        if isinstance(state, CodeState):
            self._scan_code()
        elif isinstance(state, LineCommentState):
            self._scan_line_comment(state)
        elif isinstance(state, MultilineCommentState):
            self._scan_multiline_comment(state)
        elif isinstance(state, StringState):
            self._scan_string(state)
        elif isinstance(state, LineCommentOrStringState):
            self._scan_line_comment_or_string(state)
        else:
            raise TypeError(f"unknown scanner state: {state!r}")

    def _scan_code(self) -> None:
        """Look for the start of a comment or string; longest match wins."""
        config = self.config
        best = 0
        state: Optional[State] = None

        for i, line_comment in enumerate(config.line_comments):
            if len(line_comment.start) > best and self._lookahead(line_comment.start):
                best = len(line_comment.start)
                state = LineCommentState(i)

        for i, string in enumerate(config.strings):
            size = len(string.start)
            if size < best or not self._lookahead(string.start):
                continue
            if size > best:
                best = size
                state = StringState(i)
            elif isinstance(state, LineCommentState):
                # The same delimiter opens a line comment and a string.
                state = LineCommentOrStringState(state.index, i)

        for i, multiline in enumerate(config.multiline_comments):
            size = len(multiline.start)
            if size < best or (
                size == best and isinstance(state, MultilineCommentState)
            ):
                continue
            if self._gate_open(multiline) and self._lookahead(multiline.start):
                best = size
                state = MultilineCommentState(i, self.reader.line)

        if state is None:
            self._take(1)
            return

        self._start_line = self.reader.line
        start = self._take(best)
        if isinstance(state, StringState):
            self._text = []
        else:
            self._text = [start]
        self._state = state

    def _scan_line_comment(self, state: LineCommentState) -> None:
        while not self._at_line_end():
            self._text.append(self._take(1))

        self._emit(
            Comment(
                text="".join(self._text),
                line=self._start_line,
                line_config=self.config.line_comments[state.index],
            )
        )

    def _scan_multiline_comment(self, state: MultilineCommentState) -> None:
        config = self.config.multiline_comments[state.index]
        depth = 1

        while True:
            gate_open = self._gate_open(config)

            if gate_open and self._lookahead(config.end):
                self._text.append(self._take(len(config.end)))
                depth -= 1
                if depth == 0:
                    break
                continue

            if config.nested and gate_open and self._lookahead(config.start):
                self._text.append(self._take(len(config.start)))
                depth += 1
                continue

            self._text.append(self._take(1))

        self._emit(
            Comment(
                text="".join(self._text),
                line=state.line,
                multiline=True,
                multiline_config=config,
            )
        )

    def _scan_string(self, state: StringState) -> None:
        config = self.config.strings[state.index]

        while True:
            escaped = config.escape.match(self.reader, config.end)
            if escaped:
                self._take(len(escaped))
                continue

            if self._lookahead(config.end):
                self._take(len(config.end))
                break

            self._take(1)

        self._text = []
        self._state = CodeState()

    def _scan_line_comment_or_string(self, state: LineCommentOrStringState) -> None:
        string = self.config.strings[state.string_index]

        while not self._at_line_end():
            escaped = string.escape.match(self.reader, string.end)
            if escaped:
                self._text.append(self._take(len(escaped)))
                continue

            if self._lookahead(string.end):
                # Closed on the same line, so it was a string.
                self._take(len(string.end))
                self._text = []
                self._state = CodeState()
                return

            self._text.append(self._take(1))

        self._emit(
            Comment(
                text="".join(self._text),
                line=self._start_line,
                line_config=self.config.line_comments[state.line_index],
            )
        )

    def _emit(self, comment: Comment) -> None:
        self._current = comment
        self._text = []
        self._state = CodeState()

    def _gate_open(self, config: MultilineCommentConfig) -> bool:
        if config.at_first_column and self.reader.column != 0:
            return False
        if config.at_line_start and not self._at_line_start:
            return False
        return True

    def _lookahead(self, delimiter: str) -> bool:
        runes, ok = self.reader.peek(len(delimiter))
        return ok and runes == delimiter

    def _at_line_end(self) -> bool:
        """True at a line terminator or at end of input."""
        runes, _ = self.reader.peek(2)
        return not runes or runes[0] == "\n" or runes == "\r\n"

    def _take(self, n: int) -> str:
        """Consume up to n runes and return them."""
        runes, _ = self.reader.peek(n)
        if not runes:
            raise _EndOfInput()
        self.reader.advance(len(runes))

        for rune in runes:
            if rune == "\n":
                self._at_line_start = True
            elif not rune.isspace():
                self._at_line_start = False

        return runes
