"""
String escape rules.

Each rule inspects the reader at the current position inside a string and
returns the runes that form an escaped unit (to be skipped together), or an
empty string when the position is not escaped.
"""

from dataclasses import dataclass

from todoscan.runes.reader import RuneReader
from todoscan.shared.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class NoEscape:
    """Strings where nothing escapes the terminator (e.g. Go raw strings)."""

    def match(self, reader: RuneReader, string_end: str) -> str:
        return ""


@dataclass(frozen=True)
class CharEscape:
    """The terminator is escaped when immediately preceded by `char`."""

    char: str = "\\"

    def __post_init__(self):
        if len(self.char) != 1:
            raise ConfigurationError(
                f"invalid escape character {self.char!r}",
                context={"char": self.char},
            )

    def match(self, reader: RuneReader, string_end: str) -> str:
        escaped = self.char + string_end
        runes, _ = reader.peek(len(escaped))
        if runes == escaped:
            return escaped

        # An escaped escape character must not hide the real terminator.
        if self.char != string_end[:1]:
            runes, _ = reader.peek(2)
            if runes == self.char * 2:
                return runes

        return ""


@dataclass(frozen=True)
class DoubleEscape:
    """The terminator is escaped by repeating it (e.g. SQL '')."""

    def match(self, reader: RuneReader, string_end: str) -> str:
        doubled = string_end * 2
        runes, _ = reader.peek(len(doubled))
        if runes == doubled:
            return doubled
        return ""


EscapeRule = NoEscape | CharEscape | DoubleEscape
