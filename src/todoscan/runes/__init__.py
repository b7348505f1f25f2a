"""Unicode code point reader with bounded lookahead."""

from todoscan.runes.reader import DEFAULT_MAX_PEEK, RuneReader

__all__ = [
    "DEFAULT_MAX_PEEK",
    "RuneReader",
]
