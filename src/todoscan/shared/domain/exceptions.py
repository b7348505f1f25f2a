"""
Domain exceptions for todoscan.

All application errors inherit from TodoScanError and carry an optional
context dict for structured logging.
"""


class TodoScanError(Exception):
    """Base class for all todoscan exceptions."""

    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.context = context or {}


class DecodeError(TodoScanError):
    """Raised when bytes cannot be decoded as text under the active encoding."""

    pass


class PeekLimitError(DecodeError):
    """Raised when a lookahead request exceeds the reader's peek limit."""

    pass


class UnsupportedLanguageError(TodoScanError):
    """Raised when no comment configuration exists for a file's language."""

    pass


class BinaryFileError(UnsupportedLanguageError):
    """Raised when a file's contents look like binary data."""

    pass


class ConfigurationError(TodoScanError):
    """Raised when a language or application configuration is invalid."""

    pass


class WalkError(TodoScanError):
    """Raised when a path cannot be walked or read."""

    pass
