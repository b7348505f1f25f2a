"""
Scanner loader.

Builds a CommentScanner for a file: rejects binary content, resolves the
character set and picks the language configuration from the file name.
"""

import codecs
from pathlib import Path
from typing import Optional

from todoscan.runes.reader import RuneReader
from todoscan.scanner.languages import LANGUAGES
from todoscan.scanner.scanner import CommentScanner
from todoscan.shared.domain.exceptions import (
    BinaryFileError,
    DecodeError,
    UnsupportedLanguageError,
)
from todoscan.shared.infrastructure.logging import get_logger
from todoscan.shared.languages.registry import LanguageRegistry

logger = get_logger(__name__)

# Number of leading bytes inspected for binary content.
SNIFF_LENGTH = 8000

DETECT_CHARSET = "detect"

# Checked longest first so UTF-32 LE is not mistaken for UTF-16 LE.
_BOMS = (
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_BE, "utf-16"),
    (codecs.BOM_UTF16_LE, "utf-16"),
)


def is_binary(data: bytes) -> bool:
    """True if the leading bytes contain a NUL byte."""
    return b"\x00" in data[:SNIFF_LENGTH]


def detect_charset(data: bytes) -> str:
    """Guess the encoding from a byte-order mark, defaulting to UTF-8."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    return "utf-8"


def resolve_charset(charset: str, data: bytes) -> str:
    """
    Resolve a user supplied character set name to a Python codec name.

    Raises:
        DecodeError: If the character set is unknown
    """
    if charset.lower() == DETECT_CHARSET:
        return detect_charset(data)

    try:
        name = codecs.lookup(charset).name
    except LookupError as e:
        raise DecodeError(
            f"unsupported character set: {charset}",
            context={"charset": charset},
        ) from e

    return name


def from_bytes(file_name: str, data: bytes, charset: str = "utf-8") -> CommentScanner:
    """
    Create a comment scanner for a file's contents.

    Args:
        file_name: Path or base name used to detect the language
        data: Raw file contents
        charset: Codec name, or "detect" to sniff a byte-order mark

    Raises:
        BinaryFileError: If the contents look binary
        DecodeError: If the character set is unknown
        UnsupportedLanguageError: If the language is unknown or unconfigured
    """
    if is_binary(data):
        raise BinaryFileError(
            f"{file_name}: binary file",
            context={"path": file_name},
        )

    encoding = resolve_charset(charset, data)

    language: Optional[str] = LanguageRegistry.get_language_from_path(file_name)
    if language is None:
        raise UnsupportedLanguageError(
            f"{file_name}: unsupported language",
            context={"path": file_name},
        )

    config = LANGUAGES.get(language)
    if config is None:
        raise UnsupportedLanguageError(
            f"{file_name}: unsupported language: {language}",
            context={"path": file_name, "language": language},
        )

    logger.debug("scanner_created", path=file_name, language=language, encoding=encoding)
    return CommentScanner(RuneReader(data, encoding=encoding), config, language=language)


def from_file(path: Path | str, charset: str = "utf-8") -> CommentScanner:
    """
    Read a file and create a comment scanner for it.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    return from_bytes(str(path), path.read_bytes(), charset=charset)
