"""Comment scanning for source code in many languages."""

from todoscan.scanner.comment import Comment
from todoscan.scanner.config import (
    LanguageConfig,
    LineCommentConfig,
    MultilineCommentConfig,
    StringConfig,
)
from todoscan.scanner.escape import CharEscape, DoubleEscape, EscapeRule, NoEscape
from todoscan.scanner.languages import LANGUAGES, get_language_config, supported_languages
from todoscan.scanner.loader import from_bytes, from_file
from todoscan.scanner.scanner import CommentScanner

__all__ = [
    "CharEscape",
    "Comment",
    "CommentScanner",
    "DoubleEscape",
    "EscapeRule",
    "LANGUAGES",
    "LanguageConfig",
    "LineCommentConfig",
    "MultilineCommentConfig",
    "NoEscape",
    "StringConfig",
    "from_bytes",
    "from_file",
    "get_language_config",
    "supported_languages",
]
