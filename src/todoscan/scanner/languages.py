"""
Language configuration table.

Maps language names (as reported by the language registry) to their comment
and string syntax. The table is built from literals at import time and exposed
read-only.
"""

from types import MappingProxyType
from typing import List, Mapping

from todoscan.scanner.config import (
    LanguageConfig,
    LineCommentConfig,
    MultilineCommentConfig,
    StringConfig,
)
from todoscan.scanner.escape import CharEscape, DoubleEscape, NoEscape
from todoscan.shared.domain.exceptions import UnsupportedLanguageError

BACKSLASH = CharEscape("\\")

DOUBLE_QUOTE = StringConfig('"', '"', BACKSLASH)
SINGLE_QUOTE = StringConfig("'", "'", BACKSLASH)
QUOTES = (DOUBLE_QUOTE, SINGLE_QUOTE)
RAW_QUOTES = (
    StringConfig('"', '"', NoEscape()),
    StringConfig("'", "'", NoEscape()),
)

SLASH_LINE = (LineCommentConfig("//"),)
HASH_LINE = (LineCommentConfig("#"),)
DASH_LINE = (LineCommentConfig("--"),)
SEMICOLON_LINE = (LineCommentConfig(";"),)

C_BLOCK = (MultilineCommentConfig("/*", "*/"),)
C_NESTED_BLOCK = (MultilineCommentConfig("/*", "*/", nested=True),)
XML_BLOCK = (MultilineCommentConfig("<!--", "-->"),)

# C-family: C, C++, C#, Java, JavaScript, TypeScript, Objective-C, Groovy
C_STYLE = LanguageConfig(
    line_comments=SLASH_LINE,
    multiline_comments=C_BLOCK,
    strings=QUOTES,
)

# Block comments nest: Kotlin, Rust, Scala, Swift
C_NESTED_STYLE = LanguageConfig(
    line_comments=SLASH_LINE,
    multiline_comments=C_NESTED_BLOCK,
    strings=QUOTES,
)

# Hash comments only: Shell, Makefile, Dockerfile, YAML, TOML, R, Puppet
HASH_STYLE = LanguageConfig(
    line_comments=HASH_LINE,
    strings=QUOTES,
)

ASSEMBLY_STYLE = LanguageConfig(
    line_comments=SEMICOLON_LINE,
    multiline_comments=C_BLOCK,
    strings=RAW_QUOTES,
)

LISP_STYLE = LanguageConfig(
    line_comments=SEMICOLON_LINE,
    strings=(DOUBLE_QUOTE,),
)

FORTRAN_STYLE = LanguageConfig(
    line_comments=(LineCommentConfig("!"),),
    strings=RAW_QUOTES,
)

XML_STYLE = LanguageConfig(
    multiline_comments=XML_BLOCK,
    strings=QUOTES,
)

BASIC_STYLE = LanguageConfig(
    line_comments=(LineCommentConfig("'"),),
    strings=(DOUBLE_QUOTE,),
)

_LANGUAGES = {
    "Assembly": ASSEMBLY_STYLE,
    "C": C_STYLE,
    "C#": C_STYLE,
    "C++": C_STYLE,
    "Clojure": LISP_STYLE,
    "CoffeeScript": LanguageConfig(
        line_comments=HASH_LINE,
        multiline_comments=(MultilineCommentConfig("###", "###"),),
        strings=QUOTES,
    ),
    "Dockerfile": HASH_STYLE,
    "Emacs Lisp": LISP_STYLE,
    "Erlang": LanguageConfig(
        line_comments=(LineCommentConfig("%"),),
        strings=QUOTES,
    ),
    "Fortran": FORTRAN_STYLE,
    "Fortran Free Form": FORTRAN_STYLE,
    "Go": LanguageConfig(
        line_comments=SLASH_LINE,
        multiline_comments=C_BLOCK,
        strings=(
            DOUBLE_QUOTE,
            SINGLE_QUOTE,  # rune
            StringConfig("`", "`", NoEscape()),  # raw string
        ),
    ),
    # go.sum files have no comments
    "Go Module": LanguageConfig(
        line_comments=SLASH_LINE,
        strings=(
            DOUBLE_QUOTE,
            StringConfig("`", "`", NoEscape()),
        ),
    ),
    "Groovy": LanguageConfig(
        line_comments=SLASH_LINE,
        multiline_comments=C_BLOCK,
        strings=(
            DOUBLE_QUOTE,
            SINGLE_QUOTE,
            StringConfig("'''", "'''", BACKSLASH),
        ),
    ),
    "HTML": XML_STYLE,
    "Haskell": LanguageConfig(
        line_comments=DASH_LINE,
        multiline_comments=(MultilineCommentConfig("{-", "-}", nested=True),),
        strings=QUOTES,
    ),
    # Some JSON dialects (tsconfig.json, HOCON) allow comments.
    "JSON": LanguageConfig(
        line_comments=(LineCommentConfig("//"), LineCommentConfig("#")),
        multiline_comments=C_BLOCK,
        strings=QUOTES,
    ),
    "Java": C_STYLE,
    "JavaScript": C_STYLE,
    "Kotlin": C_NESTED_STYLE,
    "Lua": LanguageConfig(
        line_comments=DASH_LINE,
        multiline_comments=(MultilineCommentConfig("--[[", "--]]"),),
        strings=QUOTES,
    ),
    "MATLAB": LanguageConfig(
        line_comments=(LineCommentConfig("%"),),
        multiline_comments=(MultilineCommentConfig("%{", "}%"),),
        strings=QUOTES,
    ),
    "Makefile": HASH_STYLE,
    "Objective-C": C_STYLE,
    "PHP": LanguageConfig(
        line_comments=(LineCommentConfig("#"), LineCommentConfig("//")),
        multiline_comments=C_BLOCK,
        strings=QUOTES,
    ),
    # Only quoted strings; q{} and qq// forms are not recognised.
    "Perl": LanguageConfig(
        line_comments=HASH_LINE,
        multiline_comments=(MultilineCommentConfig("=", "=cut", at_first_column=True),),
        strings=QUOTES,
    ),
    "PowerShell": LanguageConfig(
        line_comments=HASH_LINE,
        multiline_comments=(MultilineCommentConfig("<#", "#>"),),
        strings=(
            StringConfig('"', '"', CharEscape("`")),
            StringConfig("'", "'", CharEscape("`")),
        ),
    ),
    "Puppet": HASH_STYLE,
    "Python": LanguageConfig(
        line_comments=HASH_LINE,
        multiline_comments=(
            MultilineCommentConfig('"""', '"""'),
            MultilineCommentConfig("'''", "'''"),
        ),
        strings=QUOTES,
    ),
    "R": HASH_STYLE,
    "Ruby": LanguageConfig(
        line_comments=HASH_LINE,
        multiline_comments=(MultilineCommentConfig("=begin", "=end", at_first_column=True),),
        strings=(
            DOUBLE_QUOTE,
            SINGLE_QUOTE,
            StringConfig("%{", "}", BACKSLASH),
        ),
    ),
    "Rust": C_NESTED_STYLE,
    "SQL": LanguageConfig(
        line_comments=DASH_LINE,
        multiline_comments=C_BLOCK,
        strings=(
            StringConfig('"', '"', DoubleEscape()),
            StringConfig("'", "'", DoubleEscape()),
        ),
    ),
    "Scala": C_NESTED_STYLE,
    "Shell": HASH_STYLE,
    "Swift": LanguageConfig(
        line_comments=SLASH_LINE,
        multiline_comments=C_NESTED_BLOCK,
        strings=(DOUBLE_QUOTE,),
    ),
    "TOML": HASH_STYLE,
    "TeX": LanguageConfig(
        line_comments=(LineCommentConfig("%"),),
    ),
    "TypeScript": C_STYLE,
    "Unix Assembly": ASSEMBLY_STYLE,
    "VBA": BASIC_STYLE,
    # Double quotes open both strings and comments; see LineCommentOrStringState.
    "Vim Script": LanguageConfig(
        line_comments=(LineCommentConfig('"'),),
        strings=QUOTES,
    ),
    "Visual Basic .NET": BASIC_STYLE,
    "XML": XML_STYLE,
    "YAML": HASH_STYLE,
}

LANGUAGES: Mapping[str, LanguageConfig] = MappingProxyType(_LANGUAGES)


def get_language_config(language: str) -> LanguageConfig:
    """
    Look up the scanner configuration for a language.

    Raises:
        UnsupportedLanguageError: If the language has no configuration
    """
    try:
        return LANGUAGES[language]
    except KeyError:
        raise UnsupportedLanguageError(
            f"unsupported language: {language}",
            context={"language": language},
        ) from None


def supported_languages() -> List[str]:
    """Names of all languages with a scanner configuration."""
    return sorted(LANGUAGES)
