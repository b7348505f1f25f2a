"""Tests for the language configuration table."""

import pytest

from todoscan.scanner.config import (
    LanguageConfig,
    LineCommentConfig,
    MultilineCommentConfig,
    StringConfig,
)
from todoscan.scanner.escape import CharEscape, DoubleEscape, NoEscape
from todoscan.scanner.languages import LANGUAGES, get_language_config, supported_languages
from todoscan.shared.domain.exceptions import ConfigurationError, UnsupportedLanguageError
from todoscan.shared.languages.definitions import LANGUAGE_DEFINITIONS


class TestLanguageTable:
    """Test the built-in language table."""

    def test_table_is_read_only(self):
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            LANGUAGES["Brainfuck"] = LanguageConfig()

    def test_supported_languages_sorted(self):
        """Test supported languages are listed in order."""
        names = supported_languages()

        assert names == sorted(names)
        assert "Go" in names
        assert "Vim Script" in names
        assert len(names) == 45

    def test_get_language_config(self):
        """Test looking up a configured language."""
        config = get_language_config("Go")

        assert config.line_comments == (LineCommentConfig("//"),)
        assert StringConfig("`", "`", NoEscape()) in config.strings

    def test_unknown_language(self):
        """Test unknown languages raise UnsupportedLanguageError."""
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_language_config("Klingon")

        assert exc_info.value.context["language"] == "Klingon"

    @pytest.mark.parametrize("language", ["Haskell", "Kotlin", "Rust", "Scala", "Swift"])
    def test_nested_block_comments(self, language):
        """Test languages whose block comments nest."""
        config = get_language_config(language)

        assert all(m.nested for m in config.multiline_comments)

    @pytest.mark.parametrize(
        "language, start, end",
        [("Perl", "=", "=cut"), ("Ruby", "=begin", "=end")],
    )
    def test_first_column_block_comments(self, language, start, end):
        """Test languages whose block comments must start in column one."""
        (config,) = get_language_config(language).multiline_comments

        assert (config.start, config.end) == (start, end)
        assert config.at_first_column

    def test_sql_double_escape(self):
        """Test SQL strings escape quotes by doubling them."""
        assert all(isinstance(s.escape, DoubleEscape) for s in get_language_config("SQL").strings)

    def test_powershell_backtick_escape(self):
        """Test PowerShell strings escape with a backtick."""
        assert all(s.escape == CharEscape("`") for s in get_language_config("PowerShell").strings)

    def test_tex_has_no_strings(self):
        """Test TeX treats quotes as plain text."""
        assert get_language_config("TeX").strings == ()

    def test_every_registry_language_is_configured(self):
        """Test every language the registry can detect has a configuration."""
        assert {d.name for d in LANGUAGE_DEFINITIONS} == set(LANGUAGES)


class TestConfigValidation:
    """Test configuration records reject invalid values."""

    def test_empty_line_comment(self):
        """Test empty line comment delimiters are rejected."""
        with pytest.raises(ConfigurationError):
            LineCommentConfig("")

    def test_empty_multiline_end(self):
        """Test empty block comment delimiters are rejected."""
        with pytest.raises(ConfigurationError):
            MultilineCommentConfig("/*", "")

    def test_nested_needs_distinct_delimiters(self):
        """Test nestable comments need different start and end delimiters."""
        with pytest.raises(ConfigurationError):
            MultilineCommentConfig('"""', '"""', nested=True)

    def test_empty_string_delimiter(self):
        """Test empty string delimiters are rejected."""
        with pytest.raises(ConfigurationError):
            StringConfig("", '"')

    def test_escape_must_be_single_character(self):
        """Test escape characters are exactly one rune."""
        with pytest.raises(ConfigurationError):
            CharEscape("\\\\")

    def test_string_default_escape(self):
        """Test strings escape with a backslash by default."""
        assert StringConfig('"', '"').escape == CharEscape("\\")

    def test_configs_are_hashable(self):
        """Test configuration records are immutable values."""
        config = MultilineCommentConfig("/*", "*/")

        assert hash(config) == hash(MultilineCommentConfig("/*", "*/"))
