"""
Tests for file name and extension based language detection.
"""

import pytest

from todoscan.shared.languages.definitions import LANGUAGE_DEFINITIONS
from todoscan.shared.languages.registry import LanguageRegistry


class TestLanguageRegistry:

    @pytest.mark.parametrize(
        "path, language",
        [
            ("main.go", "Go"),
            ("go.mod", "Go Module"),
            ("build/Dockerfile", "Dockerfile"),
            ("Makefile", "Makefile"),
            ("script.PY", "Python"),
            ("lib/tasks.rake", "Ruby"),
            ("index.tsx", "TypeScript"),
            ("page.html", "HTML"),
        ],
    )
    def test_detects_language(self, path, language):
        assert LanguageRegistry.get_language_from_path(path) == language

    @pytest.mark.parametrize("path", ["", "README", "notes.unknownext"])
    def test_unknown(self, path):
        assert LanguageRegistry.get_language_from_path(path) is None

    def test_extensions_are_unique(self):
        """Test no extension is claimed by two languages."""
        seen = {}
        for definition in LANGUAGE_DEFINITIONS:
            for ext in definition.extensions:
                assert ext not in seen, f"{ext} claimed by {seen[ext]} and {definition.name}"
                seen[ext] = definition.name

    def test_extensions_are_dotted(self):
        for definition in LANGUAGE_DEFINITIONS:
            assert all(ext.startswith(".") for ext in definition.extensions), definition.name
