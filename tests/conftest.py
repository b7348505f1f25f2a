"""Shared test fixtures for the todoscan test suite."""

from typing import Callable, List, Tuple

import pytest

from todoscan.runes.reader import RuneReader
from todoscan.scanner.config import LanguageConfig
from todoscan.scanner.languages import get_language_config
from todoscan.scanner.scanner import CommentScanner
from todoscan.shared.infrastructure.logging import configure_logging
from todoscan.todos.todos import TODO, TODOConfig, TODOScanner


@pytest.fixture(scope="session", autouse=True)
def _logging():
    """Route structlog through stdlib logging so debug events stay out of stdout."""
    configure_logging()


def make_scanner(source: str, config: LanguageConfig | str) -> CommentScanner:
    """Build a comment scanner over UTF-8 encoded source text."""
    if isinstance(config, str):
        config = get_language_config(config)
    return CommentScanner(RuneReader(source.encode("utf-8")), config)


@pytest.fixture
def scan_comments() -> Callable[[str, LanguageConfig | str], List[Tuple[str, int]]]:
    """Scan source text and return (text, line) pairs for every comment."""

    def _scan(source, config):
        scanner = make_scanner(source, config)
        comments = [(c.text, c.line) for c in scanner]
        assert scanner.last_error() is None
        return comments

    return _scan


@pytest.fixture
def scan_todos() -> Callable[..., List[TODO]]:
    """Scan source text and return every TODO found."""

    def _scan(source, config, types=None):
        todo_config = TODOConfig(types=tuple(types)) if types else None
        scanner = TODOScanner(make_scanner(source, config), todo_config)
        todos = list(scanner)
        assert scanner.last_error() is None
        return todos

    return _scan


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root directory."""
    return tmp_path
