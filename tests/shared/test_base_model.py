"""
Tests for domain records and exceptions.
"""

from dataclasses import dataclass

from todoscan.shared.domain.base_model import BaseDomainModel
from todoscan.shared.domain.exceptions import (
    BinaryFileError,
    DecodeError,
    PeekLimitError,
    TodoScanError,
    UnsupportedLanguageError,
)


@dataclass(frozen=True)
class Record(BaseDomainModel):
    file_path: str
    start_line: int


class TestToJson:

    def test_keys_follow_field_order(self):
        """Test keys are the field names, in declaration order."""
        data = Record(file_path="a.go", start_line=1).to_json()

        assert list(data) == ["file_path", "start_line"]
        assert data == {"file_path": "a.go", "start_line": 1}


class TestExceptions:

    def test_context_defaults_to_empty(self):
        assert TodoScanError("boom").context == {}

    def test_hierarchy(self):
        assert issubclass(PeekLimitError, DecodeError)
        assert issubclass(BinaryFileError, UnsupportedLanguageError)
        assert issubclass(UnsupportedLanguageError, TodoScanError)
