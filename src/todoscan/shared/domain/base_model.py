"""
Base domain model with JSON compatibility.

Records serialize to plain dicts keyed by their field names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class BaseDomainModel:
    """Base class for immutable domain records."""

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-compatible dict.

        Returns:
            Dictionary of field name to value, in field order
        """
        return {field.name: getattr(self, field.name) for field in fields(self)}
