"""
Central Language Registry.

Maps file paths to language names using file names first, then extensions.
"""

from pathlib import Path
from typing import Dict, Optional

from todoscan.shared.languages.definitions import LANGUAGE_DEFINITIONS, LanguageDefinition


class LanguageRegistry:
    """
    Central registry for language-related operations.
    Unifies file name and extension mapping.
    """

    _definitions: Dict[str, LanguageDefinition] = {d.name: d for d in LANGUAGE_DEFINITIONS}
    _extension_map: Dict[str, str] = {}
    _filename_map: Dict[str, str] = {}

    @classmethod
    def _initialize_maps(cls):
        if not cls._extension_map:
            for defn in cls._definitions.values():
                for ext in defn.extensions:
                    cls._extension_map.setdefault(ext.lower(), defn.name)
                for filename in defn.filenames:
                    cls._filename_map.setdefault(filename, defn.name)

    @classmethod
    def get_language_from_path(cls, path: Path | str) -> Optional[str]:
        """Detect language from file name or extension."""
        cls._initialize_maps()
        if not path:
            return None

        path = Path(path)
        if path.name in cls._filename_map:
            return cls._filename_map[path.name]

        return cls._extension_map.get(path.suffix.lower())
