"""
Ignore Matcher - Pattern Matching for File Exclusions.

Loads and applies ignore patterns from ignore files (gitignore syntax) found
in walked directories. Patterns apply to the directory holding the ignore
file and everything below it.
"""

import fnmatch
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Sequence

from todoscan.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_IGNORE_FILE_NAMES = (".gitignore", ".todosignore")


@dataclass(frozen=True)
class IgnorePattern:
    """
    A single gitignore-style pattern.

    Attributes:
        pattern: Glob with the negation and trailing slash removed
        base: Directory the pattern is relative to
        negated: Pattern started with "!" and re-includes matches
        dir_only: Pattern ended with "/" and only matches directories
        anchored: Pattern contains a "/" and matches from base only
    """

    pattern: str
    base: PurePosixPath
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False

    @classmethod
    def parse(cls, line: str, base: PurePosixPath) -> Optional["IgnorePattern"]:
        """Parse one line of an ignore file; blank lines and comments give None."""
        line = line.rstrip("\n").rstrip()
        if not line or line.startswith("#"):
            return None

        negated = line.startswith("!")
        if negated:
            line = line[1:]
        elif line.startswith("\\"):
            line = line[1:]

        dir_only = line.endswith("/")
        line = line.rstrip("/")
        anchored = "/" in line
        line = line.lstrip("/")
        if not line:
            return None

        return cls(line, base, negated=negated, dir_only=dir_only, anchored=anchored)

    def match(self, path: PurePosixPath, is_dir: bool) -> bool:
        """
        Check if a path relative to the walk root matches.

        Args:
            path: Path relative to the walk root, using "/" separators
            is_dir: Whether the path is a directory
        """
        if self.dir_only and not is_dir:
            return False

        size = len(self.base.parts)
        if path.parts[:size] != self.base.parts:
            return False
        relative = PurePosixPath(*path.parts[size:])

        if not self.anchored:
            return fnmatch.fnmatchcase(relative.name, self.pattern)

        return _match_path_pattern(str(relative), self.pattern)


def _match_path_pattern(path: str, pattern: str) -> bool:
    """
    Match a relative path against a glob pattern with ** support.

    "*" does not cross directory boundaries; "**" matches any number of
    directories.
    """
    path_parts = path.split("/")
    pattern_parts = pattern.split("/")
    return _match_parts(path_parts, pattern_parts)


def _match_parts(path_parts: List[str], pattern_parts: List[str]) -> bool:
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(
            _match_parts(path_parts[i:], rest) for i in range(len(path_parts) + 1)
        )

    if not path_parts:
        return False

    return fnmatch.fnmatchcase(path_parts[0], head) and _match_parts(path_parts[1:], rest)


class IgnoreMatcher:
    """
    Matcher for ignore patterns read from ignore files.

    Call load_directory() for each directory as it is entered; patterns from
    parent directories stay in effect for their children. The last matching
    pattern wins, so "!" patterns can re-include paths.
    """

    def __init__(
        self,
        root: Path,
        ignore_file_names: Sequence[str] = DEFAULT_IGNORE_FILE_NAMES,
    ):
        """
        Initialize ignore matcher.

        Args:
            root: Directory the walk starts from
            ignore_file_names: Names of ignore files to read in each directory
        """
        self.root = root
        self.ignore_file_names = tuple(ignore_file_names)
        self._patterns: Dict[PurePosixPath, List[IgnorePattern]] = {}

    def load_directory(self, directory: Path) -> None:
        """Load ignore files found directly inside a directory."""
        base = self._relative(directory)
        if base in self._patterns:
            return

        patterns: List[IgnorePattern] = []
        for name in self.ignore_file_names:
            ignore_file = directory / name
            if not ignore_file.is_file():
                continue

            try:
                with open(ignore_file, encoding="utf-8", errors="replace") as f:
                    patterns.extend(self._parse_lines(f, base))
            except OSError as e:
                logger.warning("ignore_file_load_failed", path=str(ignore_file), error=str(e))
                continue

            logger.debug("ignore_file_loaded", path=str(ignore_file), count=len(patterns))

        self._patterns[base] = patterns

    def should_ignore(self, path: Path, is_dir: bool) -> bool:
        """
        Check if a path should be ignored.

        Args:
            path: Full path to the file or directory
            is_dir: Whether the path is a directory

        Returns:
            True if the last matching pattern excludes the path
        """
        relative = self._relative(path)
        ignored = False

        for base in sorted(self._patterns, key=lambda p: len(p.parts)):
            for pattern in self._patterns[base]:
                if pattern.match(relative, is_dir):
                    ignored = not pattern.negated

        if ignored:
            logger.debug("path_ignored", path=str(relative))
        return ignored

    def _relative(self, path: Path) -> PurePosixPath:
        try:
            return PurePosixPath(path.relative_to(self.root).as_posix())
        except ValueError:
            return PurePosixPath(path.as_posix())

    @staticmethod
    def _parse_lines(lines: Iterable[str], base: PurePosixPath) -> List[IgnorePattern]:
        patterns = []
        for line in lines:
            pattern = IgnorePattern.parse(line, base)
            if pattern is not None:
                patterns.append(pattern)
        return patterns
