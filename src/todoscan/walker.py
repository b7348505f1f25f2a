"""
TODO Walker

Walks files and directories, runs the comment scanner and TODO matcher on
every supported file and hands each TODO to a callback.
"""

import fnmatch
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from todoscan.scanner.loader import from_bytes
from todoscan.shared.domain.exceptions import (
    TodoScanError,
    UnsupportedLanguageError,
    WalkError,
)
from todoscan.shared.infrastructure.ignore_matcher import (
    DEFAULT_IGNORE_FILE_NAMES,
    IgnoreMatcher,
)
from todoscan.shared.infrastructure.logging import get_logger
from todoscan.todos.todos import TODO, TODOConfig, TODOScanner

logger = get_logger(__name__)

VCS_DIRS = frozenset({".git", ".hg", ".svn"})

VENDORED_DIRS = frozenset(
    {
        "node_modules",
        "bower_components",
        "vendor",
        "vendors",
        "third_party",
        "third-party",
        "3rdparty",
        "external",
        "Godeps",
        "Carthage",
        "Pods",
        "site-packages",
        "dist-packages",
    }
)


@dataclass(frozen=True)
class TodoRef:
    """A TODO and the file it was found in."""

    path: str
    todo: TODO


TodoHandler = Callable[[TodoRef], None]
ErrorHandler = Callable[[WalkError], None]


@dataclass
class WalkerOptions:
    """
    Options for TodoWalker.

    Hidden, VCS and vendored paths are only skipped when discovered while
    walking a directory; paths given explicitly are always scanned.
    """

    paths: List[str] = field(default_factory=lambda: ["."])
    todo_config: TODOConfig = field(default_factory=TODOConfig)
    charset: str = "utf-8"
    exclude_globs: List[str] = field(default_factory=list)
    exclude_dir_globs: List[str] = field(default_factory=list)
    include_hidden: bool = False
    include_vcs: bool = False
    include_vendored: bool = False
    label_globs: List[str] = field(default_factory=list)
    ignore_file_names: Sequence[str] = DEFAULT_IGNORE_FILE_NAMES
    todo_handler: Optional[TodoHandler] = None
    error_handler: Optional[ErrorHandler] = None


class TodoWalker:
    """
    Walks paths looking for TODOs.

    Usage:
        walker = TodoWalker(WalkerOptions(paths=["src"], todo_handler=print))
        had_errors = walker.walk()

    Errors are reported through the error handler and walking continues. A
    handler that raises stops the walk.
    """

    def __init__(self, options: Optional[WalkerOptions] = None):
        self.options = options or WalkerOptions()
        self._had_error = False
        self._matcher: Optional[IgnoreMatcher] = None

    def walk(self) -> bool:
        """
        Walk all configured paths.

        Returns:
            True if any error was reported.
        """
        for raw_path in self.options.paths:
            path = Path(raw_path)
            if path.is_dir():
                self._matcher = IgnoreMatcher(path, self.options.ignore_file_names)
                self._walk_dir(path)
            elif path.exists():
                # Explicitly listed files are always scanned.
                self._scan_file(path, force=True)
            else:
                self._report(WalkError(f"{raw_path}: no such file or directory", context={"path": raw_path}))

        return self._had_error

    def _walk_dir(self, directory: Path) -> None:
        self._matcher.load_directory(directory)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._report(WalkError(f"{directory}: {e.strerror or e}", context={"path": str(directory)}))
            return

        for entry in entries:
            path = Path(entry.path)
            try:
                if entry.is_symlink():
                    continue
                is_dir = entry.is_dir()
            except OSError as e:
                self._report(WalkError(f"{path}: {e.strerror or e}", context={"path": str(path)}))
                continue

            if is_dir:
                if self._include_dir(path):
                    self._walk_dir(path)
            elif self._include_file(path):
                self._scan_file(path, force=False)

    def _include_dir(self, path: Path) -> bool:
        name = path.name
        options = self.options

        if any(fnmatch.fnmatchcase(name, g) for g in options.exclude_dir_globs):
            return False
        if not options.include_vcs and name in VCS_DIRS:
            return False
        if not options.include_hidden and _is_hidden(name) and name not in VCS_DIRS:
            return False
        if not options.include_vendored and name in VENDORED_DIRS:
            logger.debug("dir_skipped", path=str(path), reason="vendored")
            return False
        if self._matcher.should_ignore(path, is_dir=True):
            return False
        return True

    def _include_file(self, path: Path) -> bool:
        name = path.name
        options = self.options

        if any(fnmatch.fnmatchcase(name, g) for g in options.exclude_globs):
            return False
        if not options.include_hidden and _is_hidden(name):
            return False
        if self._matcher.should_ignore(path, is_dir=False):
            return False
        return True

    def _scan_file(self, path: Path, force: bool) -> None:
        try:
            data = path.read_bytes()
        except OSError as e:
            self._report(WalkError(f"{path}: {e.strerror or e}", context={"path": str(path)}))
            return

        try:
            scanner = from_bytes(str(path), data, charset=self.options.charset)
        except UnsupportedLanguageError as e:
            if force:
                self._report(WalkError(str(e), context=e.context))
            else:
                logger.debug("file_skipped", path=str(path), reason=str(e))
            return
        except TodoScanError as e:
            self._report(WalkError(f"{path}: {e}", context={"path": str(path), **e.context}))
            return

        todos = TODOScanner(scanner, self.options.todo_config)
        for todo in todos:
            if not self._label_matches(todo.label):
                continue
            if self.options.todo_handler is not None:
                self.options.todo_handler(TodoRef(path=str(path), todo=todo))

        error = todos.last_error()
        if error is not None:
            self._report(WalkError(f"{path}: {error}", context={"path": str(path)}))

    def _label_matches(self, label: str) -> bool:
        globs = self.options.label_globs
        if not globs:
            return True
        return any(fnmatch.fnmatchcase(label, g) for g in globs)

    def _report(self, error: WalkError) -> None:
        self._had_error = True
        logger.debug("walk_error", error=str(error), **error.context)
        if self.options.error_handler is not None:
            self.options.error_handler(error)


def _is_hidden(name: str) -> bool:
    return name.startswith(".") and name not in (".", "..")
