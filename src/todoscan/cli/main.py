"""
todoscan CLI
Main entry point for the command-line interface

Usage:
    todoscan                        # Scan the current directory
    todoscan src tests              # Scan specific paths
    todoscan -o json .              # One JSON object per TODO
    todoscan -o github .            # GitHub Actions annotations
"""

import importlib
import json
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from todoscan import __version__
from todoscan.scanner.languages import supported_languages
from todoscan.shared.domain.exceptions import ConfigurationError, WalkError
from todoscan.shared.infrastructure.config import settings
from todoscan.shared.infrastructure.logging import configure_logging, get_logger
from todoscan.shared.infrastructure.project_config import load_project_config
from todoscan.todos.todos import DEFAULT_TYPES, TODOConfig
from todoscan.walker import TodoRef, TodoWalker, WalkerOptions

EXIT_SUCCESS = 0
EXIT_FLAG_PARSE_ERROR = 1
EXIT_WALK_ERROR = 2
EXIT_UNKNOWN_ERROR = 3

app = typer.Typer(
    name="todoscan",
    help="Find TODO, FIXME and similar comments in source code.",
    add_completion=False,
)
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
logger = get_logger(__name__)

# typer may ship its own copy of click, so use the exception types it raises.
_click_exceptions = importlib.import_module(typer.BadParameter.__module__)


def out_default(ref: TodoRef) -> None:
    """path:line:text with color when writing to a terminal."""
    console.print(
        f"[magenta]{escape(ref.path)}[/magenta][cyan]:[/cyan]"
        f"[green]{ref.todo.line}[/green][cyan]:[/cyan]{escape(ref.todo.text)}"
    )


def out_github(ref: TodoRef) -> None:
    """GitHub Actions workflow command annotations."""
    todo = ref.todo
    level = "notice"
    if todo.type in ("TODO", "HACK", "COMBAK"):
        level = "warning"
    elif todo.type in ("FIXME", "XXX", "BUG"):
        level = "error"

    console.print(
        f"::{level} file={ref.path},line={todo.line}::{todo.text}",
        markup=False,
    )


def out_json(ref: TodoRef) -> None:
    """One JSON object per line."""
    record = {"path": ref.path, **ref.todo.to_json()}
    console.print(json.dumps(record, ensure_ascii=False), markup=False)


OUTPUT_FORMATS: Dict[str, Callable[[TodoRef], None]] = {
    "": out_default,
    "default": out_default,
    "github": out_github,
    "json": out_json,
}


def _print_error(error: WalkError) -> None:
    err_console.print(f"todoscan: {error}", markup=False)


def _split_types(value: str) -> List[str]:
    return [t.strip() for t in value.split(",") if t.strip()]


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"todoscan {__version__}", markup=False)
        console.print(f"{len(supported_languages())} supported languages", markup=False)
        raise typer.Exit()


@app.command()
def scan(
    paths: Optional[List[str]] = typer.Argument(None, help="Files or directories to scan (default: .)"),
    todo_types: Optional[str] = typer.Option(
        None, "--todo-types", help="Comma separated list of TODO types"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format: default, github or json"
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", help="Exclude files matching this glob (repeatable)"
    ),
    exclude_dir: Optional[List[str]] = typer.Option(
        None, "--exclude-dir", help="Exclude directories matching this glob (repeatable)"
    ),
    exclude_hidden: bool = typer.Option(False, "--exclude-hidden", help="Skip hidden files and directories"),
    include_vcs: bool = typer.Option(False, "--include-vcs", help="Scan VCS directories such as .git"),
    include_vendored: bool = typer.Option(False, "--include-vendored", help="Scan vendored directories"),
    label: Optional[List[str]] = typer.Option(
        None, "--label", help="Only report TODOs whose label matches this glob (repeatable)"
    ),
    charset: Optional[str] = typer.Option(
        None, "--charset", help="Character set of the files, or 'detect'"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print the version and exit"
    ),
):
    """Scan files and directories for TODO comments."""
    try:
        project = load_project_config(Path.cwd())
    except ConfigurationError as e:
        err_console.print(f"todoscan: {e}", markup=False)
        raise typer.Exit(EXIT_FLAG_PARSE_ERROR)

    output = output if output is not None else settings.output
    handler = OUTPUT_FORMATS.get(output)
    if handler is None:
        err_console.print(f"todoscan: invalid output type: {output}", markup=False)
        raise typer.Exit(EXIT_FLAG_PARSE_ERROR)

    if todo_types is not None:
        types = _split_types(todo_types)
    else:
        types = project.todo_types or settings.type_list or list(DEFAULT_TYPES)
    if not types:
        err_console.print("todoscan: no TODO types given", markup=False)
        raise typer.Exit(EXIT_FLAG_PARSE_ERROR)

    options = WalkerOptions(
        paths=paths or ["."],
        todo_config=TODOConfig(types=tuple(types)),
        charset=charset or project.charset or settings.charset,
        exclude_globs=[*project.exclude, *(exclude or [])],
        exclude_dir_globs=[*project.exclude_dir, *(exclude_dir or [])],
        include_hidden=not exclude_hidden,
        include_vcs=include_vcs,
        include_vendored=include_vendored,
        label_globs=list(label or []),
        todo_handler=handler,
        error_handler=_print_error,
    )
    logger.debug("scan_started", paths=options.paths, output=output, charset=options.charset)

    if TodoWalker(options).walk():
        raise typer.Exit(EXIT_WALK_ERROR)


def main():
    """Main entry point"""
    configure_logging()
    try:
        code = app(standalone_mode=False)
    except _click_exceptions.UsageError as e:
        e.show()
        sys.exit(EXIT_FLAG_PARSE_ERROR)
    except typer.Abort:
        err_console.print("Aborted!", markup=False)
        sys.exit(EXIT_UNKNOWN_ERROR)
    sys.exit(code or EXIT_SUCCESS)


if __name__ == "__main__":
    main()
