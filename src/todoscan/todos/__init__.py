"""TODO annotation extraction from comments."""

from todoscan.todos.todos import DEFAULT_TYPES, TODO, TODOConfig, TODOScanner

__all__ = [
    "DEFAULT_TYPES",
    "TODO",
    "TODOConfig",
    "TODOScanner",
]
