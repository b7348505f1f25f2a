"""Find TODO comments in source code."""

__version__ = "0.1.0"
