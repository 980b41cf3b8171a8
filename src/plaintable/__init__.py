"""plaintable - fixed-width plain-text tables.

Build a table from a header row, append rows, and render it with
``+``/``-``/``|`` borders, wrapping cells that exceed their column width.
"""

from __future__ import annotations

from typing import Any

from plaintable.exceptions import (
    ConfigurationError,
    EmptySchema,
    InputError,
    PlainTableError,
    SchemaViolation,
)
from plaintable.models import Align, ColumnWidth, TableOptions, WidthMode
from plaintable.render import render_table
from plaintable.table import Table

__version__ = "0.1.0"


# Lazy import so the library does not pull in typer/rich
def __getattr__(name: str) -> Any:
    """Lazy import of the CLI entry point."""
    if name == "main":
        from plaintable.cli import main

        return main
    raise AttributeError(f"module 'plaintable' has no attribute {name!r}")


__all__ = [
    "__version__",
    "Align",
    "ColumnWidth",
    "ConfigurationError",
    "EmptySchema",
    "InputError",
    "PlainTableError",
    "SchemaViolation",
    "Table",
    "TableOptions",
    "WidthMode",
    "main",
    "render_table",
]
