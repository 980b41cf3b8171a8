"""Pydantic models for plaintable configuration."""

from .options import (
    Align,
    ColumnWidth,
    TableOptions,
    WidthMode,
    resolve_alignment,
    resolve_column_width,
)

__all__ = [
    "Align",
    "ColumnWidth",
    "TableOptions",
    "WidthMode",
    "resolve_alignment",
    "resolve_column_width",
]
