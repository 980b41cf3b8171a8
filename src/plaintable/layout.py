"""Column width and line count computation for a render pass."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from plaintable.models.options import Align, WidthMode, resolve_alignment

if TYPE_CHECKING:
    from plaintable.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Layout:
    """Widths and line counts derived from a table for one render pass."""

    widths: tuple[int, ...]
    lines: tuple[int, ...]
    padding: int

    @property
    def border(self) -> str:
        """Horizontal rule, e.g. ``+-----+---+``."""
        return "+" + "".join("-" * (w + 2 * self.padding) + "+" for w in self.widths)


def column_widths(table: Table) -> list[int]:
    """Compute the rendered width of every column.

    In MIN mode each column is as wide as its longest cell across all rows,
    the header included. In FIXED mode every column gets the configured width.

    Raises:
        ConfigurationError: If the column width option cannot be resolved.
    """
    setting = table.options.resolved_width()
    if setting.mode is WidthMode.FIXED:
        return [setting.width] * table.column_count  # type: ignore[list-item]

    widths = [0] * table.column_count
    for row in table.rows:
        for col, cell in enumerate(row):
            if len(cell) > widths[col]:
                widths[col] = len(cell)
    return widths


def lines_required(row: Sequence[str], widths: Sequence[int]) -> int:
    """Number of display lines a row needs; always at least 1."""
    lines = 1
    for cell, width in zip(row, widths):
        if width <= 0:
            # Only a MIN column of empty cells can be zero wide.
            continue
        current = -(-len(cell) // width)
        if current > lines:
            lines = current
    return lines


def chunk(cell: str, width: int, line: int, align: Any) -> str:
    """Return the part of ``cell`` shown on ``line``, padded to ``width``.

    Content shorter than ``line * width`` yields a blank chunk.

    Raises:
        ConfigurationError: If ``align`` is not LEFT or RIGHT.
    """
    piece = cell[line * width : (line + 1) * width]
    resolved = resolve_alignment(align)
    if resolved is Align.LEFT:
        return piece.ljust(width)
    return piece.rjust(width)


def compute_layout(table: Table) -> Layout:
    """Compute widths and per-row line counts for ``table``."""
    widths = column_widths(table)
    lines = tuple(lines_required(row, widths) for row in table.rows)
    logger.debug("Computed layout: widths=%s lines=%s", widths, lines)
    return Layout(widths=tuple(widths), lines=lines, padding=table.options.cell_padding)


__all__ = ["Layout", "chunk", "column_widths", "compute_layout", "lines_required"]
