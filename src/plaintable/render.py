"""Compose a table into its bordered text form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from plaintable.layout import chunk, compute_layout

if TYPE_CHECKING:
    from plaintable.table import Table

logger = logging.getLogger(__name__)


def render_table(table: Table) -> str:
    """Render ``table`` as plain text.

    Every row, the header included, is followed by the same border line::

        +---+
        | H |
        +---+
        | X |
        +---+

    Lines are joined with the table's line terminator; there is no trailing
    terminator. The table is not modified.

    Raises:
        ConfigurationError: If the width or alignment option is invalid.
    """
    layout = compute_layout(table)
    align = table.options.cell_align
    pad = " " * layout.padding
    border = layout.border

    lines: list[str] = [border]
    for row, line_count in zip(table.rows, layout.lines):
        for line in range(line_count):
            parts = ["|"]
            for cell, width in zip(row, layout.widths):
                parts.append(pad + chunk(cell, width, line, align) + pad + "|")
            lines.append("".join(parts))
        lines.append(border)

    logger.debug(
        "Rendered %d rows into %d lines", len(layout.lines), len(lines)
    )
    return table.options.line_terminator.join(lines)


__all__ = ["render_table"]
