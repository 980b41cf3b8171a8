"""The table model: column count, header row, data rows and options."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from plaintable.exceptions import EmptySchema, SchemaViolation
from plaintable.models.options import TableOptions
from plaintable.render import render_table

logger = logging.getLogger(__name__)


def _cell_text(value: Any) -> str:
    text = value if isinstance(value, str) else str(value)
    if "\n" in text or "\r" in text:
        raise ValueError(f"Cell content must not contain line breaks: {text!r}")
    return text


class Table:
    """A fixed-width plain-text table.

    The first row is always the header. Rows are appended in order and are
    never reordered or removed. Rendering is a pure read of the current state.

    Example:
        >>> table = Table("Name", "Age", column_width=5, cell_align="right", cell_padding=0)
        >>> print(table.add_row("Alice", 30).render())
        +-----+-----+
        | Name|  Age|
        +-----+-----+
        |Alice|   30|
        +-----+-----+
    """

    def __init__(
        self,
        *headers: Any,
        column_width: Any = None,
        cell_align: Any = None,
        cell_padding: Any = None,
        options: TableOptions | None = None,
    ) -> None:
        if not headers:
            raise EmptySchema()

        overrides = {
            key: value
            for key, value in (
                ("column_width", column_width),
                ("cell_align", cell_align),
                ("cell_padding", cell_padding),
            )
            if value is not None
        }
        base = options or TableOptions()
        if overrides:
            current = {name: getattr(base, name) for name in TableOptions.model_fields}
            base = TableOptions.build(**{**current, **overrides})
        self._options = base

        self._column_count = len(headers)
        self._rows: list[tuple[str, ...]] = [self._validate_row(headers)]

    @classmethod
    def create(
        cls, column_width: Any, cell_align: Any, cell_padding: Any, *headers: Any
    ) -> Table:
        """Create a table from positional options followed by header cells."""
        return cls(
            *headers,
            column_width=column_width,
            cell_align=cell_align,
            cell_padding=cell_padding,
        )

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def options(self) -> TableOptions:
        return self._options

    @property
    def headers(self) -> tuple[str, ...]:
        return self._rows[0]

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """All rows, header first."""
        return tuple(self._rows)

    @property
    def data_rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(self._rows[1:])

    def _validate_row(self, cells: Sequence[Any]) -> tuple[str, ...]:
        expected = self._column_count
        if len(cells) != expected:
            raise SchemaViolation(expected, len(cells))
        try:
            return tuple(_cell_text(cell) for cell in cells)
        except ValueError as exc:
            raise SchemaViolation(expected, len(cells), str(exc)) from exc

    def add_row(self, *cells: Any) -> Table:
        """Append a row. Returns the table so calls can be chained.

        Raises:
            SchemaViolation: If the number of cells differs from the column
                count, or a cell contains a line break. Nothing is appended.
        """
        try:
            row = self._validate_row(cells)
        except SchemaViolation:
            logger.debug(
                "Rejected row with %d cells for %d-column table", len(cells), self._column_count
            )
            raise
        self._rows.append(row)
        logger.debug("Appended row %d", len(self._rows) - 1)
        return self

    def add_rows(self, rows: Iterable[Sequence[Any]]) -> Table:
        """Append several rows; if any row is invalid, none are appended."""
        validated = [self._validate_row(list(cells)) for cells in rows]
        self._rows.extend(validated)
        logger.debug("Appended %d rows", len(validated))
        return self

    def render(self) -> str:
        """Return the text representation of this table."""
        return render_table(self)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._rows) - 1

    def __repr__(self) -> str:
        return f"Table(columns={self._column_count}, rows={len(self)})"


__all__ = ["Table"]
