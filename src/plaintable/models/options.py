"""Table option models and their lazy resolution."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from plaintable.exceptions import ConfigurationError


class WidthMode(Enum):
    """How column widths are derived."""

    MIN = "min"
    FIXED = "fixed"


class Align(Enum):
    """Alignment applied to every cell in a table."""

    LEFT = "left"
    RIGHT = "right"


class ColumnWidth(BaseModel):
    """Column width policy: content-derived (MIN) or one explicit width (FIXED).

    The width is not checked here; a non-positive FIXED width is only
    rejected when the table is rendered.
    """

    model_config = ConfigDict(frozen=True)

    mode: WidthMode = Field(default=WidthMode.MIN, description="Width policy")
    width: int | None = Field(default=None, description="Shared width for FIXED mode")

    @classmethod
    def min(cls) -> ColumnWidth:
        return cls(mode=WidthMode.MIN)

    @classmethod
    def fixed(cls, width: int) -> ColumnWidth:
        return cls(mode=WidthMode.FIXED, width=width)


_ALIGN_ALIASES: dict[str, Align] = {
    "left": Align.LEFT,
    "l": Align.LEFT,
    "0": Align.LEFT,
    "right": Align.RIGHT,
    "r": Align.RIGHT,
    "1": Align.RIGHT,
}


def _width_from_int(value: int, raw: Any) -> ColumnWidth:
    if value == 0:
        return ColumnWidth.min()
    if value > 0:
        return ColumnWidth.fixed(value)
    raise ConfigurationError(f"Invalid column width: {raw!r}")


def resolve_column_width(raw: Any) -> ColumnWidth:
    """Resolve a raw column width setting.

    Accepts a ``ColumnWidth``, ``WidthMode.MIN``, ``"min"``, ``0`` (MIN),
    or a positive integer / numeric string (FIXED).

    Raises:
        ConfigurationError: If the value does not describe MIN or a
            positive FIXED width.
    """
    if isinstance(raw, ColumnWidth):
        if raw.mode is WidthMode.MIN:
            return raw
        if isinstance(raw.width, int) and not isinstance(raw.width, bool) and raw.width > 0:
            return raw
        raise ConfigurationError(f"Invalid column width: {raw.width!r}")

    if isinstance(raw, WidthMode):
        if raw is WidthMode.MIN:
            return ColumnWidth.min()
        raise ConfigurationError("FIXED column width requires an explicit width")

    if isinstance(raw, bool) or raw is None:
        raise ConfigurationError(f"Invalid column width: {raw!r}")

    if isinstance(raw, int):
        return _width_from_int(raw, raw)

    if isinstance(raw, float):
        if not raw.is_integer():
            raise ConfigurationError(f"Invalid column width: {raw!r}")
        return _width_from_int(int(raw), raw)

    if isinstance(raw, str):
        text = raw.strip().lower()
        if text == WidthMode.MIN.value:
            return ColumnWidth.min()
        try:
            value = int(text)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid column width: {raw!r}") from exc
        return _width_from_int(value, raw)

    raise ConfigurationError(f"Invalid column width: {raw!r}")


def resolve_alignment(raw: Any) -> Align:
    """Resolve a raw alignment setting to ``Align.LEFT`` or ``Align.RIGHT``."""
    if isinstance(raw, Align):
        return raw
    if isinstance(raw, bool):
        raise ConfigurationError(f"Invalid cell alignment: {raw!r}")
    if isinstance(raw, (int, str)):
        aligned = _ALIGN_ALIASES.get(str(raw).strip().lower())
        if aligned is not None:
            return aligned
    raise ConfigurationError(f"Invalid cell alignment: {raw!r}")


class TableOptions(BaseModel):
    """Table-wide formatting options.

    ``column_width`` and ``cell_align`` are kept exactly as given and are
    resolved on every render, so an unusable value only fails when it is
    actually used. ``cell_padding`` is validated up front.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    column_width: Any = Field(
        default_factory=ColumnWidth.min,
        description="Column width policy (MIN or a positive fixed width)",
    )
    cell_align: Any = Field(default=Align.LEFT, description="Cell alignment")
    cell_padding: int = Field(default=1, ge=0, description="Spaces on each side of a cell")
    line_terminator: str = Field(default="\n", min_length=1, description="Line separator")

    @field_validator("cell_padding", mode="before")
    @classmethod
    def validate_cell_padding(cls, value: Any) -> int:
        """Coerce padding to a non-negative integer."""
        if value is None or isinstance(value, bool):
            raise ValueError("cell_padding must be a non-negative integer")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("cell_padding must be a non-negative integer")
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError as exc:
                raise ValueError("cell_padding must be a non-negative integer") from exc
        return value

    @classmethod
    def build(cls, **values: Any) -> TableOptions:
        """Create options, reporting validation failures as ConfigurationError."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

    @classmethod
    def from_env(cls) -> TableOptions:
        """Create options from PLAINTABLE_* environment variables."""
        values: dict[str, Any] = {}
        width = os.getenv("PLAINTABLE_WIDTH")
        if width:
            values["column_width"] = width
        align = os.getenv("PLAINTABLE_ALIGN")
        if align:
            values["cell_align"] = align
        padding = os.getenv("PLAINTABLE_PADDING")
        if padding:
            values["cell_padding"] = padding
        return cls.build(**values)

    def resolved_width(self) -> ColumnWidth:
        return resolve_column_width(self.column_width)

    def resolved_align(self) -> Align:
        return resolve_alignment(self.cell_align)


__all__ = [
    "Align",
    "ColumnWidth",
    "TableOptions",
    "WidthMode",
    "resolve_alignment",
    "resolve_column_width",
]
