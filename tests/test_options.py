"""Tests for option models and their resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from plaintable import ConfigurationError
from plaintable.models import (
    Align,
    ColumnWidth,
    TableOptions,
    WidthMode,
    resolve_alignment,
    resolve_column_width,
)


def test_table_options_defaults() -> None:
    """Defaults: MIN width, left aligned, one space of padding."""
    options = TableOptions()
    assert options.resolved_width() == ColumnWidth.min()
    assert options.resolved_align() is Align.LEFT
    assert options.cell_padding == 1
    assert options.line_terminator == "\n"


@pytest.mark.parametrize(
    "raw",
    [ColumnWidth.min(), WidthMode.MIN, "min", " MIN ", 0, 0.0, "0"],
)
def test_resolve_column_width_min(raw: object) -> None:
    assert resolve_column_width(raw).mode is WidthMode.MIN


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(ColumnWidth.fixed(4), 4), (4, 4), ("12", 12), (3.0, 3)],
)
def test_resolve_column_width_fixed(raw: object, expected: int) -> None:
    resolved = resolve_column_width(raw)
    assert resolved.mode is WidthMode.FIXED
    assert resolved.width == expected


@pytest.mark.parametrize(
    "raw",
    [-1, "-5", "wide", "", None, True, 2.5, WidthMode.FIXED, ColumnWidth.fixed(0), [3]],
)
def test_resolve_column_width_invalid(raw: object) -> None:
    with pytest.raises(ConfigurationError, match="column width"):
        resolve_column_width(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (Align.LEFT, Align.LEFT),
        ("left", Align.LEFT),
        ("L", Align.LEFT),
        (0, Align.LEFT),
        (Align.RIGHT, Align.RIGHT),
        ("Right", Align.RIGHT),
        ("r", Align.RIGHT),
        (1, Align.RIGHT),
    ],
)
def test_resolve_alignment(raw: object, expected: Align) -> None:
    assert resolve_alignment(raw) is expected


@pytest.mark.parametrize("raw", ["center", 2, None, False, 1.0])
def test_resolve_alignment_invalid(raw: object) -> None:
    with pytest.raises(ConfigurationError, match="alignment"):
        resolve_alignment(raw)


def test_options_keep_unresolvable_values() -> None:
    """Width and alignment are stored as given and only fail on resolution."""
    options = TableOptions(column_width="wide", cell_align="center")
    assert options.column_width == "wide"
    with pytest.raises(ConfigurationError):
        options.resolved_width()
    with pytest.raises(ConfigurationError):
        options.resolved_align()


def test_cell_padding_coercion() -> None:
    assert TableOptions(cell_padding="3").cell_padding == 3
    assert TableOptions(cell_padding=2.0).cell_padding == 2


@pytest.mark.parametrize("padding", [-1, "abc", 1.5, True])
def test_cell_padding_invalid(padding: object) -> None:
    with pytest.raises(ValidationError):
        TableOptions(cell_padding=padding)


def test_build_reports_configuration_error() -> None:
    """build() surfaces pydantic validation failures as ConfigurationError."""
    with pytest.raises(ConfigurationError) as excinfo:
        TableOptions.build(cell_padding=-2)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_options_reject_unknown_fields() -> None:
    with pytest.raises(ConfigurationError):
        TableOptions.build(colour="red")


def test_options_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Should read PLAINTABLE_* environment variables."""
    monkeypatch.setenv("PLAINTABLE_WIDTH", "7")
    monkeypatch.setenv("PLAINTABLE_ALIGN", "right")
    monkeypatch.setenv("PLAINTABLE_PADDING", "0")

    options = TableOptions.from_env()

    assert options.resolved_width() == ColumnWidth.fixed(7)
    assert options.resolved_align() is Align.RIGHT
    assert options.cell_padding == 0


def test_options_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PLAINTABLE_WIDTH", "PLAINTABLE_ALIGN", "PLAINTABLE_PADDING"):
        monkeypatch.delenv(name, raising=False)

    assert TableOptions.from_env() == TableOptions()


def test_options_from_env_invalid_padding(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAINTABLE_PADDING", "-1")
    with pytest.raises(ConfigurationError):
        TableOptions.from_env()
