"""Test configuration for plaintable."""

from __future__ import annotations

import pytest

from plaintable import Table


def cell_segments(rendered: str) -> list[list[str]]:
    """Split every non-border line of a rendered table into its cell segments."""
    return [line.split("|")[1:-1] for line in rendered.split("\n") if line.startswith("|")]


@pytest.fixture
def people_table() -> Table:
    """A MIN width, left aligned table with two data rows."""
    table = Table("Name", "Age")
    table.add_row("Alice", "30").add_row("Bob", "101")
    return table
