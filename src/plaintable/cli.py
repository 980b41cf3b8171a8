"""Command-line interface for plaintable.

Thin wrapper that reads a CSV or JSONL file and prints it as a table.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from plaintable import __version__
from plaintable.exceptions import PlainTableError
from plaintable.io import read_csv, read_jsonl
from plaintable.models.options import TableOptions

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="plaintable - fixed-width plain-text tables",
)


class InputFormat(str, Enum):
    """Supported input file formats."""

    CSV = "csv"
    JSONL = "jsonl"


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _guess_format(path: Path) -> InputFormat:
    if path.suffix.lower() in {".jsonl", ".ndjson"}:
        return InputFormat.JSONL
    return InputFormat.CSV


@app.command(name="render")
def render(
    path: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True, help="Input file"),
    ],
    input_format: Annotated[
        InputFormat | None,
        typer.Option("--format", "-f", help="Input format (default: from file suffix)"),
    ] = None,
    width: Annotated[
        str | None,
        typer.Option(
            "--width",
            "-w",
            help="Column width: 'min' or a positive integer",
            envvar="PLAINTABLE_WIDTH",
        ),
    ] = None,
    align: Annotated[
        str | None,
        typer.Option(
            "--align",
            "-a",
            help="Cell alignment: left or right",
            envvar="PLAINTABLE_ALIGN",
        ),
    ] = None,
    padding: Annotated[
        int | None,
        typer.Option(
            "--padding",
            "-p",
            help="Spaces on each side of a cell",
            envvar="PLAINTABLE_PADDING",
        ),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="CSV field delimiter"),
    ] = ",",
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Render a CSV or JSONL file as a plain-text table.

    Examples:
        plaintable render data.csv
        plaintable render data.jsonl --width 10 --align right
    """
    _configure_logging(debug)

    values: dict[str, object] = {}
    if width is not None:
        values["column_width"] = width
    if align is not None:
        values["cell_align"] = align
    if padding is not None:
        values["cell_padding"] = padding

    try:
        options = TableOptions.build(**values)
        fmt = input_format or _guess_format(path)
        if fmt is InputFormat.JSONL:
            table = read_jsonl(path, options=options)
        else:
            table = read_csv(path, delimiter=delimiter, options=options)
        output = table.render()
    except PlainTableError as exc:
        err_console.print(
            f"[red]Error: {escape(str(exc))}[/]", emoji=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit(1) from exc

    # Table text may contain brackets or :emoji: codes; print it verbatim.
    console.print(output, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.callback(invoke_without_command=True)
def default_callback(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version"),
    ] = False,
) -> None:
    """plaintable - fixed-width plain-text tables."""
    if version:
        console.print(f"plaintable {__version__}")
        raise typer.Exit(0)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
