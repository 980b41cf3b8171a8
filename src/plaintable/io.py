"""Build tables from CSV and JSONL files."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from plaintable.exceptions import EmptySchema, InputError
from plaintable.models.options import TableOptions
from plaintable.table import Table

logger = logging.getLogger(__name__)


def read_csv(
    path: str | Path,
    delimiter: str = ",",
    options: TableOptions | None = None,
) -> Table:
    """Read a CSV file; the first record is the header row.

    Raises:
        InputError: If the file is not UTF-8 or is not valid CSV.
        EmptySchema: If the file has no header record.
        SchemaViolation: If a record has a different number of fields.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f, delimiter=delimiter)
            records = [record for record in reader if record]
    except UnicodeDecodeError as e:
        raise InputError(f"{path}: not valid UTF-8 - {e}") from e
    except csv.Error as e:
        raise InputError(f"{path}: CSV parse error - {e}") from e

    if not records:
        raise EmptySchema(f"No columns defined: {path} is empty")

    table = Table(*records[0], options=options)
    table.add_rows(records[1:])
    logger.debug("Read %d rows from %s", len(table), path)
    return table


def read_jsonl(
    path: str | Path,
    columns: list[str] | None = None,
    options: TableOptions | None = None,
) -> Table:
    """Read a JSONL file of objects.

    The header is ``columns`` or, if omitted, the keys of the first object.
    Keys missing from an object render as empty cells.

    Raises:
        InputError: If the file is not UTF-8 or a line is not a JSON object.
        EmptySchema: If no columns can be determined.
    """
    path = Path(path)
    try:
        records = _load_jsonl(path)
    except UnicodeDecodeError as e:
        raise InputError(f"{path}: not valid UTF-8 - {e}") from e

    header = list(columns) if columns else (list(records[0]) if records else [])
    if not header:
        raise EmptySchema(f"No columns defined: {path} has no fields")

    table = Table(*header, options=options)
    table.add_rows([_format_value(record.get(key)) for key in header] for record in records)
    logger.debug("Read %d rows from %s", len(table), path)
    return table


def _load_jsonl(path: Path) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise InputError(f"Line {idx}: JSON parse error - {e}") from e
            if not isinstance(record, dict):
                raise InputError(f"Line {idx}: expected a JSON object")
            records.append(record)
    return records


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


__all__ = ["read_csv", "read_jsonl"]
