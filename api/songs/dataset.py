"""
Seed dataset reader.

The dataset is a CSV file with a header row. At minimum the seeding step
expects: track_name, artist_name, track_duration_ms, track_id, artist_genres.

Parsing rules:
- header names and cells are trimmed
- blank rows are skipped
- a row whose column count differs from the header is an error
"""

from __future__ import annotations

import asyncio
import csv
import io
from pathlib import Path

from .normalizer import RawRecord

REQUIRED_COLUMNS = ("track_name", "artist_name", "track_duration_ms", "track_id", "artist_genres")


class DatasetError(RuntimeError):
    pass


def parse_dataset(text: str) -> list[RawRecord]:
    try:
        rows = list(csv.reader(io.StringIO(text), skipinitialspace=True))
    except csv.Error as e:
        raise DatasetError(f"Could not parse dataset: {e}") from e

    rows = [[cell.strip() for cell in row] for row in rows]
    rows = [row for row in rows if any(row)]
    if not rows:
        return []

    header = rows[0]
    records: list[RawRecord] = []
    # Line numbers are approximate once blank rows are dropped; good enough for logs.
    for line_no, row in enumerate(rows[1:], start=2):
        if len(row) != len(header):
            raise DatasetError(
                f"Invalid record length on row {line_no}: expected {len(header)} columns, got {len(row)}"
            )
        records.append(dict(zip(header, row)))

    return records


def missing_columns(records: list[RawRecord]) -> list[str]:
    if not records:
        return []
    present = set(records[0])
    return [c for c in REQUIRED_COLUMNS if c not in present]


def _read_text(path: Path) -> str:
    # utf-8-sig drops a leading BOM that spreadsheet exports like to add.
    return path.read_text(encoding="utf-8-sig")


async def read_dataset(path: str | Path) -> list[RawRecord]:
    """
    Read and parse the dataset without blocking the event loop.
    """
    text = await asyncio.to_thread(_read_text, Path(path))
    return parse_dataset(text)
