from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd

from ..core.constants import IMPORT_EXTENSIONS, IMPORT_HEADER_KEYWORDS
from ..core.exceptions import ImportParseError
from .model import ImportRow

logger = logging.getLogger(__name__)

INVALID_TYPE = "Please upload a valid Excel file (.xlsx, .xls) or CSV file (.csv)"
UNREADABLE = "Error parsing file. Please ensure it is a valid Excel or CSV file."
NO_ROWS = "No valid student data found in file. Please ensure the file has Roll Number in the first column."


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def _is_header(cells: Sequence[Any]) -> bool:
    for cell in cells:
        if isinstance(cell, str):
            lowered = cell.lower()
            if any(word in lowered for word in IMPORT_HEADER_KEYWORDS):
                return True
    return False


def rows_from_cells(table: Iterable[Sequence[Any]]) -> list[ImportRow]:
    """Turn raw sheet rows into import rows.

    Column 1 is the roll number (required), column 2 the optional name. A
    first row mentioning roll/number/name is treated as a header.
    """
    table = list(table)
    if table and _is_header(table[0]):
        logger.debug("Skipping header row %r", list(table[0]))
        table = table[1:]

    rows: list[ImportRow] = []
    for cells in table:
        if not cells:
            continue
        roll_number = _cell_text(cells[0])
        if not roll_number:
            continue
        name = _cell_text(cells[1]) if len(cells) > 1 else ""
        rows.append(ImportRow(position=len(rows), roll_number=roll_number, name=name))
    return rows


class RosterFileParser:
    """Reads the first sheet of an uploaded roster file into ImportRows."""

    def _read_csv(self, data: bytes) -> list[list[str]]:
        text = data.decode("utf-8-sig")
        return [row for row in csv.reader(io.StringIO(text))]

    def _read_excel(self, data: bytes) -> list[list[Any]]:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, header=None, dtype=str)
        return df.values.tolist()

    def parse(self, data: bytes, filename: str) -> list[ImportRow]:
        ext = Path(filename or "").suffix.lower()
        if ext not in IMPORT_EXTENSIONS:
            raise ImportParseError(INVALID_TYPE)

        try:
            table = self._read_csv(data) if ext == ".csv" else self._read_excel(data)
        except Exception as e:
            logger.warning("Could not read uploaded file %r: %s", filename, e)
            raise ImportParseError(UNREADABLE) from e

        rows = rows_from_cells(table)
        if not rows:
            raise ImportParseError(NO_ROWS)
        logger.info("Parsed %d candidate row(s) from %s", len(rows), filename)
        return rows
