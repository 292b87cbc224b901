"""Loads one sheet of an .xlsx workbook into a RawTable."""

from __future__ import annotations

import io
from datetime import date, datetime, time
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from safetyaward.core.exceptions import TableReadError
from safetyaward.core.logging import get_logger
from safetyaward.models.table import RawTable

logger = get_logger(__name__)

# ElementTree and lxml parse errors both derive from SyntaxError. Sheet XML is
# parsed lazily in read-only mode, so they can surface during row iteration.
_READ_ERRORS = (InvalidFileException, BadZipFile, KeyError, OSError, ValueError, SyntaxError)


def cell_text(value: object) -> str:
    """Render a cell value as the text a spreadsheet export would show."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.date().isoformat()
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_table(data: bytes, sheet: str) -> RawTable:
    """Parse workbook bytes and return ``sheet`` as a column-major RawTable.

    Raises:
        TableReadError: The bytes are not a readable workbook or the sheet is missing.
    """
    try:
        wb = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except _READ_ERRORS as exc:
        raise TableReadError(f"Failed to open workbook: {exc}") from exc

    try:
        if sheet not in wb.sheetnames:
            raise TableReadError(f"Sheet {sheet!r} not found (have {wb.sheetnames})")
        rows = [
            [cell_text(v) for v in row]
            for row in wb[sheet].iter_rows(values_only=True)
        ]
    except _READ_ERRORS as exc:
        raise TableReadError(f"Failed to read sheet {sheet!r}: {exc}") from exc
    finally:
        wb.close()

    table = RawTable.from_rows(rows)
    logger.info("table_read", sheet=sheet, columns=len(table.columns), rows=table.row_count)
    return table
