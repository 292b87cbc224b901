"""Cell parsing: raw spreadsheet text to typed values.

Every ``parse_*`` function reports failures to a ``Diagnostics`` collector and
returns ``None`` instead of raising, so one malformed cell never stops the
rest of a row (or the batch) from being read.
"""

from __future__ import annotations

import re
from datetime import date

from safetyaward.core.exceptions import DateError, FormatError
from safetyaward.models.diagnostics import Diagnostics

DATE_FORMAT = "YYYY-MM-DD"
MIDNIGHT_SUFFIX = "T00:00:00"
TRUE_LITERAL = "TRUE"

_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def is_placeholder(text: str | None) -> bool:
    """True for empty cells and stray one-character fillers such as "." or " "."""
    return text is None or len(text.strip()) <= 1


def to_date(text: str, suffix: str = "") -> date:
    """Convert exact ``YYYY-MM-DD`` text to a date, raising ``DateError``."""
    value = text
    if suffix and value.endswith(suffix):
        value = value[: -len(suffix)]
    if len(value) != len(DATE_FORMAT):
        raise DateError(text, f"expected {len(DATE_FORMAT)} characters ({DATE_FORMAT})")
    match = _DATE_RE.fullmatch(value)
    if match is None:
        raise DateError(text)
    try:
        return date(int(match[1]), int(match[2]), int(match[3]))
    except ValueError as exc:
        raise DateError(text, str(exc)) from exc


def to_integer(text: str) -> int:
    """Convert integer text to int, raising ``FormatError``."""
    value = text.strip()
    if not _INT_RE.fullmatch(value):
        raise FormatError(text)
    return int(value)


def parse_date(text: str, diagnostics: Diagnostics, *, suffix: str = "",
               column: str = "", row: int | None = None) -> date | None:
    try:
        return to_date(text, suffix)
    except DateError as exc:
        diagnostics.record(exc, column=column, row=row)
        return None


def parse_integer(text: str, diagnostics: Diagnostics, *,
                  column: str = "", row: int | None = None) -> int | None:
    try:
        return to_integer(text)
    except FormatError as exc:
        diagnostics.record(exc, column=column, row=row)
        return None


def parse_flag(text: str) -> bool:
    """Spreadsheet boolean: only the TRUE literal (any case) is true."""
    return text.strip().upper() == TRUE_LITERAL
