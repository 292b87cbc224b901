"""Safety award migration exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from safetyaward.models.diagnostics import Diagnostic


class SafetyAwardError(Exception):
    """Base exception for all safety award migration errors."""


class CellParseError(SafetyAwardError):
    """A raw spreadsheet cell could not be converted to a typed value."""

    kind = "cell"

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(message)


class DateError(CellParseError):
    """Cell is not an exact YYYY-MM-DD calendar date."""

    kind = "date"

    def __init__(self, text: str, reason: str = "expected YYYY-MM-DD") -> None:
        super().__init__(text, f"Invalid date {text!r}: {reason}")


class FormatError(CellParseError):
    """Cell is not an integer."""

    kind = "integer"

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Invalid integer {text!r}")


class TableReadError(SafetyAwardError):
    """Input workbook could not be opened or the sheet is missing."""


class StoreError(SafetyAwardError):
    """Employee document store operation failed."""


class BatchRejectedError(SafetyAwardError):
    """Batch had parse diagnostics and nothing was persisted."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        super().__init__(f"Migration failed: {len(diagnostics)} malformed cell(s) in source data")
