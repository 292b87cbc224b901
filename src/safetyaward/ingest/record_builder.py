"""RecordBuilder — turns a column-major RawTable into EmployeeRecords.

Building runs in two phases. Phase 1 walks every recognized column and fills
a mutable draft per row. Phase 2 works on complete drafts: it resolves the
last award (which depends on the track read from the name column), classifies
employment status and freezes the record. Column order in the sheet never
affects the result.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date
from typing import Any

from safetyaward.core.logging import get_logger
from safetyaward.ingest.cell_parser import (
    MIDNIGHT_SUFFIX,
    is_placeholder,
    parse_date,
    parse_flag,
    parse_integer,
)
from safetyaward.models.diagnostics import Diagnostics, Outcome
from safetyaward.models.employee import EmployeeRecord, Track
from safetyaward.models.table import RawTable
from safetyaward.rules.awards import resolve_last_award
from safetyaward.rules.status import classify

logger = get_logger(__name__)

EMPLOYEE_NAME = "Employee Name"
HIRE_DATE = "Hire Date"
TERM_DATE = "Term Date"
REHIRE_DATE = "Re Hire Date"
LAST_ACCIDENT = "Last Accident"
TERM_WITHOUT_DATE = "Term Without Date"
NEXT_AWARD_NAME = "Next Award Name"
AWARD_RECEIVED = "Award Received"
EMPLOYEE_NUMBER = "Employee Number"

# A parenthesised tag in the name, e.g. "Jane Doe (Office)", marks the admin track.
_ADMIN_MARKER = re.compile(r"\(\w+\)")


def split_name(raw: str) -> tuple[str, Track]:
    """Strip the admin marker from a raw name and infer the track."""
    if "(" in raw:
        return " ".join(_ADMIN_MARKER.sub("", raw).split()), Track.ADMIN
    return raw.strip(), Track.FIELD


class _Draft:
    """Mutable per-row field bag filled during phase 1."""

    def __init__(self, row: int) -> None:
        self.row = row
        self.fields: dict[str, Any] = {}

    def set(self, name: str, value: Any) -> None:
        if value is not None:
            self.fields[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def __bool__(self) -> bool:
        return bool(self.fields)


class RecordBuilder:
    """Builds one EmployeeRecord per data row of a RawTable."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[_Draft, str, Diagnostics, str, int], None]] = {
            EMPLOYEE_NAME: self._employee_name,
            HIRE_DATE: self._date_field("hire_date"),
            TERM_DATE: self._date_field("termination_date"),
            REHIRE_DATE: self._date_field("rehire_date"),
            LAST_ACCIDENT: self._date_field("last_accident_date"),
            TERM_WITHOUT_DATE: self._term_without_date,
            NEXT_AWARD_NAME: self._next_award_name,
            AWARD_RECEIVED: self._date_field("last_award_date", suffix=MIDNIGHT_SUFFIX),
            EMPLOYEE_NUMBER: self._employee_number,
        }

    def build(self, table: RawTable) -> Outcome[list[EmployeeRecord]]:
        """Build every row, collecting cell diagnostics instead of stopping."""
        diagnostics = Diagnostics()
        drafts = [_Draft(i + 1) for i in range(table.row_count)]

        # Phase 1: route every cell of every recognized column into its row's draft.
        for column in table.columns:
            name = column.name.strip()
            handler = self._handlers.get(name)
            if handler is None:
                logger.debug("column_ignored", column=name)
                continue
            for i, text in enumerate(column.cells):
                if is_placeholder(text):
                    continue
                handler(drafts[i], text, diagnostics, name, i + 1)

        # Phase 2: drafts are complete, so track-dependent fields can be resolved.
        records = [self._finish(d) for d in drafts if d]
        logger.info(
            "records_built",
            rows=table.row_count,
            records=len(records),
            diagnostics=len(diagnostics),
        )
        return Outcome[list[EmployeeRecord]](value=records, diagnostics=diagnostics.to_list())

    # ---- phase 1 handlers ----

    @staticmethod
    def _date_field(field: str, suffix: str = ""):
        def handler(draft: _Draft, text: str, diagnostics: Diagnostics, column: str, row: int) -> None:
            draft.set(field, parse_date(text, diagnostics, suffix=suffix, column=column, row=row))
        return handler

    @staticmethod
    def _employee_name(draft: _Draft, text: str, diagnostics: Diagnostics, column: str, row: int) -> None:
        name, track = split_name(text)
        draft.set("name", name)
        draft.set("track", track)

    @staticmethod
    def _term_without_date(draft: _Draft, text: str, diagnostics: Diagnostics, column: str, row: int) -> None:
        draft.set("termination_override", parse_flag(text))

    @staticmethod
    def _next_award_name(draft: _Draft, text: str, diagnostics: Diagnostics, column: str, row: int) -> None:
        draft.set("next_award_name", text.strip())

    @staticmethod
    def _employee_number(draft: _Draft, text: str, diagnostics: Diagnostics, column: str, row: int) -> None:
        if parse_integer(text, diagnostics, column=column, row=row) is not None:
            draft.set("employee_id", text.strip())

    # ---- phase 2 ----

    @staticmethod
    def _finish(draft: _Draft) -> EmployeeRecord:
        track: Track = draft.get("track", Track.FIELD)
        next_award: str = draft.get("next_award_name", "")
        hire: date | None = draft.get("hire_date")
        termination: date | None = draft.get("termination_date")
        rehire: date | None = draft.get("rehire_date")
        override: bool = draft.get("termination_override", False)
        return EmployeeRecord(
            row=draft.row,
            **draft.fields,
            last_award_name=resolve_last_award(track, next_award) if next_award else None,
            status=classify(hire, termination, rehire, override),
        )


def build_records(table: RawTable) -> Outcome[list[EmployeeRecord]]:
    """Convenience wrapper around ``RecordBuilder().build``."""
    return RecordBuilder().build(table)
