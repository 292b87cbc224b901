"""Shared test doubles — re-export memory backends and table builders."""

from __future__ import annotations

from safetyaward.models.table import RawTable
from safetyaward.persistence.memory_backend import MemoryEmployeeStore, MemoryFileStore

HEADERS = [
    "Employee Number",
    "Employee Name",
    "Hire Date",
    "Term Date",
    "Re Hire Date",
    "Term Without Date",
    "Last Accident",
    "Next Award Name",
    "Award Received",
]


def make_table(*rows: dict[str, str], headers: list[str] | None = None) -> RawTable:
    """Build a RawTable from row dicts keyed by header name; missing cells are blank."""
    headers = headers or HEADERS
    return RawTable.from_columns([[h, *(row.get(h, "") for row in rows)] for h in headers])


__all__ = ["HEADERS", "MemoryEmployeeStore", "MemoryFileStore", "make_table"]
