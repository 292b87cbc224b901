"""Canonical employee record, one per spreadsheet row."""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class Track(StrEnum):
    ADMIN = "admin"
    FIELD = "field"


class EmploymentStatus(StrEnum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class EmployeeRecord(BaseModel):
    """Normalized employee; frozen once the Record Builder finishes."""

    # --- Identity Fields ---
    row: int = 0  # 1-based source data row, header excluded
    employee_id: str = ""
    name: str = ""
    track: Track = Track.FIELD

    # --- Employment Fields ---
    hire_date: Optional[date] = None
    termination_date: Optional[date] = None
    rehire_date: Optional[date] = None
    termination_override: bool = False  # "Term Without Date"
    status: EmploymentStatus = EmploymentStatus.ACTIVE

    # --- Safety Award Fields ---
    last_accident_date: Optional[date] = None
    next_award_name: str = ""
    last_award_name: Optional[str] = None  # None when next_award_name is unrecognized
    last_award_date: Optional[date] = None

    model_config = {"str_strip_whitespace": True, "frozen": True}

    @property
    def is_active(self) -> bool:
        return self.status is EmploymentStatus.ACTIVE
