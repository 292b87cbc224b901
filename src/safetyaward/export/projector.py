"""Output projection of an EmployeeRecord and its AwardLedger to the persisted document."""

from __future__ import annotations

from datetime import date

from safetyaward.models.awards import AwardLedger, AwardStep
from safetyaward.models.employee import EmployeeRecord
from safetyaward.models.outputs import AwardStepDocument, EmployeeDocument, SafetyAwardsDocument

PARTITION_KEY = ""


def format_date(value: date | None) -> str | None:
    """MM/DD/YYYY, or None for an absent date."""
    if value is None:
        return None
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def _track_document(steps: list[AwardStep]) -> dict[str, AwardStepDocument]:
    # Keys are zero-based positions; "step" carries the 1-based ordinal.
    return {
        str(i): AwardStepDocument(
            step=s.ordinal,
            receipt_id=s.receipt_id,
            received_date=format_date(s.received_date),
        )
        for i, s in enumerate(steps)
    }


def project(record: EmployeeRecord, ledger: AwardLedger) -> EmployeeDocument:
    """Map a built record and its ledger onto the fixed dual-track document."""
    return EmployeeDocument(
        id=record.employee_id,
        safety_awards=SafetyAwardsDocument(
            last_accident=format_date(ledger.last_accident_date),
            notes=ledger.notes,
            admin_track=_track_document(ledger.admin_steps),
            field_track=_track_document(ledger.field_steps),
        ),
        partition_key=PARTITION_KEY,
    )
