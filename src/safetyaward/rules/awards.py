"""Award ledger resolution.

Each track hands out its awards in a fixed order. The spreadsheet only records
the *next* award due, so the last award received is its predecessor on the
track; "done" means the final award has been received.
"""

from __future__ import annotations

from datetime import date

from safetyaward.models.awards import (
    AdminProgress,
    AwardLedger,
    AwardProgress,
    AwardStep,
    FieldProgress,
)
from safetyaward.models.employee import EmployeeRecord, Track

AWARD_SEQUENCES: dict[Track, tuple[str, ...]] = {
    Track.ADMIN: ("Lunchbox", "Set"),
    Track.FIELD: ("Cap", "Lunchbox", "Backpack", "Multitool", "Knife", "Set", "$750"),
}

DONE = "done"
NO_AWARD = "none"

_PROGRESS_TYPES = {Track.ADMIN: AdminProgress, Track.FIELD: FieldProgress}


def award_ordinal(track: Track, award_name: str | None) -> int | None:
    """1-based position of ``award_name`` on ``track``, or None if not on it."""
    if not award_name:
        return None
    wanted = award_name.strip().lower()
    for i, name in enumerate(AWARD_SEQUENCES[track], start=1):
        if name.lower() == wanted:
            return i
    return None


def resolve_last_award(track: Track, next_award_name: str) -> str | None:
    """Name of the award preceding ``next_award_name`` on the track.

    Returns ``"none"`` when the next award is the first on the track and
    ``None`` for free text that names no award on the track.
    """
    sequence = AWARD_SEQUENCES[track]
    if next_award_name.strip().lower() == DONE:
        return sequence[-1]
    ordinal = award_ordinal(track, next_award_name)
    if ordinal is None:
        return None
    if ordinal == 1:
        return NO_AWARD
    return sequence[ordinal - 2]


def build_progress(track: Track, last_award_name: str | None,
                   received: date | None) -> AwardProgress:
    progress_type = _PROGRESS_TYPES[track]
    dated = award_ordinal(track, last_award_name)
    steps = [
        AwardStep(ordinal=i, received_date=received if i == dated else None)
        for i in range(1, progress_type.step_count() + 1)
    ]
    return progress_type(steps=steps)


def resolve_ledger(record: EmployeeRecord) -> AwardLedger:
    """Build the award ledger for a fully built employee record."""
    return AwardLedger(
        last_accident_date=record.last_accident_date,
        progress=build_progress(record.track, record.last_award_name, record.last_award_date),
    )
