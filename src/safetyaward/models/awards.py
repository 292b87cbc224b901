"""Award progress models: per-track steps and the employee's award ledger."""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from safetyaward.models.employee import Track

ADMIN_STEP_COUNT = 2
FIELD_STEP_COUNT = 7


class AwardStep(BaseModel):
    """One ordinal step on a track (1-based)."""

    ordinal: int
    received_date: Optional[date] = None
    receipt_id: Optional[str] = None

    model_config = {"frozen": True}


def blank_steps(count: int) -> list[AwardStep]:
    return [AwardStep(ordinal=i) for i in range(1, count + 1)]


class _TrackProgress(BaseModel):
    steps: list[AwardStep]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_shape(self):
        expected = self.step_count()
        if len(self.steps) != expected:
            raise ValueError(f"{self.track} track has {expected} steps, got {len(self.steps)}")
        if [s.ordinal for s in self.steps] != list(range(1, expected + 1)):
            raise ValueError("step ordinals must run 1..n in order")
        return self

    @classmethod
    def step_count(cls) -> int:
        raise NotImplementedError


class AdminProgress(_TrackProgress):
    track: Literal[Track.ADMIN] = Track.ADMIN

    @classmethod
    def step_count(cls) -> int:
        return ADMIN_STEP_COUNT


class FieldProgress(_TrackProgress):
    track: Literal[Track.FIELD] = Track.FIELD

    @classmethod
    def step_count(cls) -> int:
        return FIELD_STEP_COUNT


AwardProgress = Annotated[Union[AdminProgress, FieldProgress], Field(discriminator="track")]


class AwardLedger(BaseModel):
    """An employee's safety award history on their own track."""

    last_accident_date: Optional[date] = None
    notes: str = ""
    progress: AwardProgress

    model_config = {"frozen": True}

    @property
    def track(self) -> Track:
        return self.progress.track

    @property
    def admin_steps(self) -> list[AwardStep]:
        """Admin steps; blank when the employee is on the field track."""
        if isinstance(self.progress, AdminProgress):
            return list(self.progress.steps)
        return blank_steps(ADMIN_STEP_COUNT)

    @property
    def field_steps(self) -> list[AwardStep]:
        """Field steps; blank when the employee is on the admin track."""
        if isinstance(self.progress, FieldProgress):
            return list(self.progress.steps)
        return blank_steps(FIELD_STEP_COUNT)
