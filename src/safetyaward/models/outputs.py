"""Output document models: the persisted safety award shape."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from safetyaward.core.types import JsonDict


class AwardStepDocument(BaseModel):
    """Single step entry inside adminTrack / fieldTrack."""

    step: int
    receipt_id: Optional[str] = Field(default=None, alias="receiptId")
    received_date: Optional[str] = Field(default=None, alias="receivedDate")  # MM/DD/YYYY

    model_config = {"populate_by_name": True}


class SafetyAwardsDocument(BaseModel):
    """The safetyAwards sub-document; both tracks are always present."""

    last_accident: Optional[str] = Field(default=None, alias="lastAccident")  # MM/DD/YYYY
    notes: str = ""
    admin_track: dict[str, AwardStepDocument] = Field(alias="adminTrack")
    field_track: dict[str, AwardStepDocument] = Field(alias="fieldTrack")

    model_config = {"populate_by_name": True}


class EmployeeDocument(BaseModel):
    """One employee item as written to the document store."""

    id: str
    safety_awards: SafetyAwardsDocument = Field(alias="safetyAwards")
    partition_key: str = Field(default="", alias="_partitionKey")

    model_config = {"populate_by_name": True}

    def to_item(self) -> JsonDict:
        """Serialize to the wire shape with camelCase keys and explicit nulls."""
        return self.model_dump(by_alias=True)
