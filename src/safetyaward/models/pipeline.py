"""Migration batch plan and report models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from safetyaward.core.exceptions import BatchRejectedError
from safetyaward.models.diagnostics import Diagnostic
from safetyaward.models.employee import EmployeeRecord
from safetyaward.models.outputs import EmployeeDocument


class BatchStatus(StrEnum):
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class MigrationMode(StrEnum):
    """Which employees a run migrates."""

    TERMINATED = "terminated"
    ACTIVE = "active"


class MigrationPlan(BaseModel):
    """Everything computed from the table before the store is touched."""

    mode: MigrationMode
    records: list[EmployeeRecord] = Field(default_factory=list)
    selected: list[EmployeeRecord] = Field(default_factory=list)
    filtered_out: list[EmployeeRecord] = Field(default_factory=list)
    unkeyed: list[EmployeeRecord] = Field(default_factory=list)  # no employee number
    rejected: list[EmployeeRecord] = Field(default_factory=list)  # row had malformed cells
    documents: list[EmployeeDocument] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics


class MigrationReport(BaseModel):
    """Outcome of a migration run."""

    status: BatchStatus
    mode: MigrationMode
    dry_run: bool = False
    built: int = 0
    filtered_out: int = 0
    unkeyed: int = 0
    rejected: int = 0
    projected: int = 0
    inserted: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)  # already present in the store
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status is BatchStatus.FAILED

    def raise_for_status(self) -> None:
        if self.failed:
            raise BatchRejectedError(self.diagnostics)

    def summary(self) -> str:
        return (
            f"{self.status}: built={self.built} filtered_out={self.filtered_out} "
            f"unkeyed={self.unkeyed} rejected={self.rejected} projected={self.projected} inserted={len(self.inserted)} "
            f"skipped={len(self.skipped)} diagnostics={len(self.diagnostics)}"
            + (" (dry run)" if self.dry_run else "")
        )
