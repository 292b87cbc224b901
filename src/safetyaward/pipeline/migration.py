"""MigrationPipeline: raw table to safety award documents in the employee store.

Flow: build records -> set aside rows with malformed cells -> filter by employment status -> resolve award ledgers
-> project documents -> (only if no diagnostics) insert documents not already
in the store.
"""

from __future__ import annotations

from safetyaward.core.logging import get_logger
from safetyaward.core.protocols import IEmployeeStore
from safetyaward.export.projector import project
from safetyaward.ingest.record_builder import RecordBuilder
from safetyaward.models.employee import EmploymentStatus
from safetyaward.models.pipeline import BatchStatus, MigrationMode, MigrationPlan, MigrationReport
from safetyaward.models.table import RawTable
from safetyaward.rules.awards import resolve_ledger

logger = get_logger(__name__)

_WANTED_STATUS = {
    MigrationMode.TERMINATED: EmploymentStatus.TERMINATED,
    MigrationMode.ACTIVE: EmploymentStatus.ACTIVE,
}


class MigrationPipeline:
    """Runs one batch over a RawTable against an IEmployeeStore."""

    def __init__(self, store: IEmployeeStore, *,
                 mode: MigrationMode | str = MigrationMode.TERMINATED,
                 dry_run: bool = False,
                 builder: RecordBuilder | None = None) -> None:
        self._store = store
        self._mode = MigrationMode(mode)
        self._dry_run = dry_run
        self._builder = builder or RecordBuilder()

    @property
    def mode(self) -> MigrationMode:
        return self._mode

    def plan(self, table: RawTable) -> MigrationPlan:
        """Compute documents for the table without touching the store."""
        built = self._builder.build(table)
        wanted = _WANTED_STATUS[self._mode]

        plan = MigrationPlan(mode=self._mode, records=built.value, diagnostics=built.diagnostics)
        bad_rows = {d.row for d in built.diagnostics}
        for record in built.value:
            if record.row in bad_rows:
                plan.rejected.append(record)
            elif record.status is not wanted:
                plan.filtered_out.append(record)
            elif not record.employee_id:
                logger.warning("employee_unkeyed", name=record.name)
                plan.unkeyed.append(record)
            else:
                plan.selected.append(record)

        plan.documents = [project(r, resolve_ledger(r)) for r in plan.selected]
        logger.info(
            "plan_ready",
            mode=str(self._mode),
            records=len(plan.records),
            filtered_out=len(plan.filtered_out),
            unkeyed=len(plan.unkeyed),
            rejected=len(plan.rejected),
            documents=len(plan.documents),
        )
        return plan

    def run(self, table: RawTable) -> MigrationReport:
        """Plan the batch and persist it, unless any cell failed to parse."""
        plan = self.plan(table)
        report = MigrationReport(
            status=BatchStatus.COMPLETED,
            mode=self._mode,
            dry_run=self._dry_run,
            built=len(plan.records),
            filtered_out=len(plan.filtered_out),
            unkeyed=len(plan.unkeyed),
            rejected=len(plan.rejected),
            projected=len(plan.documents),
            diagnostics=plan.diagnostics,
        )

        if not plan.ok:
            for diagnostic in plan.diagnostics:
                logger.error(
                    "diagnostic",
                    kind=diagnostic.kind,
                    column=diagnostic.column,
                    row=diagnostic.row,
                    text=diagnostic.text,
                )
            logger.error("batch_failed", reason="poor data formatting", diagnostics=len(plan.diagnostics))
            report.status = BatchStatus.FAILED
            return report

        if self._dry_run:
            logger.info("dry_run_complete", documents=len(plan.documents))
            return report

        for document in plan.documents:
            if self._store.exists(document.id):
                logger.info("document_skipped", id=document.id, reason="exists")
                report.skipped.append(document.id)
                continue
            # The store may still report a duplicate if another writer got in
            # between the existence check and the conditional insert.
            if self._store.insert(document.to_item()):
                logger.info("document_inserted", id=document.id)
                report.inserted.append(document.id)
            else:
                logger.info("document_skipped", id=document.id, reason="insert_conflict")
                report.skipped.append(document.id)

        logger.info("batch_completed", inserted=len(report.inserted), skipped=len(report.skipped))
        return report
