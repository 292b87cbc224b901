"""Protocol interfaces for the migration's external collaborators.

The core transform consumes a raw table and a duplicate-check predicate; the
backends behind these Protocols are swapped freely (DynamoDB, S3, in-memory).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from safetyaward.core.types import EmployeeId, JsonDict


# ---------------------------------------------------------------------------
# Persistence: Employee Document Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeStore(Protocol):
    """Document store holding one safety award document per employee."""

    def exists(self, employee_id: EmployeeId) -> bool: ...

    def insert(self, document: JsonDict) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Read-only source of workbook bytes (local disk or S3)."""

    def read(self, path: str) -> bytes: ...
