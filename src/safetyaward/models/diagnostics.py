"""Accumulated, non-fatal cell parse failures."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from safetyaward.core.exceptions import CellParseError

T = TypeVar("T")


class Diagnostic(BaseModel):
    """A single malformed cell."""

    kind: str  # "date" or "integer"
    text: str
    message: str
    column: str = ""
    row: Optional[int] = None  # 1-based data row, header excluded

    model_config = {"frozen": True}

    @classmethod
    def from_error(cls, error: CellParseError, *, column: str = "",
                   row: int | None = None) -> Diagnostic:
        return cls(kind=error.kind, text=error.text, message=str(error), column=column, row=row)

    def __str__(self) -> str:
        where = f"{self.column} row {self.row}" if self.row is not None else self.column
        return f"{where}: {self.message}" if where else self.message


class Diagnostics:
    """Append-only collector shared across a batch pass.

    Appends are locked so rows may be processed concurrently without losing
    reports.
    """

    def __init__(self, items: Iterable[Diagnostic] = ()) -> None:
        self._items: list[Diagnostic] = list(items)
        self._lock = threading.Lock()

    def append(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._items.append(diagnostic)

    def record(self, error: CellParseError, *, column: str = "", row: int | None = None) -> None:
        self.append(Diagnostic.from_error(error, column=column, row=row))

    def to_list(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


class Outcome(BaseModel, Generic[T]):
    """A value plus zero-or-more warnings collected while producing it."""

    value: T
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
