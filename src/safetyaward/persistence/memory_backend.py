"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from typing import Any

from safetyaward.core.exceptions import TableReadError


class MemoryEmployeeStore:
    """Dict-backed IEmployeeStore for unit tests."""

    def __init__(self) -> None:
        self._items: dict[str, dict[str, Any]] = {}
        self.exists_calls: list[str] = []

    def exists(self, employee_id: str) -> bool:
        self.exists_calls.append(employee_id)
        return employee_id in self._items

    def insert(self, document: dict[str, Any]) -> bool:
        if document["id"] in self._items:
            return False
        self._items[document["id"]] = document
        return True

    def get(self, employee_id: str) -> dict[str, Any] | None:
        return self._items.get(employee_id)

    def __len__(self) -> int:
        return len(self._items)


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})

    def read(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise TableReadError(f"No such file: {path!r}") from exc
