"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from safetyaward.core.protocols import IEmployeeStore, IFileStore

__all__ = ["IEmployeeStore", "IFileStore"]
