"""Type aliases used across the safety award migration."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
EmployeeId = str
