"""Employment status classification from hire/termination/rehire dates."""

from __future__ import annotations

from datetime import date

from safetyaward.models.employee import EmploymentStatus


def classify(hire: date | None, termination: date | None, rehire: date | None,
             override: bool) -> EmploymentStatus:
    """Classify an employee as active or terminated.

    Rules are evaluated in order and the first match wins:

    1. ``override`` ("Term Without Date") set: terminated.
    2. Rehire recorded: active. A termination after the rehire and a
       termination before it (the rehire ended that termination) both keep
       the employee active; the hire-date rule is not consulted.
    3. Termination strictly after hire: terminated. Earlier copies of the
       migration treated this case as active, which kept employees with a
       recorded termination in the active set.
    4. Otherwise active.

    A missing hire date counts as earlier than any termination date.
    """
    if override:
        return EmploymentStatus.TERMINATED
    if rehire is not None:
        return EmploymentStatus.ACTIVE
    if termination is not None and (hire is None or termination > hire):
        return EmploymentStatus.TERMINATED
    return EmploymentStatus.ACTIVE
