"""
Dashboard Query - Narrow saved assessments by status.
"""
from enum import Enum
from typing import Sequence, TypeVar

from safe_scan.services.scoring.models import Status


class StatusFilter(str, Enum):
    """Dashboard filter options."""
    ALL = "ALL"
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


R = TypeVar("R")


def filter_by_status(records: Sequence[R], status_filter: StatusFilter | str) -> list[R]:
    """Records matching the filter, in their original order.

    ALL returns every record unchanged.
    """
    status_filter = StatusFilter(status_filter)
    if status_filter is StatusFilter.ALL:
        return list(records)
    return [r for r in records if Status(r.status).value == status_filter.value]


def status_counts(records: Sequence) -> dict[str, int]:
    """Number of records per status; every status is present."""
    counts = {s.value: 0 for s in Status}
    for r in records:
        counts[Status(r.status).value] += 1
    return counts
