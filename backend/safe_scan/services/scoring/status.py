"""
Status Classifier - Maps a risk total to GREEN / YELLOW / RED.

- 0-3  → GREEN
- 4-7  → YELLOW
- 8+   → RED
"""

from safe_scan.services.scoring.models import Status
from safe_scan.services.scoring.weights import STATUS_THRESHOLDS


STATUS_DESCRIPTIONS = {
    Status.GREEN: "Low risk - maintain & monitor",
    Status.YELLOW: "Moderate risk - fix issues soon",
    Status.RED: "High risk - immediate action required",
}

SCORE_LEGEND = "0-3 Green | 4-7 Yellow | 8+ Red"


def classify(total: int) -> Status:
    """Classify a risk total. Totals below every threshold (including negatives) are GREEN."""
    for lower_bound, status in STATUS_THRESHOLDS:
        if total >= lower_bound:
            return status
    return Status.GREEN


def describe(status: Status) -> str:
    return STATUS_DESCRIPTIONS[Status(status)]
