from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AnswerDomain(str, Enum):
    """Answer scales a checklist item can use."""
    SEVERITY = "severity"  # None / Minor / Major
    ADEQUACY = "adequacy"  # Adequate / Inadequate
    YES_NO = "yes_no"  # No / Yes - not used by the current catalog


class Status(str, Enum):
    """Room risk status."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


@dataclass(frozen=True)
class CheckItem:
    """One fixed inspection question."""
    key: str
    label: str
    domain: AnswerDomain = AnswerDomain.SEVERITY
    help: Optional[str] = None


@dataclass
class Check:
    """Scored answer for a single checklist item."""
    key: str
    label: str
    value: str
    points_awarded: int
    points_possible: int
