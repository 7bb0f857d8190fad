"""
Scoring Tables - v1.0

Point values per answer domain and the fixed status thresholds.
"""

from safe_scan.services.scoring.models import AnswerDomain, Status


# Points per answer value, keyed by domain.
# The first value of each table is the domain's "no issue" default.
SEVERITY_POINTS = {
    "None": 0,
    "Minor": 1,
    "Major": 2,
}

ADEQUACY_POINTS = {
    "Adequate": 0,
    "Inadequate": 2,
}

# Kept for future checklist items; no catalog item emits Yes/No today.
YES_NO_POINTS = {
    "No": 0,
    "Yes": 2,
}

DOMAIN_POINTS = {
    AnswerDomain.SEVERITY: SEVERITY_POINTS,
    AnswerDomain.ADEQUACY: ADEQUACY_POINTS,
    AnswerDomain.YES_NO: YES_NO_POINTS,
}

# Status thresholds (inclusive lower bounds), highest first.
# Fixed constants: they do not scale with the number of checklist items.
STATUS_THRESHOLDS = (
    (8, Status.RED),
    (4, Status.YELLOW),
)

# Scoring version
SCORING_VERSION = "1.0"


def domain_options(domain: AnswerDomain) -> list[str]:
    """Answer values of a domain, in display order."""
    return list(DOMAIN_POINTS[domain])


def domain_default(domain: AnswerDomain) -> str:
    """The domain's "no issue" value."""
    return next(iter(DOMAIN_POINTS[domain]))


# --- Validation (Prevent Drift) ---
def _validate_tables():
    """Ensure every domain has a zero-point default and points stay in 0..2."""
    for domain, table in DOMAIN_POINTS.items():
        if not table:
            raise ValueError(f"CRITICAL: Domain {domain.value} has no answer values")
        default = next(iter(table))
        if table[default] != 0:
            raise ValueError(f"CRITICAL: Default '{default}' of {domain.value} scores {table[default]}, expected 0")
        for value, pts in table.items():
            if not 0 <= pts <= 2:
                raise ValueError(f"CRITICAL: '{value}' of {domain.value} scores {pts}, expected 0-2")

    # Thresholds must be strictly descending
    bounds = [b for b, _ in STATUS_THRESHOLDS]
    if bounds != sorted(bounds, reverse=True) or len(set(bounds)) != len(bounds):
        raise ValueError(f"CRITICAL: Status thresholds {bounds} are not strictly descending")

_validate_tables()
