"""
Risk Scorer - Converts checklist answers into risk points.
"""
from dataclasses import dataclass
from typing import List, Mapping, Optional

from safe_scan.services.scoring.catalog import CHECK_ITEMS, domain_for
from safe_scan.services.scoring.models import Check
from safe_scan.services.scoring.weights import DOMAIN_POINTS


def score_points(key: str, value: Optional[str]) -> int:
    """Points for one answer.

    Unknown keys, missing values and values outside the key's domain
    all score 0.
    """
    domain = domain_for(key)
    if domain is None or value is None:
        return 0
    return DOMAIN_POINTS[domain].get(value, 0)


def total_score(answers: Mapping[str, str]) -> int:
    """Sum of per-item points over the catalog. Extra keys are ignored."""
    return sum(score_points(item.key, answers.get(item.key)) for item in CHECK_ITEMS)


@dataclass
class RiskResult:
    """Result of risk scoring."""
    total: int
    checks: List[Check]


class RiskScorer:
    """Scores a full answer set item by item."""
    
    def score(self, answers: Mapping[str, str]) -> RiskResult:
        checks = []
        for item in CHECK_ITEMS:
            value = answers.get(item.key)
            table = DOMAIN_POINTS[item.domain]
            if value not in table:
                # Missing or out-of-domain answers read as the default
                value = next(iter(table))
            checks.append(Check(
                key=item.key,
                label=item.label,
                value=value,
                points_awarded=score_points(item.key, value),
                points_possible=max(table.values()),
            ))
        
        total = sum(c.points_awarded for c in checks)
        return RiskResult(total=total, checks=checks)
