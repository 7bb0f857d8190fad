"""
Scoring Engine - Main orchestrator that combines all scorers.

Coordinates:
- Risk scorer (per-item points and total)
- Status classifier
- Recommendation engine

Holds no derived state: callers re-run evaluate() after every answer change.
"""

from dataclasses import dataclass, field
from typing import Mapping

from safe_scan.services.scoring.weights import SCORING_VERSION
from safe_scan.services.scoring.risk_scorer import RiskScorer
from safe_scan.services.scoring.recommendations import RecommendationEngine
from safe_scan.services.scoring.status import classify, describe
from safe_scan.services.scoring.models import Check, Status
from safe_scan.logger import logger


@dataclass
class Evaluation:
    """Complete evaluation of one answer set."""
    total: int
    status: Status
    status_description: str
    
    # Details
    recommendations: list[str] = field(default_factory=list)
    checks: list[Check] = field(default_factory=list)
    
    # Metadata
    scoring_version: str = SCORING_VERSION


class ScoringEngine:
    """Main scoring orchestrator."""
    
    def __init__(self):
        self.risk_scorer = RiskScorer()
        self.recommendation_engine = RecommendationEngine()
    
    def evaluate(self, answers: Mapping[str, str]) -> Evaluation:
        """Score, classify and collect advisories for an answer set.
        
        Recommendations come from the raw answers, not from the total.
        """
        risk = self.risk_scorer.score(answers)
        status = classify(risk.total)
        recommendations = self.recommendation_engine.recommend(answers)
        
        logger.debug(
            f"Evaluated answers: total={risk.total}, status={status.value}, "
            f"recommendations={len(recommendations)}"
        )
        
        return Evaluation(
            total=risk.total,
            status=status,
            status_description=describe(status),
            recommendations=recommendations,
            checks=risk.checks,
        )
