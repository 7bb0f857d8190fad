"""
Recommendation Engine - Turns checklist answers into advisory actions.

Rules are independent and evaluated in declaration order against the same
answer set. Every matching rule contributes its text; nothing is deduplicated.
"""

from dataclasses import dataclass
from typing import Callable, List, Mapping

from safe_scan.services.scoring.catalog import CHECK_ITEMS
from safe_scan.services.scoring.weights import DOMAIN_POINTS, domain_default


# Shown by callers when no rule fires.
NO_ISSUES_MESSAGE = "No critical issues detected. Maintain routine monitoring."


@dataclass(frozen=True)
class Rule:
    """Advisory text plus the predicate that triggers it."""
    id: str
    applies: Callable[[Mapping[str, str]], bool]
    text: str


RULES: tuple[Rule, ...] = (
    Rule(
        "structural_cracks",
        lambda v: v["wallCracks"] == "Major",
        "Stop using the room; consult a qualified technician/engineer for crack assessment.",
    ),
    Rule(
        "column_tilt",
        lambda v: v["columnTilt"] != "None",
        "Check alignment of columns/beams; if tilt is visible, restrict access and report.",
    ),
    Rule(
        "roof_ceiling",
        lambda v: v["roofLeak"] != "None" or v["looseCeiling"] != "None",
        "Fix roof leaks and secure ceiling panels to prevent falling objects.",
    ),
    Rule(
        "exposed_rebar",
        lambda v: v["exposedRebar"] != "None",
        "Repair spalling concrete and protect exposed reinforcement from corrosion.",
    ),
    Rule(
        "electrical",
        lambda v: v["electrical"] != "None",
        "Secure exposed electrical components; isolate power if necessary.",
    ),
    Rule(
        "blocked_exit",
        lambda v: v["blockedExit"] != "None",
        "Clear emergency exits and keep pathways unobstructed.",
    ),
    Rule(
        "overcapacity",
        lambda v: v["overcapacity"] != "None",
        "Reduce classroom occupancy to safe levels.",
    ),
    Rule(
        "ventilation",
        lambda v: v["ventilation"] == "Inadequate",
        "Improve ventilation (open windows, install vents/fans as appropriate).",
    ),
    Rule(
        "near_trees",
        lambda v: v["nearTrees"] != "None",
        "Trim or assess large trees near the structure to minimize fall risk.",
    ),
    Rule(
        "foundation",
        lambda v: v["foundation"] != "None",
        "Investigate signs of settlement; avoid heavy loads; seek expert inspection.",
    ),
    Rule(
        "ground_shift",
        lambda v: v["groundShift"] != "None",
        "Check soil settlement; avoid adding load; consider temporary room closure "
        "and consult local public works/technician.",
    ),
    Rule(
        "flood_history",
        lambda v: v["floodHistory"] != "None",
        "Store assets higher, protect electrical points; prepare flood SOP.",
    ),
    Rule(
        "evacuation_area",
        lambda v: v["evacArea"] == "Inadequate",
        "Designate a clear evacuation area and mark routes visibly.",
    ),
)


def _normalize(answers: Mapping[str, str]) -> dict[str, str]:
    """Catalog-only view of the answers with gaps filled by domain defaults."""
    normalized = {}
    for item in CHECK_ITEMS:
        value = answers.get(item.key)
        if value not in DOMAIN_POINTS[item.domain]:
            value = domain_default(item.domain)
        normalized[item.key] = value
    return normalized


class RecommendationEngine:
    """Evaluate the advisory rule set."""
    
    def __init__(self, rules: tuple[Rule, ...] = RULES):
        self.rules = rules
    
    def recommend(self, answers: Mapping[str, str]) -> List[str]:
        values = _normalize(answers)
        return [rule.text for rule in self.rules if rule.applies(values)]
    
    def fired_rules(self, answers: Mapping[str, str]) -> List[str]:
        """Ids of the rules that hold, in rule order."""
        values = _normalize(answers)
        return [rule.id for rule in self.rules if rule.applies(values)]


_default_engine = RecommendationEngine()


def recommend(answers: Mapping[str, str]) -> List[str]:
    """Advisory texts for every rule that holds, in rule order.

    Returns an empty list when nothing fires; presenting NO_ISSUES_MESSAGE
    is up to the caller.
    """
    return _default_engine.recommend(answers)
