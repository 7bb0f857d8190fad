"""
Checklist Catalog - the fixed, ordered set of inspection questions.

Order is display order; scoring does not depend on it.
"""

from typing import Optional

from safe_scan.services.scoring.models import AnswerDomain, CheckItem
from safe_scan.services.scoring.weights import domain_default


CHECK_ITEMS: tuple[CheckItem, ...] = (
    CheckItem("wallCracks", "Visible wall cracks", help="Hairline vs large diagonal/through cracks"),
    CheckItem("columnTilt", "Tilted columns / beam deformation"),
    CheckItem("unevenFloor", "Uneven or sunken floor"),
    CheckItem("roofLeak", "Roof leaks / ceiling stains"),
    CheckItem("looseCeiling", "Loose ceiling panels / falling debris risk"),
    CheckItem("exposedRebar", "Exposed rusty reinforcement / spalling"),
    CheckItem("stuckFrames", "Doors/windows stuck / misaligned frames"),
    CheckItem("waterDamage", "Dampness, persistent water damage"),
    CheckItem("electrical", "Exposed electrical cables/sockets"),
    CheckItem("heavyObjects", "Heavy items (cabinets/AC) not secured"),
    CheckItem("nearTrees", "Large tree within ~5m of building"),
    CheckItem("blockedExit", "Blocked emergency exits / pathways"),
    CheckItem("ventilation", "Adequate ventilation?", domain=AnswerDomain.ADEQUACY),
    CheckItem("overcapacity", "Overcapacity (too many occupants)"),
    CheckItem("foundation", "Foundation settlement signs (gaps/tilt)"),
    CheckItem("creaking", "Unusual loud creaking under load"),
    CheckItem("groundShift", "Ground shifting / uneven soil around the building"),
    CheckItem("floodHistory", "Flooding history in last 12 months"),
    CheckItem("evacArea", "Clear evacuation area available?", domain=AnswerDomain.ADEQUACY),
)

_BY_KEY = {item.key: item for item in CHECK_ITEMS}


def catalog_keys() -> tuple[str, ...]:
    """All checklist keys in display order."""
    return tuple(_BY_KEY)


def get_item(key: str) -> Optional[CheckItem]:
    return _BY_KEY.get(key)


def domain_for(key: str) -> Optional[AnswerDomain]:
    """Answer domain of a key, or None for keys outside the catalog."""
    item = _BY_KEY.get(key)
    return item.domain if item else None


def default_answers() -> dict[str, str]:
    """Fresh answer set with every item at its "no issue" value."""
    return {item.key: domain_default(item.domain) for item in CHECK_ITEMS}
