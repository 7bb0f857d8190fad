"""
Checklist catalog endpoint.
"""
from fastapi import APIRouter

from safe_scan.schemas.assessment import CheckItemSchema
from safe_scan.services.scoring.catalog import CHECK_ITEMS
from safe_scan.services.scoring.weights import domain_default, domain_options

router = APIRouter(tags=["Checklist"])


@router.get("/checklist", response_model=list[CheckItemSchema])
async def get_checklist():
    """Checklist items in display order, with their answer options."""
    return [
        CheckItemSchema(
            key=item.key,
            label=item.label,
            help=item.help,
            domain=item.domain.value,
            options=domain_options(item.domain),
            default=domain_default(item.domain),
        )
        for item in CHECK_ITEMS
    ]
