from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import HISTORY_DEFAULT_LIMIT, HISTORY_MAX_LIMIT
from storefront.constants.translations import Language
from storefront.models.catalog.location_models import Location
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.models.inventory.inventory_item_models import InventoryItem
from storefront.schemas.inventory.inventory_schemas import InventoryHistoryData
from storefront.services.inventory.inventory_service import map_inventory_item


def normalize_limit(raw) -> int:
    """Garbage, zero or negative falls back to the default; never above the cap."""
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        limit = 0
    if limit <= 0:
        limit = HISTORY_DEFAULT_LIMIT
    return min(limit, HISTORY_MAX_LIMIT)


async def list_history(
    db: AsyncSession,
    *,
    limit,
    location: str | None,
    lang: Language = Language.ES,
) -> InventoryHistoryData:
    limit = normalize_limit(limit)

    query = select(InventoryItem).where(InventoryItem.status != InventoryStatus.AVAILABLE)

    location = (location or "").strip()
    if location and location.lower() != "all":
        if location.isdigit():
            query = query.where(InventoryItem.location_id == int(location))
        else:
            query = query.where(
                InventoryItem.location_id.in_(
                    select(Location.id).where(Location.slug == location.lower())
                )
            )

    result = await db.execute(
        query.order_by(InventoryItem.updated_at.desc(), InventoryItem.id.desc()).limit(limit)
    )

    return InventoryHistoryData(
        limit=limit,
        history=[map_inventory_item(row, lang) for row in result.scalars().unique().all()],
    )
