from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.inventory.inventory_schemas import InventoryHistoryData
from storefront.services.inventory.history_service import list_history
from storefront.utils.get_admin import require_admin
from storefront.utils.i18n import parse_language
from storefront.utils.response import success_response, APIResponse, ADMIN_ERROR_RESPONSES

router = APIRouter(prefix="/api/admin/history", tags=["Admin History"], responses=ADMIN_ERROR_RESPONSES)


@router.get("", response_model=APIResponse[InventoryHistoryData])
async def list_history_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
    limit: str | None = Query(None, description="Default 20, at most 30"),
    location: str | None = Query(None, alias="locationId", description="Location id, slug or 'all'"),
    lang: str | None = Query("es"),
):
    data = await list_history(db, limit=limit, location=location, lang=parse_language(lang))
    return success_response("History fetched successfully", data)
