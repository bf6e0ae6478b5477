from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import INVENTORY_PAGE_SIZE
from storefront.core.db import get_db
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.schemas.inventory.inventory_schemas import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemOut,
    InventoryCreateResult,
    InventoryAdminListData,
)
from storefront.services.inventory.inventory_service import (
    list_inventory,
    create_inventory,
    update_inventory,
)
from storefront.utils.get_admin import require_admin
from storefront.utils.i18n import parse_language
from storefront.utils.response import success_response, APIResponse, ADMIN_ERROR_RESPONSES
from storefront.utils.logger import get_logger

router = APIRouter(prefix="/api/admin/inventory", tags=["Admin Inventory"], responses=ADMIN_ERROR_RESPONSES)
logger = get_logger(__name__)


# =========================
# LIST
# =========================
@router.get("", response_model=APIResponse[InventoryAdminListData])
async def list_inventory_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
    status: InventoryStatus | None = Query(None),
    size_id: int | None = Query(None),
    color: str | None = Query(None),
    location_id: int | None = Query(None),
    q: str | None = Query(None, description="Customer name or WhatsApp"),
    page: int = Query(1, ge=1),
    page_size: int = Query(INVENTORY_PAGE_SIZE, ge=1, le=100),
    lang: str | None = Query("es"),
):
    data = await list_inventory(
        db,
        status=status,
        size_id=size_id,
        color=color,
        location_id=location_id,
        q=q,
        page=page,
        page_size=page_size,
        lang=parse_language(lang),
    )
    return success_response("Inventory fetched successfully", data)


# =========================
# CREATE
# =========================
@router.post("", response_model=APIResponse[InventoryCreateResult])
async def create_inventory_api(
    payload: InventoryItemCreate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    logger.info(
        "Add inventory",
        extra={"model": payload.model_name, "quantity": payload.quantity},
    )
    result = await create_inventory(db, payload)
    return success_response("Pairs added successfully", result)


# =========================
# UPDATE
# =========================
@router.patch("", response_model=APIResponse[InventoryItemOut])
async def update_inventory_api(
    payload: InventoryItemUpdate,
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    item = await update_inventory(db, payload)
    return success_response("Item updated successfully", item)
