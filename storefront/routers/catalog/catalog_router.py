from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.catalog.catalog_schemas import CatalogData, InventoryListData
from storefront.services.catalog.catalog_service import build_catalog, fetch_available_items
from storefront.utils.response import success_response, APIResponse

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/inventory", response_model=APIResponse[InventoryListData])
async def list_available_inventory_api(
    db: AsyncSession = Depends(get_db),
):
    items = await fetch_available_items(db)
    return success_response(
        "Inventory fetched successfully",
        InventoryListData(items=items),
    )


@router.get("/catalog", response_model=APIResponse[CatalogData])
async def catalog_api(
    db: AsyncSession = Depends(get_db),
    lang: str | None = Query("es"),
    location: str | None = Query(None, description="Location id or slug"),
    model: str | None = Query(None),
    color: str | None = Query(None, description="English color name"),
    size: str | None = Query(None, description="Size label"),
):
    data = await build_catalog(
        db,
        lang=lang,
        location=location,
        model=model,
        color=color,
        size=size,
    )
    return success_response("Catalog fetched successfully", data)
