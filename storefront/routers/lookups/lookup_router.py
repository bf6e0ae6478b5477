from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.lookups.lookup_schemas import (
    ColorListData,
    ShoeModelListData,
    LocationListData,
    SizeListData,
)
from storefront.services.lookups.lookup_service import (
    list_colors,
    list_models,
    list_locations,
    list_sizes,
)
from storefront.utils.get_admin import require_admin
from storefront.utils.response import success_response, APIResponse, ADMIN_ERROR_RESPONSES

router = APIRouter(prefix="/api/admin", tags=["Admin Lookups"], responses=ADMIN_ERROR_RESPONSES)


@router.get("/colors", response_model=APIResponse[ColorListData])
async def list_colors_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    return success_response("Colors fetched successfully", ColorListData(colors=await list_colors(db)))


@router.get("/models", response_model=APIResponse[ShoeModelListData])
async def list_models_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    return success_response("Models fetched successfully", ShoeModelListData(models=await list_models(db)))


@router.get("/locations", response_model=APIResponse[LocationListData])
async def list_locations_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    return success_response("Locations fetched successfully", LocationListData(locations=await list_locations(db)))


@router.get("/sizes", response_model=APIResponse[SizeListData])
async def list_sizes_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    return success_response("Sizes fetched successfully", SizeListData(sizes=await list_sizes(db)))
