from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.auth.activity_schemas import (
    AdminActivityFilters,
    AdminActivityListData,
)
from storefront.services.auth.activity_service import list_admin_activities
from storefront.utils.get_admin import require_admin
from storefront.utils.response import success_response, APIResponse, ADMIN_ERROR_RESPONSES
from storefront.utils.logger import get_logger

router = APIRouter(prefix="/api/admin/activity", tags=["Admin Activity"], responses=ADMIN_ERROR_RESPONSES)
logger = get_logger(__name__)


@router.get("", response_model=APIResponse[AdminActivityListData])
async def list_admin_activities_api(
    filters: AdminActivityFilters = Depends(),
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    logger.info(
        "List admin activities requested",
        extra=filters.model_dump(exclude_none=True),
    )

    result = await list_admin_activities(db=db, filters=filters)

    return success_response(
        "Admin activities fetched successfully",
        result,
    )
