# storefront/services/auth/activity_service.py

from sqlalchemy import select, func, asc, desc
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import AppException
from storefront.constants.error_codes import ErrorCode
from storefront.models.support.activity_models import AdminActivity
from storefront.schemas.auth.activity_schemas import (
    AdminActivityFilters,
    AdminActivityListData,
    AdminActivityOut,
)
from storefront.utils.logger import get_logger

logger = get_logger(__name__)

SORT_DIRECTIONS = {"asc": asc, "desc": desc}


async def list_admin_activities(
    *,
    db: AsyncSession,
    filters: AdminActivityFilters,
) -> AdminActivityListData:
    direction = SORT_DIRECTIONS.get(filters.sort_order)
    if direction is None:
        raise AppException(400, "sort_order must be asc or desc", ErrorCode.VALIDATION_ERROR)

    conditions = []
    if filters.code:
        conditions.append(AdminActivity.code == filters.code.strip().upper())

    total = await db.scalar(select(func.count(AdminActivity.id)).where(*conditions))

    result = await db.execute(
        select(AdminActivity)
        .where(*conditions)
        .order_by(direction(AdminActivity.created_at), direction(AdminActivity.id))
        .offset((filters.page - 1) * filters.page_size)
        .limit(filters.page_size)
    )

    logger.debug("Admin activities fetched", extra={"rows": total or 0})

    return AdminActivityListData(
        total=total or 0,
        items=[AdminActivityOut.model_validate(row) for row in result.scalars().all()],
    )
