# storefront/services/inventory/inventory_service.py

import math
from enum import Enum

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.exceptions import AppException
from storefront.constants.error_codes import ErrorCode
from storefront.constants.activity_codes import ActivityCode
from storefront.constants.translations import Language
from storefront.models.catalog.color_models import Color
from storefront.models.catalog.location_models import Location
from storefront.models.catalog.shoe_model_models import ShoeModel
from storefront.models.catalog.size_models import Size
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.models.inventory.inventory_item_models import InventoryItem
from storefront.schemas.inventory.inventory_schemas import (
    LocationRef,
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemOut,
    InventoryCreateResult,
    InventoryAdminListData,
)
from storefront.utils.activity_helpers import emit_activity
from storefront.utils.decimal_utils import to_decimal, format_mxn
from storefront.utils.i18n import status_label
from storefront.utils.logger import get_logger

logger = get_logger(__name__)

NON_NULLABLE_FIELDS = {"status", "location_id"}


# =====================================================
# MAPPER
# =====================================================
def map_inventory_item(row: InventoryItem, lang: Language = Language.ES) -> InventoryItemOut:
    return InventoryItemOut(
        id=row.id,
        model_id=row.model_id,
        color_id=row.color_id,
        size_id=row.size_id,
        location_id=row.location_id,
        model_name=row.shoe_model.name if row.shoe_model else None,
        color=row.color.name_en if row.color else None,
        size=row.size_option.label if row.size_option else (row.size or ""),
        location=LocationRef.model_validate(row.location) if row.location else None,
        price_mxn=float(row.price_mxn),
        status=row.status,
        status_label=status_label(row.status, lang),
        customer_name=row.customer_name,
        customer_whatsapp=row.customer_whatsapp,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


# =====================================================
# HELPERS
# =====================================================
def _display(value):
    return value.value if isinstance(value, Enum) else value


def _detect_changes(model, updates: dict) -> list[str]:
    changes: list[str] = []
    for field, new_value in updates.items():
        old_value = getattr(model, field)
        if old_value != new_value:
            changes.append(f"{field}: {_display(old_value)} → {_display(new_value)}")
    return changes


async def _load_item(db: AsyncSession, item_id: int) -> InventoryItem | None:
    result = await db.execute(
        select(InventoryItem)
        .where(InventoryItem.id == item_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().unique().one_or_none()


async def _get_or_create_model(db: AsyncSession, name: str) -> ShoeModel:
    model = await db.scalar(select(ShoeModel).where(ShoeModel.name == name))
    if model:
        return model

    model = ShoeModel(name=name)
    db.add(model)
    await db.flush()
    logger.info("Model created", extra={"model": name})
    return model


async def _get_or_create_color(db: AsyncSession, name_en: str) -> Color:
    color = await db.scalar(select(Color).where(Color.name_en == name_en))
    if color:
        return color

    color = Color(name_en=name_en)
    db.add(color)
    await db.flush()
    logger.info("Color created", extra={"color": name_en})
    return color


def _list_filters(
    *,
    status: InventoryStatus | None,
    size_id: int | None,
    color: str | None,
    location_id: int | None,
    q: str | None,
) -> list:
    filters = []

    if status:
        filters.append(InventoryItem.status == status)
    if size_id:
        filters.append(InventoryItem.size_id == size_id)
    if color and color != "all":
        filters.append(
            InventoryItem.color_id.in_(
                select(Color.id).where(func.lower(Color.name_en) == color.strip().lower())
            )
        )
    if location_id:
        filters.append(InventoryItem.location_id == location_id)

    query = (q or "").strip()
    if query:
        like = f"%{query}%"
        filters.append(
            or_(
                InventoryItem.customer_name.ilike(like),
                InventoryItem.customer_whatsapp.ilike(like),
            )
        )

    return filters


# =====================================================
# LIST
# =====================================================
async def list_inventory(
    db: AsyncSession,
    *,
    status: InventoryStatus | None,
    size_id: int | None,
    color: str | None,
    location_id: int | None,
    q: str | None,
    page: int,
    page_size: int,
    lang: Language = Language.ES,
) -> InventoryAdminListData:
    filters = _list_filters(
        status=status,
        size_id=size_id,
        color=color,
        location_id=location_id,
        q=q,
    )

    total_all = await db.scalar(select(func.count(InventoryItem.id)))
    total = await db.scalar(select(func.count(InventoryItem.id)).where(*filters))

    status_rows = await db.execute(
        select(InventoryItem.status, func.count(InventoryItem.id))
        .where(*filters)
        .group_by(InventoryItem.status)
    )
    counts_by_status = {s.value: 0 for s in InventoryStatus}
    for row_status, count in status_rows.all():
        counts_by_status[InventoryStatus(row_status).value] = count

    total = total or 0
    total_pages = max(1, math.ceil(total / page_size))
    page = min(page, total_pages)

    result = await db.execute(
        select(InventoryItem)
        .where(*filters)
        .order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    )

    return InventoryAdminListData(
        total=total,
        total_all=total_all or 0,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        counts_by_status=counts_by_status,
        items=[map_inventory_item(row, lang) for row in result.scalars().unique().all()],
    )


# =====================================================
# CREATE (one row per pair)
# =====================================================
async def create_inventory(
    db: AsyncSession,
    payload: InventoryItemCreate,
) -> InventoryCreateResult:
    size = await db.get(Size, payload.size_id)
    if not size:
        raise AppException(400, "Invalid size_id", ErrorCode.INVALID_SIZE)

    location = await db.get(Location, payload.location_id)
    if not location:
        raise AppException(400, "Invalid location_id", ErrorCode.INVALID_LOCATION)

    model = await _get_or_create_model(db, payload.model_name)
    color = await _get_or_create_color(db, payload.color)

    price = to_decimal(payload.price_mxn)
    rows = [
        InventoryItem(
            model_id=model.id,
            color_id=color.id,
            size_id=size.id,
            size=size.label,
            location_id=location.id,
            price_mxn=price,
            status=InventoryStatus.AVAILABLE,
        )
        for _ in range(payload.quantity)
    ]
    db.add_all(rows)
    await db.flush()

    await emit_activity(
        db=db,
        code=ActivityCode.CREATE_INVENTORY,
        quantity=payload.quantity,
        model=model.name,
        color=color.name_en,
        size=size.label,
        location=location.name,
        price=format_mxn(price),
    )

    await db.commit()

    logger.info(
        "Inventory added",
        extra={"quantity": payload.quantity, "model_id": model.id, "size_id": size.id},
    )

    return InventoryCreateResult(
        created=len(rows),
        ids=[row.id for row in rows],
        model_id=model.id,
        color_id=color.id,
    )


# =====================================================
# UPDATE (last write wins)
# =====================================================
async def update_inventory(
    db: AsyncSession,
    payload: InventoryItemUpdate,
) -> InventoryItemOut:
    updates = payload.model_dump(exclude_unset=True, exclude={"id"})
    if not updates:
        raise AppException(400, "No valid fields to update", ErrorCode.NO_FIELDS)

    for field in NON_NULLABLE_FIELDS & updates.keys():
        if updates[field] is None:
            code = ErrorCode.INVALID_LOCATION if field == "location_id" else ErrorCode.INVALID_FIELD
            raise AppException(400, f"Invalid {field}", code)

    item = await _load_item(db, payload.id)
    if not item:
        raise AppException(404, "Item not found", ErrorCode.ITEM_NOT_FOUND)

    if "location_id" in updates:
        location = await db.get(Location, updates["location_id"])
        if not location:
            raise AppException(400, "Invalid location_id", ErrorCode.INVALID_LOCATION)

    changes = _detect_changes(item, updates)

    for field, value in updates.items():
        setattr(item, field, value)

    if changes:
        await emit_activity(
            db=db,
            code=ActivityCode.UPDATE_INVENTORY,
            target_id=item.id,
            changes=", ".join(changes),
        )

    await db.commit()

    logger.info("Inventory item updated", extra={"item_id": payload.id, "fields": sorted(updates)})

    item = await _load_item(db, payload.id)
    return map_inventory_item(item)
