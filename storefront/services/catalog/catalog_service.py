from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import (
    STORE_NAME,
    STORE_CITY,
    WHATSAPP_PHONE,
    CATALOG_REFRESH_SECONDS,
)
from storefront.constants.translations import Language, STORE_TEXTS
from storefront.models.inventory.inventory_item_models import InventoryItem
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.schemas.catalog.catalog_schemas import CatalogItem, CatalogData
from storefront.services.catalog.aggregation import (
    filter_items,
    filter_options,
    group_items,
)
from storefront.services.cart.whatsapp import (
    build_contact_message,
    build_inquiry_message,
    build_whatsapp_url,
)
from storefront.utils.i18n import parse_language
from storefront.utils.logger import get_logger

logger = get_logger(__name__)


# =====================================================
# MAPPER
# =====================================================
def map_catalog_item(row: InventoryItem) -> CatalogItem:
    return CatalogItem(
        id=row.id,
        model_id=row.model_id,
        color_id=row.color_id,
        size_id=row.size_id,
        location_id=row.location_id,
        model_name=row.shoe_model.name if row.shoe_model else None,
        color=row.color.name_en if row.color else None,
        size=row.size_option.label if row.size_option else (row.size or ""),
        location_name=row.location.name if row.location else None,
        location_slug=row.location.slug if row.location else None,
        price_mxn=float(row.price_mxn),
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


# =====================================================
# AVAILABLE ROWS
# =====================================================
async def fetch_available_items(db: AsyncSession) -> list[CatalogItem]:
    result = await db.execute(
        select(InventoryItem)
        .where(InventoryItem.status == InventoryStatus.AVAILABLE)
        .order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc())
    )
    return [map_catalog_item(row) for row in result.scalars().unique().all()]


def _store_texts(lang: Language) -> dict:
    return {
        name: template[lang.value].format(store=STORE_NAME, city=STORE_CITY)
        for name, template in STORE_TEXTS.items()
    } | {"store_name": STORE_NAME}


# =====================================================
# CATALOG VIEW
# =====================================================
async def build_catalog(
    db: AsyncSession,
    *,
    lang: str | None,
    location: str | None,
    model: str | None,
    color: str | None,
    size: str | None,
) -> CatalogData:
    language = parse_language(lang)
    items = await fetch_available_items(db)

    filtered = filter_items(
        items,
        location=location,
        model=model,
        color=color,
        size=size,
    )
    cards = group_items(filtered, language)

    for card in cards:
        card.whatsapp_url = build_whatsapp_url(
            WHATSAPP_PHONE,
            build_inquiry_message(card, language, STORE_NAME),
        )

    logger.debug(
        "Catalog built",
        extra={"rows": len(items), "filtered": len(filtered), "cards": len(cards)},
    )

    return CatalogData(
        lang=language.value,
        total_available=sum(card.available_count for card in cards),
        cards=cards,
        # options come from the unfiltered set so shoppers can widen a filter again
        filters=filter_options(items, language),
        contact_url=build_whatsapp_url(
            WHATSAPP_PHONE,
            build_contact_message(language, STORE_NAME),
        ),
        refresh_seconds=CATALOG_REFRESH_SECONDS,
        texts=_store_texts(language),
    )
