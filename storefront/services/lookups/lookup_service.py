from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.catalog.color_models import Color
from storefront.models.catalog.location_models import Location
from storefront.models.catalog.shoe_model_models import ShoeModel
from storefront.models.catalog.size_models import Size
from storefront.schemas.lookups.lookup_schemas import (
    ColorOut,
    ShoeModelOut,
    LocationOut,
    SizeOut,
)


async def list_colors(db: AsyncSession) -> list[ColorOut]:
    result = await db.execute(select(Color).order_by(Color.name_en))
    return [ColorOut.model_validate(c) for c in result.scalars().all()]


async def list_models(db: AsyncSession) -> list[ShoeModelOut]:
    result = await db.execute(select(ShoeModel).order_by(ShoeModel.name))
    return [ShoeModelOut.model_validate(m) for m in result.scalars().all()]


async def list_locations(db: AsyncSession) -> list[LocationOut]:
    result = await db.execute(select(Location).order_by(Location.name))
    return [LocationOut.model_validate(loc) for loc in result.scalars().all()]


async def list_sizes(db: AsyncSession) -> list[SizeOut]:
    result = await db.execute(select(Size).order_by(Size.sort_order, Size.label))
    return [SizeOut.model_validate(s) for s in result.scalars().all()]
