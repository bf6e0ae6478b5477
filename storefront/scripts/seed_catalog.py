"""
Insert the lookup rows (locations, sizes, colors, models) the admin
screens choose from. Safe to run more than once.

    python -m storefront.scripts.seed_catalog
"""
import asyncio

from sqlalchemy import select

from storefront.core.db import AsyncSessionLocal
from storefront.constants.translations import COLOR_LABELS, MODEL_LABELS
from storefront.models.catalog.location_models import Location
from storefront.models.catalog.size_models import Size
from storefront.models.catalog.color_models import Color
from storefront.models.catalog.shoe_model_models import ShoeModel
from storefront.utils.logger import get_logger

logger = get_logger("scripts.seed_catalog")

LOCATIONS = [
    ("tijuana", "Tijuana"),
    ("rosarito", "Rosarito"),
    ("ensenada", "Ensenada"),
]

KIDS_SIZES = [f"C{n}" for n in range(4, 14)]
YOUTH_SIZES = [f"J{n}" for n in range(1, 7)]
ADULT_SIZES = [f"M{n}-W{n + 2}" for n in range(4, 14)]


def size_rows() -> list[tuple[str, int]]:
    labels = KIDS_SIZES + YOUTH_SIZES + ADULT_SIZES
    return [(label, index * 10) for index, label in enumerate(labels, start=1)]


async def _ensure(db, model, column, value, **extra) -> bool:
    existing = await db.scalar(select(model).where(column == value))
    if existing:
        return False
    db.add(model(**{column.key: value}, **extra))
    return True


async def seed_catalog() -> dict[str, int]:
    created = {"locations": 0, "sizes": 0, "colors": 0, "models": 0}

    async with AsyncSessionLocal() as db:
        for slug, name in LOCATIONS:
            created["locations"] += await _ensure(db, Location, Location.slug, slug, name=name)

        for label, sort_order in size_rows():
            created["sizes"] += await _ensure(db, Size, Size.label, label, sort_order=sort_order)

        for labels in COLOR_LABELS.values():
            created["colors"] += await _ensure(db, Color, Color.name_en, labels["en"])

        for labels in MODEL_LABELS.values():
            created["models"] += await _ensure(db, ShoeModel, ShoeModel.name, labels["en"])

        await db.commit()

    logger.info("Catalog seeded", extra=created)
    print(f"Seed complete: {created}")
    return created


if __name__ == "__main__":
    asyncio.run(seed_catalog())
