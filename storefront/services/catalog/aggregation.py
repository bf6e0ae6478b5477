"""
Turns flat inventory rows into product cards.

Rows sharing (location, model, color) become one ColorGroup; inside a group
rows are bucketed by size label into SizeVariants. Sizes sort kids first,
then youth, then adult, and numerically inside each band.
"""

import re
from collections import defaultdict
from typing import Iterable
from urllib.parse import quote

from storefront.constants.translations import Language
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.schemas.catalog.catalog_schemas import (
    CatalogItem,
    SizeVariant,
    ColorGroup,
    FilterOption,
    CatalogFilters,
)
from storefront.utils.i18n import (
    translate_color,
    translate_model,
    size_category_label,
)

KIDS = "kids"
YOUTH = "youth"
ADULT = "adult"

# C4..C13 are toddler/kids sizes, J1..J6 are junior (youth)
KIDS_PATTERN = re.compile(r"^\s*C\s*\d+(\.\d+)?\s*$", re.IGNORECASE)
YOUTH_PATTERN = re.compile(r"^\s*J\s*\d+(\.\d+)?\s*$", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")

CATEGORY_OFFSETS = {
    KIDS: 0,
    YOUTH: 1000,
    ADULT: 2000,
}
# labels with no number go last inside their band
UNPARSED_OFFSET = 999


def size_category(label: str | None) -> str:
    label = label or ""
    if KIDS_PATTERN.match(label):
        return KIDS
    if YOUTH_PATTERN.match(label):
        return YOUTH
    return ADULT


def size_rank(label: str | None) -> float:
    category = size_category(label)
    match = NUMBER_PATTERN.search(label or "")
    value = float(match.group()) if match else UNPARSED_OFFSET
    return CATEGORY_OFFSETS[category] + min(value, UNPARSED_OFFSET)


def _norm(value) -> str:
    return (str(value) if value is not None else "").strip().lower()


def _is_any(value) -> bool:
    return value is None or _norm(value) in {"", "all"}


def filter_items(
    items: Iterable[CatalogItem],
    *,
    location: str | int | None = None,
    model: str | None = None,
    color: str | None = None,
    size: str | None = None,
) -> list[CatalogItem]:
    """``None`` or ``"all"`` disables a filter. Location matches id or slug."""
    result = []
    for item in items:
        if not _is_any(location) and _norm(location) not in {
            _norm(item.location_id),
            _norm(item.location_slug),
        }:
            continue
        if not _is_any(model) and _norm(item.model_name) != _norm(model):
            continue
        if not _is_any(color) and _norm(item.color) != _norm(color):
            continue
        if not _is_any(size) and _norm(item.size) != _norm(size):
            continue
        result.append(item)
    return result


def make_group_key(location_id, model_name, color) -> tuple:
    return (location_id, _norm(model_name), _norm(color))


def group_key(item: CatalogItem) -> tuple:
    return make_group_key(item.location_id, item.model_name, item.color)


def format_key(parts: tuple) -> str:
    """Client-facing key. Each part is percent-escaped so a ':' inside a name cannot merge two keys."""
    return ":".join(quote("" if part is None else str(part), safe="") for part in parts)


def _build_variant(label: str, items: list[CatalogItem], lang: Language) -> SizeVariant:
    category = size_category(label)
    prices = [i.price_mxn for i in items]
    return SizeVariant(
        size=label,
        size_id=next((i.size_id for i in items if i.size_id is not None), None),
        category=category,
        category_label=size_category_label(category, lang),
        rank=size_rank(label),
        available_count=sum(1 for i in items if i.status == InventoryStatus.AVAILABLE),
        price_min=min(prices),
        price_max=max(prices),
        items=items,
    )


def group_items(items: Iterable[CatalogItem], lang: Language = Language.ES) -> list[ColorGroup]:
    buckets: dict[tuple, dict[str, list[CatalogItem]]] = defaultdict(lambda: defaultdict(list))
    heads: dict[tuple, CatalogItem] = {}

    for item in items:
        key = group_key(item)
        heads.setdefault(key, item)
        buckets[key][item.size or ""].append(item)

    groups = []
    for key, by_size in buckets.items():
        head = heads[key]
        variants = sorted(
            (_build_variant(label, rows, lang) for label, rows in by_size.items()),
            key=lambda v: (v.rank, v.size),
        )
        groups.append(
            ColorGroup(
                key=format_key(key),
                location_id=head.location_id,
                location_name=head.location_name,
                location_slug=head.location_slug,
                model_name=head.model_name,
                model_label=translate_model(head.model_name, lang),
                color=head.color,
                color_label=translate_color(head.color, lang),
                available_count=sum(v.available_count for v in variants),
                price_min=min(v.price_min for v in variants),
                price_max=max(v.price_max for v in variants),
                sizes=variants,
            )
        )

    groups.sort(
        key=lambda g: (
            _norm(g.location_name or g.location_slug),
            _norm(g.model_name),
            _norm(g.color),
        )
    )
    return groups


def flatten_groups(groups: Iterable[ColorGroup]) -> list[CatalogItem]:
    return [item for group in groups for variant in group.sizes for item in variant.items]


def filter_options(items: Iterable[CatalogItem], lang: Language = Language.ES) -> CatalogFilters:
    locations: dict[str, str] = {}
    models: dict[str, str] = {}
    colors: dict[str, str] = {}
    sizes: dict[str, str] = {}

    for item in items:
        if item.location_slug:
            locations.setdefault(item.location_slug, item.location_name or item.location_slug)
        if item.model_name:
            models.setdefault(item.model_name, translate_model(item.model_name, lang))
        if item.color:
            colors.setdefault(item.color, translate_color(item.color, lang))
        if item.size:
            sizes.setdefault(item.size, item.size)

    def _options(values: dict[str, str], sort_key) -> list[FilterOption]:
        return [
            FilterOption(value=value, label=label)
            for value, label in sorted(values.items(), key=sort_key)
        ]

    def by_label(option):
        return option[1].lower()

    return CatalogFilters(
        locations=_options(locations, by_label),
        models=_options(models, by_label),
        colors=_options(colors, by_label),
        sizes=_options(sizes, lambda kv: (size_rank(kv[0]), kv[0])),
    )
