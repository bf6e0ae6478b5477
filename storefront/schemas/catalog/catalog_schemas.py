# storefront/schemas/catalog/catalog_schemas.py

from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from storefront.models.enums.inventory_status import InventoryStatus


class CatalogItem(BaseModel):
    """Flat inventory row with its dimension labels joined in."""

    id: int
    model_id: Optional[int] = None
    color_id: Optional[int] = None
    size_id: Optional[int] = None
    location_id: Optional[int] = None

    model_name: Optional[str] = None
    color: Optional[str] = None
    size: str = ""
    location_name: Optional[str] = None
    location_slug: Optional[str] = None

    price_mxn: float
    status: InventoryStatus = InventoryStatus.AVAILABLE

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SizeVariant(BaseModel):
    size: str
    size_id: Optional[int] = None
    category: str
    category_label: str
    rank: float
    available_count: int
    price_min: float
    price_max: float
    items: List[CatalogItem]


class ColorGroup(BaseModel):
    key: str
    location_id: Optional[int] = None
    location_name: Optional[str] = None
    location_slug: Optional[str] = None
    model_name: Optional[str] = None
    model_label: str
    color: Optional[str] = None
    color_label: str
    available_count: int
    price_min: float
    price_max: float
    sizes: List[SizeVariant]
    whatsapp_url: Optional[str] = None


class FilterOption(BaseModel):
    value: str
    label: str


class CatalogFilters(BaseModel):
    locations: List[FilterOption]
    models: List[FilterOption]
    colors: List[FilterOption]
    sizes: List[FilterOption]


class CatalogData(BaseModel):
    lang: str
    total_available: int
    cards: List[ColorGroup]
    filters: CatalogFilters
    contact_url: str
    refresh_seconds: int
    texts: dict


class InventoryListData(BaseModel):
    items: List[CatalogItem]
