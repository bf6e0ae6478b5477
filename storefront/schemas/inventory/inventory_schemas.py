# storefront/schemas/inventory/inventory_schemas.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime

from storefront.models.enums.inventory_status import InventoryStatus


class LocationRef(BaseModel):
    id: int
    slug: str
    name: str

    class Config:
        from_attributes = True


class InventoryItemCreate(BaseModel):
    model_name: str = Field(..., min_length=1, max_length=150)
    color: str = Field(..., min_length=1, max_length=100)
    size_id: int
    price_mxn: float = Field(..., gt=0)
    quantity: int = Field(1, ge=1, le=100)
    location_id: int

    @field_validator("model_name", "color")
    @classmethod
    def strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class InventoryItemUpdate(BaseModel):
    """Unknown keys are dropped; only the fields below reach the row."""

    model_config = ConfigDict(extra="ignore")

    id: int
    status: Optional[InventoryStatus] = None
    customer_name: Optional[str] = Field(None, max_length=150)
    customer_whatsapp: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None
    location_id: Optional[int] = None


class InventoryItemOut(BaseModel):
    id: int
    model_id: int
    color_id: int
    size_id: Optional[int]
    location_id: int

    model_name: Optional[str]
    color: Optional[str]
    size: str
    location: Optional[LocationRef]

    price_mxn: float
    status: InventoryStatus
    status_label: Optional[str] = None
    customer_name: Optional[str]
    customer_whatsapp: Optional[str]
    notes: Optional[str]

    created_at: datetime
    updated_at: Optional[datetime]


class InventoryCreateResult(BaseModel):
    created: int
    ids: List[int]
    model_id: int
    color_id: int


class InventoryAdminListData(BaseModel):
    total: int
    total_all: int
    page: int
    page_size: int
    total_pages: int
    counts_by_status: Dict[str, int]
    items: List[InventoryItemOut]


class InventoryHistoryData(BaseModel):
    limit: int
    history: List[InventoryItemOut]
