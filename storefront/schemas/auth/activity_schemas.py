# storefront/schemas/auth/activity_schemas.py

from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from fastapi import Query


class AdminActivityFilters(BaseModel):
    code: Optional[str] = Query(None)

    page: int = Query(1, ge=1)
    page_size: int = Query(20, ge=1, le=100)

    sort_order: str = Query("desc")


class AdminActivityOut(BaseModel):
    id: int
    code: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class AdminActivityListData(BaseModel):
    total: int
    items: List[AdminActivityOut]
