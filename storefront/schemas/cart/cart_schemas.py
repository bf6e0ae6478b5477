# storefront/schemas/cart/cart_schemas.py

from pydantic import BaseModel, Field, computed_field
from typing import Optional, List

from storefront.utils.decimal_utils import to_decimal


class CartLine(BaseModel):
    key: str
    location_id: Optional[int] = None
    location_name: Optional[str] = None
    model_name: Optional[str] = None
    color: Optional[str] = None
    size: str
    # cheapest available pair of the variant
    unit_price: float
    # one entry per available pair, ascending
    unit_prices: List[float] = []
    quantity: int
    available: int

    def charged_prices(self) -> List[float]:
        """Prices of the pairs this line takes, cheapest first."""
        if self.unit_prices:
            return self.unit_prices[: self.quantity]
        return [self.unit_price] * self.quantity

    @computed_field
    @property
    def subtotal(self) -> float:
        return float(sum((to_decimal(p) for p in self.charged_prices()), to_decimal(0)))


class CartLineRequest(BaseModel):
    location_id: int
    model_name: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    size: str = Field(..., min_length=1)
    quantity: int = Field(1, ge=0, le=100)


class CartHandoffRequest(BaseModel):
    lang: str = "es"
    lines: List[CartLineRequest] = []


class CartHandoffData(BaseModel):
    lang: str
    lines: List[CartLine]
    total_units: int
    total_price: float
    message: str
    whatsapp_url: str
