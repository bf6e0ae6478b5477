"""
In-memory shopping cart.

A line points at one size variant of one product card. Quantities are always
clamped to the variant's available count, so repeated adds cannot oversell.
A line is priced from the cheapest available pairs of its variant.
"""

from storefront.models.enums.inventory_status import InventoryStatus
from storefront.schemas.cart.cart_schemas import CartLine
from storefront.schemas.catalog.catalog_schemas import ColorGroup, SizeVariant
from storefront.services.catalog.aggregation import format_key, make_group_key
from storefront.utils.decimal_utils import to_decimal


def line_key(group: ColorGroup, variant: SizeVariant) -> str:
    identity = make_group_key(group.location_id, group.model_name, group.color)
    return format_key(identity + (variant.size.strip().lower(),))


def available_prices(variant: SizeVariant) -> list[float]:
    return sorted(i.price_mxn for i in variant.items if i.status == InventoryStatus.AVAILABLE)


class Cart:
    def __init__(self):
        self._lines: dict[str, CartLine] = {}

    # -------------------------
    # Mutations
    # -------------------------
    def add(self, group: ColorGroup, variant: SizeVariant, quantity: int = 1) -> CartLine | None:
        key = line_key(group, variant)
        line = self._lines.get(key)

        # stock may have moved since the line was added
        if line is not None:
            self._refresh(line, variant)
            if line.available <= 0:
                self.remove(key)
                return None

        if quantity <= 0 or variant.available_count <= 0:
            return line

        if line is None:
            line = CartLine(
                key=key,
                location_id=group.location_id,
                location_name=group.location_name or group.location_slug,
                model_name=group.model_name,
                color=group.color,
                size=variant.size,
                unit_price=variant.price_min,
                unit_prices=available_prices(variant),
                quantity=0,
                available=variant.available_count,
            )
            self._lines[key] = line

        line.quantity = min(line.quantity + quantity, line.available)
        return line

    def set_quantity(self, key: str, quantity: int) -> CartLine | None:
        line = self._lines.get(key)
        if line is None:
            return None

        quantity = max(0, min(quantity, line.available))
        if quantity == 0:
            self.remove(key)
            return None

        line.quantity = quantity
        return line

    def remove(self, key: str) -> None:
        self._lines.pop(key, None)

    def clear(self) -> None:
        self._lines.clear()

    @staticmethod
    def _refresh(line: CartLine, variant: SizeVariant) -> None:
        line.available = max(variant.available_count, 0)
        line.unit_prices = available_prices(variant)
        if line.unit_prices:
            line.unit_price = line.unit_prices[0]
        line.quantity = min(line.quantity, line.available)

    # -------------------------
    # Views
    # -------------------------
    @property
    def lines(self) -> list[CartLine]:
        return [line for line in self._lines.values() if line.quantity > 0]

    def get(self, key: str) -> CartLine | None:
        return self._lines.get(key)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_units(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_price(self) -> float:
        total = sum((to_decimal(line.subtotal) for line in self.lines), to_decimal(0))
        return float(total)

    @property
    def location_ids(self) -> set:
        return {line.location_id for line in self.lines}

    @property
    def is_single_location(self) -> bool:
        """Only single-location carts may be sent as one WhatsApp order."""
        return len(self.location_ids) == 1
