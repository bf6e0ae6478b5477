# storefront/utils/decimal_utils.py
from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Money as a two-place Decimal. ``None`` counts as zero."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value if value is not None else 0))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_mxn(value) -> str:
    """$450 MXN for whole pesos, $449.50 MXN otherwise."""
    amount = to_decimal(value)
    if amount == amount.to_integral_value():
        return f"${int(amount):,} MXN"
    return f"${amount:,.2f} MXN"
