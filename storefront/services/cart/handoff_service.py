from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import STORE_NAME, WHATSAPP_PHONE
from storefront.core.exceptions import AppException
from storefront.constants.error_codes import ErrorCode
from storefront.schemas.cart.cart_schemas import CartHandoffRequest, CartHandoffData
from storefront.services.catalog.aggregation import make_group_key, group_items
from storefront.services.catalog.catalog_service import fetch_available_items
from storefront.services.cart.cart_service import Cart
from storefront.services.cart.whatsapp import build_order_message, build_whatsapp_url
from storefront.utils.i18n import parse_language
from storefront.utils.logger import get_logger

logger = get_logger(__name__)


async def create_whatsapp_handoff(
    db: AsyncSession,
    payload: CartHandoffRequest,
) -> CartHandoffData:
    """
    Re-validates a browser cart against live stock and returns the
    pre-filled WhatsApp link. Quantities above stock are clamped.
    """
    language = parse_language(payload.lang)

    requested = [line for line in payload.lines if line.quantity > 0]
    if not requested:
        raise AppException(400, "Cart is empty", ErrorCode.EMPTY_CART)

    groups = {
        make_group_key(g.location_id, g.model_name, g.color): g
        for g in group_items(await fetch_available_items(db), language)
    }

    cart = Cart()
    for line in requested:
        group = groups.get(
            make_group_key(line.location_id, line.model_name, line.color)
        )
        variant = None
        if group:
            variant = next(
                (
                    v for v in group.sizes
                    if v.size.strip().lower() == line.size.strip().lower()
                ),
                None,
            )

        if variant is None or variant.available_count <= 0:
            logger.info(
                "Cart line no longer available",
                extra={"model": line.model_name, "color": line.color, "size": line.size},
            )
            raise AppException(
                409,
                "Item no longer available",
                ErrorCode.ITEM_UNAVAILABLE,
                details=line.model_dump(),
            )

        cart.add(group, variant, line.quantity)

    if not cart.is_single_location:
        raise AppException(
            400,
            "Cart mixes items from different locations",
            ErrorCode.MIXED_LOCATIONS,
            details={"location_ids": sorted(cart.location_ids)},
        )

    message = build_order_message(cart.lines, language, STORE_NAME)

    logger.info(
        "WhatsApp handoff built",
        extra={"lines": len(cart.lines), "units": cart.total_units},
    )

    return CartHandoffData(
        lang=language.value,
        lines=cart.lines,
        total_units=cart.total_units,
        total_price=cart.total_price,
        message=message,
        whatsapp_url=build_whatsapp_url(WHATSAPP_PHONE, message),
    )
