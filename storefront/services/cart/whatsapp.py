"""Pre-filled WhatsApp chat links. Nothing is sent or stored server-side."""

import re
from collections import Counter
from urllib.parse import quote

from storefront.constants.translations import Language, WHATSAPP_TEMPLATES
from storefront.schemas.cart.cart_schemas import CartLine
from storefront.schemas.catalog.catalog_schemas import ColorGroup
from storefront.utils.decimal_utils import format_mxn, to_decimal
from storefront.utils.i18n import parse_language, translate_color, translate_model

WHATSAPP_BASE_URL = "https://wa.me"

# same set encodeURIComponent leaves untouched
_URI_SAFE = "-_.!~*'()"


def _template(name: str, lang: Language) -> str:
    return WHATSAPP_TEMPLATES[name][parse_language(lang).value]


def build_whatsapp_url(phone: str, text: str) -> str:
    digits = re.sub(r"\D", "", phone or "")
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(text, safe=_URI_SAFE)}"


def build_contact_message(lang: Language, store_name: str) -> str:
    return _template("contact", lang).format(store=store_name)


def build_inquiry_message(group: ColorGroup, lang: Language, store_name: str) -> str:
    return _template("inquiry", lang).format(
        store=store_name,
        model=translate_model(group.model_name, lang),
        color=translate_color(group.color, lang),
        location=group.location_name or group.location_slug or "",
    )


def _price_breakdown(prices: list[float]) -> str:
    counts = Counter(prices)
    return " + ".join(f"{counts[price]} x {format_mxn(price)}" for price in sorted(counts))


def build_order_line(line: CartLine, lang: Language) -> str:
    fields = {
        "location": line.location_name or "",
        "model": translate_model(line.model_name, lang),
        "color": translate_color(line.color, lang),
        "size": line.size,
        "quantity": line.quantity,
    }
    prices = line.charged_prices()
    if len(set(prices)) > 1:
        return _template("order_line_mixed", lang).format(
            breakdown=_price_breakdown(prices),
            subtotal=format_mxn(line.subtotal),
            **fields,
        )
    return _template("order_line", lang).format(
        price=format_mxn(prices[0] if prices else line.unit_price),
        **fields,
    )


def build_order_message(lines: list[CartLine], lang: Language, store_name: str) -> str:
    """One itemized line per cart line with a non-zero quantity."""
    lines = [line for line in lines if line.quantity > 0]

    parts = [_template("order_header", lang).format(store=store_name), ""]
    parts.extend(build_order_line(line, lang) for line in lines)

    total = sum((to_decimal(line.subtotal) for line in lines), to_decimal(0))
    parts.append("")
    parts.append(
        _template("order_total", lang).format(
            total=format_mxn(total),
            units=sum(line.quantity for line in lines),
        )
    )
    parts.append(_template("order_footer", lang))
    return "\n".join(parts)
