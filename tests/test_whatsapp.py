from storefront.constants.translations import Language
from storefront.schemas.cart.cart_schemas import CartLine
from storefront.services.cart.whatsapp import (
    build_order_message,
    build_whatsapp_url,
)


def make_line(key, size, quantity, price=450.0):
    return CartLine(
        key=key,
        location_id=1,
        location_name="Tijuana",
        model_name="Classic",
        color="Black",
        size=size,
        unit_price=price,
        quantity=quantity,
        available=5,
    )


def test_url_keeps_only_phone_digits():
    url = build_whatsapp_url("+52 (664) 123-4567", "Hola")
    assert url == "https://wa.me/526641234567?text=Hola"


def test_url_encodes_text_like_encode_uri_component():
    url = build_whatsapp_url("52", "Hola! ¿Talla 8?\nGracias")
    assert url.endswith("?text=Hola!%20%C2%BFTalla%208%3F%0AGracias")


def test_order_message_has_one_line_per_nonzero_entry():
    lines = [
        make_line("a", "M8-W10", 2),
        make_line("b", "C8", 0),
        make_line("c", "J2", 1),
    ]
    message = build_order_message(lines, Language.ES, "Jackie Crocs")
    item_lines = [row for row in message.split("\n") if row.startswith("- ")]

    assert len(item_lines) == 2
    assert "Talla M8-W10" in item_lines[0]
    assert item_lines[0].endswith("Cantidad: 2")
    assert item_lines[1].endswith("Cantidad: 1")
    assert "Total: $1,350 MXN (3 pares)" in message


def test_order_message_in_english():
    message = build_order_message([make_line("a", "M8-W10", 1, price=449.5)], Language.EN, "Jackie Crocs")

    assert message.startswith("Hi! I'd like to place this order with Jackie Crocs:")
    assert "- Tijuana | Classic | Black | Size M8-W10 | $449.50 MXN each | Quantity: 1" in message


def test_mixed_price_line_shows_each_price():
    line = make_line("a", "M8-W10", 2)
    line.unit_prices = [450.0, 500.0]

    message = build_order_message([line], Language.ES, "Jackie Crocs")

    assert "- Tijuana | Clásico | Negro | Talla M8-W10 | 1 x $450 MXN + 1 x $500 MXN = $950 MXN | Cantidad: 2" in message
    assert "Total: $950 MXN (2 pares)" in message
