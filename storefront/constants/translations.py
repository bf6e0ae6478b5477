# storefront/constants/translations.py

from enum import Enum

from storefront.models.enums.inventory_status import InventoryStatus


class Language(str, Enum):
    ES = "es"
    EN = "en"


# English canonical name (lowercase) -> labels
COLOR_LABELS = {
    "black": {"es": "Negro", "en": "Black"},
    "white": {"es": "Blanco", "en": "White"},
    "pink": {"es": "Rosa", "en": "Pink"},
    "baby pink": {"es": "Rosa Pastel", "en": "Baby Pink"},
    "light pink shimmer": {"es": "Rosa Claro con Brillo", "en": "Light Pink Shimmer"},
    "fuchsia": {"es": "Fucsia", "en": "Fuchsia"},
    "blue": {"es": "Azul", "en": "Blue"},
    "arctic": {"es": "Azul Ártico", "en": "Arctic"},
    "navy": {"es": "Azul marino", "en": "Navy"},
    "red": {"es": "Rojo", "en": "Red"},
    "green": {"es": "Verde", "en": "Green"},
    "camo": {"es": "Camuflaje", "en": "Camo"},
    "purple": {"es": "Morado", "en": "Purple"},
    "lilac": {"es": "Lila", "en": "Lilac"},
    "brown": {"es": "Café", "en": "Brown"},
    "rust brown": {"es": "Ladrillo", "en": "Rust Brown"},
    "yellow": {"es": "Amarillo", "en": "Yellow"},
    "gray": {"es": "Gris", "en": "Gray"},
    "beige": {"es": "Beige", "en": "Beige"},
    "multicolor": {"es": "Multicolor", "en": "Multicolor"},
}

MODEL_LABELS = {
    "classic": {"es": "Clásico", "en": "Classic"},
    "classic platform": {"es": "Plataforma Clásica", "en": "Classic Platform"},
    "classic shimmer gemstone": {"es": "Clásico Shimmer Gemstone", "en": "Classic Shimmer Gemstone"},
}

STATUS_LABELS = {
    InventoryStatus.AVAILABLE: {"es": "Disponible", "en": "Available"},
    InventoryStatus.RESERVED: {"es": "Apartado", "en": "Reserved"},
    InventoryStatus.PAID_COMPLETE: {"es": "Pagado Completo", "en": "Fully Paid"},
    InventoryStatus.PAID_PARTIAL: {"es": "Pago Parcial", "en": "Partially Paid"},
    InventoryStatus.DELIVERED: {"es": "Entregado", "en": "Delivered"},
    InventoryStatus.CANCELLED: {"es": "Cancelado", "en": "Cancelled"},
}

SIZE_CATEGORY_LABELS = {
    "kids": {"es": "Niños", "en": "Kids"},
    "youth": {"es": "Juvenil", "en": "Youth"},
    "adult": {"es": "Adulto", "en": "Adult"},
}

# -----------------------------------------------------
# STOREFRONT TEXTS
# -----------------------------------------------------
STORE_TEXTS = {
    "tagline": {
        "es": "Venta de Crocs en {city}",
        "en": "Crocs sales in {city}",
    },
    "hero_subtitle": {
        "es": "Modelos y tallas disponibles en {city}. Revisa el inventario en tiempo real y mándanos mensaje para apartar tu par.",
        "en": "Available models and sizes in {city}. Check real-time inventory and message us to reserve your pair.",
    },
    "empty_title": {
        "es": "Por ahora no hay pares disponibles.",
        "en": "There are no pairs available right now.",
    },
    "empty_subtitle": {
        "es": "A veces el inventario se agota rápido. Vuelve a revisar más tarde o mándanos WhatsApp para preguntar por la próxima llegada.",
        "en": "Sometimes inventory sells out fast. Check back later or message us on WhatsApp to ask about the next restock.",
    },
    "footer": {
        "es": "{store} · {city} · Página para consulta de inventario, las ventas se confirman por WhatsApp.",
        "en": "{store} · {city} · Inventory page only, sales are confirmed via WhatsApp.",
    },
}

# -----------------------------------------------------
# WHATSAPP TEMPLATES
# -----------------------------------------------------
WHATSAPP_TEMPLATES = {
    "contact": {
        "es": "Hola! Vi tu página de {store} y quiero preguntar por modelos y tallas disponibles.",
        "en": "Hi! I saw your {store} page and want to ask about available models and sizes.",
    },
    "inquiry": {
        "es": "Hola! Vi tus Crocs en {store}. Me interesa el modelo {model}, color {color} en {location}. ¿Qué tallas siguen disponibles?",
        "en": "Hi! I saw your Crocs on {store}. I'm interested in the {model}, color {color} in {location}. Which sizes are still available?",
    },
    "order_header": {
        "es": "Hola! Quiero hacer este pedido en {store}:",
        "en": "Hi! I'd like to place this order with {store}:",
    },
    "order_line": {
        "es": "- {location} | {model} | {color} | Talla {size} | {price} c/u | Cantidad: {quantity}",
        "en": "- {location} | {model} | {color} | Size {size} | {price} each | Quantity: {quantity}",
    },
    # pairs of one size at different prices
    "order_line_mixed": {
        "es": "- {location} | {model} | {color} | Talla {size} | {breakdown} = {subtotal} | Cantidad: {quantity}",
        "en": "- {location} | {model} | {color} | Size {size} | {breakdown} = {subtotal} | Quantity: {quantity}",
    },
    "order_total": {
        "es": "Total: {total} ({units} pares)",
        "en": "Total: {total} ({units} pairs)",
    },
    "order_footer": {
        "es": "¿Me confirmas disponibilidad y forma de pago?",
        "en": "Can you confirm availability and payment method?",
    },
}
