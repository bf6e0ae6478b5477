# storefront/routers/__init__.py

from .auth.auth_router import router as auth_router
from .auth.activity_router import router as activity_router

from .catalog.catalog_router import router as catalog_router
from .cart.cart_router import router as cart_router

from .inventory.inventory_router import router as inventory_router
from .inventory.history_router import router as history_router

from .lookups.lookup_router import router as lookup_router

from .support.feedback_router import router as feedback_router


__all__ = [
"auth_router",
"activity_router",

"catalog_router",
"cart_router",

"inventory_router",
"history_router",

"lookup_router",

"feedback_router",
]
