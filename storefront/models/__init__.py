# Catalog dimensions
from storefront.models.catalog.location_models import Location
from storefront.models.catalog.shoe_model_models import ShoeModel
from storefront.models.catalog.color_models import Color
from storefront.models.catalog.size_models import Size

# Inventory
from storefront.models.inventory.inventory_item_models import InventoryItem

# Support
from storefront.models.support.feedback_models import Feedback
from storefront.models.support.activity_models import AdminActivity
