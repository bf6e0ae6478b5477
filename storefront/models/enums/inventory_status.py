import enum


class InventoryStatus(str, enum.Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    PAID_COMPLETE = "paid_complete"
    PAID_PARTIAL = "paid_partial"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
