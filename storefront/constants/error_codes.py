from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # auth
    NOT_CONFIGURED = "NOT_CONFIGURED"
    INVALID_PASSWORD = "INVALID_PASSWORD"

    # inventory
    INVALID_SIZE = "INVALID_SIZE"
    INVALID_LOCATION = "INVALID_LOCATION"
    INVALID_FIELD = "INVALID_FIELD"
    NO_FIELDS = "NO_FIELDS"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"

    # cart
    EMPTY_CART = "EMPTY_CART"
    ITEM_UNAVAILABLE = "ITEM_UNAVAILABLE"
    MIXED_LOCATIONS = "MIXED_LOCATIONS"

    # feedback
    INVALID_MESSAGE = "INVALID_MESSAGE"
