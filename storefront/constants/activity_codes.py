from enum import Enum


class ActivityCode(str, Enum):
    LOGIN = "LOGIN"
    LOGOUT = "LOGOUT"

    CREATE_INVENTORY = "CREATE_INVENTORY"
    UPDATE_INVENTORY = "UPDATE_INVENTORY"
