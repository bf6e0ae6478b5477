from storefront.constants.activity_codes import ActivityCode


ACTIVITY_TEMPLATES = {
    # ---------------- AUTH ----------------
    ActivityCode.LOGIN:
        "Admin logged in from {client}",

    ActivityCode.LOGOUT:
        "Admin logged out",

    # ---------------- INVENTORY ----------------
    ActivityCode.CREATE_INVENTORY:
        "Added {quantity} x {model} / {color} / {size} at {location} ({price} each)",

    ActivityCode.UPDATE_INVENTORY:
        "Updated item #{target_id}: {changes}",
}
