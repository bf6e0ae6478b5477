from storefront.constants.translations import Language
from storefront.models.enums.inventory_status import InventoryStatus
from storefront.utils.decimal_utils import format_mxn
from storefront.utils.i18n import (
    parse_language,
    size_category_label,
    status_label,
    translate_color,
    translate_model,
)


def test_only_en_selects_english():
    assert parse_language("en") == Language.EN
    assert parse_language(" EN ") == Language.EN
    assert parse_language("fr") == Language.ES
    assert parse_language(None) == Language.ES


def test_known_colors_translate():
    assert translate_color("black", Language.ES) == "Negro"
    assert translate_color("Black", Language.EN) == "Black"
    assert translate_color("Baby Pink", Language.ES) == "Rosa Pastel"


def test_unknown_values_pass_through():
    assert translate_color("Teal", Language.ES) == "Teal"
    assert translate_model("Echo Clog", Language.EN) == "Echo Clog"
    assert translate_color(None, Language.ES) == ""


def test_status_and_category_labels():
    assert status_label(InventoryStatus.RESERVED, Language.ES) == "Apartado"
    assert status_label("delivered", Language.EN) == "Delivered"
    assert status_label("lost", Language.EN) == "lost"
    assert size_category_label("kids", Language.ES) == "Niños"


def test_mxn_formatting():
    assert format_mxn(450) == "$450 MXN"
    assert format_mxn("449.5") == "$449.50 MXN"
    assert format_mxn(1350) == "$1,350 MXN"
