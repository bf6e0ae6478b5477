from storefront.constants.translations import (
    Language,
    COLOR_LABELS,
    MODEL_LABELS,
    STATUS_LABELS,
    SIZE_CATEGORY_LABELS,
)
from storefront.models.enums.inventory_status import InventoryStatus


def parse_language(value) -> Language:
    """Anything other than an explicit ``en`` falls back to Spanish."""
    if isinstance(value, Language):
        return value
    if isinstance(value, str) and value.strip().lower() == Language.EN.value:
        return Language.EN
    return Language.ES


def _lookup(table: dict, raw: str | None, lang: Language) -> str:
    if not raw:
        return ""
    mapped = table.get(raw.strip().lower())
    if not mapped:
        return raw
    return mapped[parse_language(lang).value]


def translate_color(raw: str | None, lang: Language) -> str:
    return _lookup(COLOR_LABELS, raw, lang)


def translate_model(raw: str | None, lang: Language) -> str:
    return _lookup(MODEL_LABELS, raw, lang)


def status_label(status: InventoryStatus | str, lang: Language) -> str:
    try:
        status = InventoryStatus(status)
    except ValueError:
        return str(status)
    return STATUS_LABELS[status][parse_language(lang).value]


def size_category_label(category: str, lang: Language) -> str:
    labels = SIZE_CATEGORY_LABELS.get(category)
    if not labels:
        return category
    return labels[parse_language(lang).value]
