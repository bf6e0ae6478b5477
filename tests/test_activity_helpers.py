import pytest

from storefront.constants.activity_codes import ActivityCode
from storefront.utils.activity_helpers import render_activity


def test_render_update_message():
    message = render_activity(
        ActivityCode.UPDATE_INVENTORY,
        target_id=7,
        changes="status: available → reserved",
    )
    assert message == "Updated item #7: status: available → reserved"


def test_missing_context_key_is_reported():
    with pytest.raises(ValueError, match="target_id"):
        render_activity(ActivityCode.UPDATE_INVENTORY, changes="x")
