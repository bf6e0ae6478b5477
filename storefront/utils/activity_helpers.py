from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.support.activity_models import AdminActivity
from storefront.constants.activity_templates import ACTIVITY_TEMPLATES
from storefront.constants.activity_codes import ActivityCode


def render_activity(code: ActivityCode, **context) -> str:
    template = ACTIVITY_TEMPLATES.get(code)
    if template is None:
        raise ValueError(f"No activity template for {code}")

    try:
        return template.format(**context)
    except KeyError as e:
        raise ValueError(f"{code.value} template needs '{e.args[0]}'") from e


async def emit_activity(db: AsyncSession, *, code: ActivityCode, **context) -> AdminActivity:
    """Stages an audit entry; it is persisted by the caller's commit."""
    entry = AdminActivity(code=code.value, message=render_activity(code, **context))
    db.add(entry)
    return entry
