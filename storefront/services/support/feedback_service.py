from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import FEEDBACK_LIST_LIMIT
from storefront.core.exceptions import AppException
from storefront.constants.error_codes import ErrorCode
from storefront.models.support.feedback_models import Feedback
from storefront.schemas.support.feedback_schemas import FeedbackCreate, FeedbackOut
from storefront.utils.i18n import parse_language
from storefront.utils.logger import get_logger

logger = get_logger(__name__)


# =====================================================
# CREATE
# =====================================================
async def create_feedback(
    db: AsyncSession,
    payload: FeedbackCreate,
    user_agent: str | None,
) -> FeedbackOut:
    message = payload.message
    if not isinstance(message, str) or not message.strip():
        logger.warning("Rejected empty feedback")
        raise AppException(400, "Invalid message", ErrorCode.INVALID_MESSAGE)

    feedback = Feedback(
        message=message.strip(),
        lang=parse_language(payload.lang).value,
        context=payload.context or None,
        user_agent=user_agent[:512] if user_agent else None,
    )
    db.add(feedback)
    await db.commit()
    await db.refresh(feedback)

    logger.info("Feedback stored", extra={"feedback_id": feedback.id, "lang": feedback.lang})
    return FeedbackOut.model_validate(feedback)


# =====================================================
# LIST
# =====================================================
async def list_feedback(db: AsyncSession) -> list[FeedbackOut]:
    result = await db.execute(
        select(Feedback)
        .order_by(desc(Feedback.created_at), desc(Feedback.id))
        .limit(FEEDBACK_LIST_LIMIT)
    )
    return [FeedbackOut.model_validate(f) for f in result.scalars().all()]
