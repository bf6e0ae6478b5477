from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.support.feedback_schemas import (
    FeedbackCreate,
    FeedbackOut,
    FeedbackListData,
)
from storefront.services.support.feedback_service import create_feedback, list_feedback
from storefront.utils.get_admin import require_admin
from storefront.utils.response import success_response, APIResponse, ADMIN_ERROR_RESPONSES

router = APIRouter(prefix="/api", tags=["Feedback"])


@router.post("/feedback", response_model=APIResponse[FeedbackOut])
async def create_feedback_api(
    payload: FeedbackCreate,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    feedback = await create_feedback(db, payload, request.headers.get("user-agent"))
    return success_response("Thanks for your feedback", feedback)


@router.get(
    "/admin/feedback",
    response_model=APIResponse[FeedbackListData],
    responses=ADMIN_ERROR_RESPONSES,
)
async def list_feedback_api(
    db: AsyncSession = Depends(get_db),
    admin=Depends(require_admin),
):
    rows = await list_feedback(db)
    return success_response("Feedback fetched successfully", FeedbackListData(feedback=rows))
