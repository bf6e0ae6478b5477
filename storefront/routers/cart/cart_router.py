from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.db import get_db
from storefront.schemas.cart.cart_schemas import CartHandoffRequest, CartHandoffData
from storefront.services.cart.handoff_service import create_whatsapp_handoff
from storefront.utils.response import success_response, APIResponse

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.post("/whatsapp", response_model=APIResponse[CartHandoffData])
async def whatsapp_handoff_api(
    payload: CartHandoffRequest,
    db: AsyncSession = Depends(get_db),
):
    data = await create_whatsapp_handoff(db, payload)
    return success_response("WhatsApp message ready", data)
