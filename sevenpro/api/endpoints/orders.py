from typing import Optional
from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sevenpro.core.context import AppContext, get_context
from sevenpro.core.database import get_session
from sevenpro.core.errors import ValidationError
from sevenpro.schemas.order import OrderCreate, OrderResponse
from sevenpro.services.records import order_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("")
async def create_order(
    background_tasks: BackgroundTasks,
    payload: Optional[OrderCreate] = None,
    db: AsyncSession = Depends(get_session),
    ctx: AppContext = Depends(get_context),
):
    payload = payload or OrderCreate()
    missing = payload.missing_fields()
    if missing:
        logger.info(f"Order rejected, missing: {missing}")
        raise ValidationError(OrderCreate.required_message())

    order = await order_service.create(db, payload)
    snapshot = OrderResponse.model_validate(order)
    # runs after the response has been sent
    background_tasks.add_task(ctx.notifier.send_order_confirmation, snapshot)

    return {
        "ok": True,
        "message": "Order saved. Our team will contact the student within an hour.",
        "order": snapshot.model_dump(mode="json", by_alias=True),
    }

@router.get("")
async def list_orders(db: AsyncSession = Depends(get_session)):
    orders = await order_service.list_recent(db)
    return {
        "ok": True,
        "orders": [OrderResponse.model_validate(o).model_dump(mode="json", by_alias=True) for o in orders],
    }
