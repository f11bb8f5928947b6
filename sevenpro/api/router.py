from fastapi import APIRouter
from sevenpro.api.endpoints import messages, orders

api_router = APIRouter()
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
