from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sevenpro.core.database import get_session
from sevenpro.core.errors import ValidationError
from sevenpro.schemas.message import ContactMessageCreate, ContactMessageResponse
from sevenpro.services.records import message_service

router = APIRouter()

@router.post("")
async def create_message(payload: Optional[ContactMessageCreate] = None, db: AsyncSession = Depends(get_session)):
    payload = payload or ContactMessageCreate()
    if payload.missing_fields():
        raise ValidationError(ContactMessageCreate.required_message())
    msg = await message_service.create(db, payload)
    return {
        "ok": True,
        "message": "Message saved in database.",
        "data": ContactMessageResponse.model_validate(msg).model_dump(mode="json", by_alias=True),
    }

@router.get("")
async def list_messages(db: AsyncSession = Depends(get_session)):
    msgs = await message_service.list_recent(db)
    return {
        "ok": True,
        "messages": [ContactMessageResponse.model_validate(m).model_dump(mode="json", by_alias=True) for m in msgs],
    }
