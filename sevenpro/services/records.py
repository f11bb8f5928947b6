from typing import Generic, List, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select
from sevenpro.core.errors import ServerError
from sevenpro.models.base import TimestampedModel
from sevenpro.models.message import ContactMessage
from sevenpro.models.order import Order
import logging
logger = logging.getLogger(__name__)

LIST_LIMIT = 200

ModelT = TypeVar('ModelT', bound=TimestampedModel)

class RecordService(Generic[ModelT]):
    """Append-only store for one record type: create and newest-first listing."""

    def __init__(self, model: Type[ModelT], *, create_error: str, list_error: str = "Server error.", limit: int = LIST_LIMIT):
        self.model = model
        self.create_error = create_error
        self.list_error = list_error
        self.limit = limit

    async def create(self, db: AsyncSession, obj_in: BaseModel) -> ModelT:
        record = self.model(**obj_in.model_dump())
        record.updated_at = record.created_at
        try:
            db.add(record)
            await db.commit()
            await db.refresh(record)
            return record
        except Exception as e:
            await db.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise ServerError(self.create_error) from e

    async def list_recent(self, db: AsyncSession) -> List[ModelT]:
        try:
            statement = select(self.model).order_by(self.model.created_at.desc()).limit(self.limit)
            result = await db.execute(statement)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error fetching {self.model.__tablename__}: {e}")
            raise ServerError(self.list_error) from e

order_service = RecordService(Order, create_error="Server error while saving order.")
message_service = RecordService(ContactMessage, create_error="Server error while saving message.")
