from typing import ClassVar, Optional, Tuple
from sevenpro.schemas.base import CreatePayload, RecordResponse

class ContactMessageCreate(CreatePayload):
    required_fields: ClassVar[Tuple[str, ...]] = ('name', 'mobile', 'message')
    name: Optional[str] = None
    mobile: Optional[str] = None
    message: Optional[str] = None

class ContactMessageResponse(RecordResponse):
    name: str
    mobile: str
    message: str
