from sevenpro.models.base import TimestampedModel

class ContactMessage(TimestampedModel, table=True):
    __tablename__ = 'contact_messages'
    name: str
    mobile: str
    message: str
