from datetime import datetime, timezone
from typing import Any, ClassVar, List, Tuple
from uuid import UUID
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Snake case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        coerce_numbers_to_str=True,
    )

class CreatePayload(CamelModel):
    required_fields: ClassVar[Tuple[str, ...]] = ()

    @field_validator('*', mode='before')
    @classmethod
    def booleans_as_text(cls, value: Any) -> Any:
        # free-text fields: true/false are stored as their JSON spelling
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return value

    def missing_fields(self) -> List[str]:
        return [to_camel(name) for name in self.required_fields if not getattr(self, name)]

    @classmethod
    def required_message(cls) -> str:
        names = [to_camel(name) for name in cls.required_fields]
        if len(names) == 1:
            return f"{names[0]} is required."
        return f"{', '.join(names[:-1])} and {names[-1]} are required."

class RecordResponse(CamelModel):
    id: UUID
    created_at: datetime
    updated_at: datetime

    @field_validator('created_at', 'updated_at')
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without an offset; they are stored in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
