from typing import ClassVar, Optional, Tuple
from sevenpro.schemas.base import CamelModel, CreatePayload, RecordResponse

class OrderBase(CamelModel):
    student_name: Optional[str] = None
    institute_name: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    education_level: Optional[str] = None
    project_serial: Optional[str] = None
    ordered_from_idea: Optional[str] = None
    project_title: Optional[str] = None
    project_domain: Optional[str] = None
    project_concept: Optional[str] = None
    project_description: Optional[str] = None
    deadline: Optional[str] = None
    budget: Optional[str] = None

class OrderCreate(CreatePayload, OrderBase):
    required_fields: ClassVar[Tuple[str, ...]] = ('student_name', 'mobile', 'project_title')

class OrderResponse(OrderBase, RecordResponse):
    pass
