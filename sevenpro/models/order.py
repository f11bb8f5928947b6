from typing import Optional
from sqlmodel import Field
from sevenpro.models.base import TimestampedModel

class Order(TimestampedModel, table=True):
    __tablename__ = 'orders'
    student_name: str
    institute_name: Optional[str] = None
    mobile: str
    email: Optional[str] = None
    city: Optional[str] = None
    education_level: Optional[str] = None

    project_serial: Optional[str] = None
    ordered_from_idea: Optional[str] = None  # "yes" / "no"

    project_title: str = Field(index=True)
    project_domain: Optional[str] = None
    project_concept: Optional[str] = None
    project_description: Optional[str] = None

    deadline: Optional[str] = None
    budget: Optional[str] = None
