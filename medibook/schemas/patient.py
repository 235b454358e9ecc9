from datetime import datetime
from typing import Optional

from pydantic import Field, StrictInt

from ..models.patient import Gender
from .validation import SchemaBase


class PatientCreate(SchemaBase):
    name: str = Field(min_length=1, max_length=200)
    age: StrictInt = Field(gt=0)
    gender: Gender
    contact: str = Field(min_length=1, max_length=50)
    address: str = Field(min_length=1, max_length=255)


class PatientResponse(PatientCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
