from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, StrictInt

from .validation import SchemaBase


class DoctorCreate(SchemaBase):
    name: str = Field(min_length=1, max_length=200)
    specialization: str = Field(min_length=1, max_length=100)
    experience: StrictInt = Field(ge=0)
    contact: str = Field(min_length=1, max_length=50)
    email: EmailStr


class DoctorResponse(DoctorCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
