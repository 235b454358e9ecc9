from typing import Optional

from .validation import SchemaBase


class DeleteResponse(SchemaBase):
    message: str
    deleted_appointments: Optional[int] = None
