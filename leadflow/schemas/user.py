"""
User schemas.
"""
import uuid
from typing import Optional

from leadflow.models.enums import Role
from leadflow.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Public user details; never includes the password hash."""
    id: uuid.UUID
    email: str
    name: Optional[str] = None
    role: Role
