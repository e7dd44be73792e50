"""
User model.
Holds identity, credentials and the role that scopes every request.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from leadflow.models.enums import Role


class User(SQLModel, table=True):
    """
    User model with authentication and profile info.
    Created at registration; only the password changes afterwards.
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Auth
    email: str = Field(unique=True, index=True)
    password_hash: str

    # Profile
    name: Optional[str] = None
    role: str = Field(default=Role.REP.value)  # rep, manager, admin

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
