"""
Lead model - a prospective customer moving through the status funnel.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from leadflow.models.enums import LeadStatus


class Lead(SQLModel, table=True):
    """
    Lead entity - represents a potential customer/contact.
    Owned exclusively by the assigned user.
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    assigned_to: uuid.UUID = Field(foreign_key="user.id", index=True)

    # Basic info
    name: str = Field(index=True)
    company: Optional[str] = Field(default=None, index=True)

    # Contact info
    email: Optional[str] = Field(default=None, index=True)
    phone: Optional[str] = None

    # Qualification
    status: str = Field(default=LeadStatus.NEW.value, index=True)  # new, contacted, qualified, unqualified

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
