"""
Opportunity model - a pipeline deal, optionally spawned from a converted lead.
"""
import uuid
from datetime import datetime, date, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from leadflow.models.enums import OpportunityStage


class Opportunity(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    assigned_to: uuid.UUID = Field(foreign_key="user.id", index=True)

    # Weak back-reference: no foreign key, may dangle once the lead is deleted
    lead_id: Optional[uuid.UUID] = Field(default=None, index=True)

    name: str = Field(index=True)
    company: Optional[str] = None

    # Deal
    value: float = Field(default=0)
    stage: str = Field(default=OpportunityStage.DISCOVERY.value, index=True)  # discovery, proposal, negotiation, won, lost
    probability: int = Field(default=25)  # 0-100
    expected_close_date: Optional[date] = None

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), sa_type=DateTime(timezone=True)
    )
