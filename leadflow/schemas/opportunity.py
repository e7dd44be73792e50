"""
Opportunity schemas.
"""
import uuid
from typing import Optional
from datetime import datetime, date
from pydantic import Field

from leadflow.models.enums import OpportunityStage
from leadflow.schemas.common import CamelModel


class OpportunityCreate(CamelModel):
    """
    Create a new opportunity.
    Probability defaults from the stage when omitted.
    """
    name: str = Field(min_length=1)
    company: Optional[str] = None
    value: float = Field(default=0, ge=0)
    stage: OpportunityStage = OpportunityStage.DISCOVERY
    probability: Optional[int] = Field(default=None, ge=0, le=100)
    expected_close_date: Optional[date] = None

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme Software License",
                "company": "Acme Corporation",
                "value": 50000,
                "stage": "proposal",
                "expectedCloseDate": "2024-03-15"
            }
        }


class OpportunityUpdate(CamelModel):
    """Partial update; a new stage without a probability resets it to the stage default."""
    name: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = None
    value: Optional[float] = Field(default=None, ge=0)
    stage: Optional[OpportunityStage] = None
    probability: Optional[int] = Field(default=None, ge=0, le=100)
    expected_close_date: Optional[date] = None


class OpportunityResponse(CamelModel):
    """Opportunity response."""
    id: uuid.UUID
    name: str
    company: Optional[str]
    value: float
    stage: OpportunityStage
    probability: int
    expected_close_date: Optional[date]
    assigned_to: uuid.UUID
    lead_id: Optional[uuid.UUID]
    created_at: datetime
    updated_at: datetime
