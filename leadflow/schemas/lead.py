"""
Lead schemas.
"""
import uuid
from typing import Optional
from datetime import datetime, date
from pydantic import EmailStr, Field, field_validator

from leadflow.models.enums import LeadStatus
from leadflow.schemas.common import CamelModel


class LeadCreate(CamelModel):
    """Create a new lead."""
    name: str = Field(min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    status: LeadStatus = LeadStatus.NEW

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Acme",
                "company": "Acme Co",
                "email": "a@acme.com",
                "phone": "555-0001"
            }
        }


class LeadUpdate(CamelModel):
    """Partial update; omitted fields keep their value."""
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    status: Optional[LeadStatus] = None


class LeadResponse(CamelModel):
    """Lead response."""
    id: uuid.UUID
    name: str
    email: Optional[str]
    phone: Optional[str]
    company: Optional[str]
    status: LeadStatus
    assigned_to: uuid.UUID
    created_at: datetime
    updated_at: datetime


class LeadConvertRequest(CamelModel):
    """Overrides for the opportunity spawned by a conversion."""
    opportunity_name: Optional[str] = None
    value: Optional[float] = Field(default=None, ge=0)
    expected_close_date: Optional[date] = None

    @field_validator("opportunity_name", "expected_close_date", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # empty form fields fall back to the defaults
        if isinstance(value, str) and not value.strip():
            return None
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "opportunityName": "Acme Software License",
                "value": 50000,
                "expectedCloseDate": "2024-03-15"
            }
        }
