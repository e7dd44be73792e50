"""
Leads API routes.
"""
import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.config import settings
from leadflow.database import get_session
from leadflow.services.lead_service import LeadService
from leadflow.services.conversion_service import ConversionService
from leadflow.schemas.auth import Principal
from leadflow.schemas.common import MessageResponse
from leadflow.schemas.lead import LeadCreate, LeadUpdate, LeadResponse, LeadConvertRequest
from leadflow.schemas.opportunity import OpportunityResponse
from leadflow.api.deps import get_current_principal

router = APIRouter(prefix=f"{settings.API_PREFIX}/leads", tags=["leads"])


@router.get("", response_model=List[LeadResponse])
async def list_leads(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """List leads visible to the caller."""
    lead_service = LeadService(session)
    return await lead_service.list(principal)


@router.post("", response_model=LeadResponse, status_code=201)
async def create_lead(
    lead_data: LeadCreate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Create a new lead assigned to the caller."""
    lead_service = LeadService(session)
    return await lead_service.create(principal, lead_data)


@router.get("/{lead_id}", response_model=LeadResponse)
async def get_lead(
    lead_id: uuid.UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Get a lead by ID."""
    lead_service = LeadService(session)
    return await lead_service.get(principal, lead_id)


@router.put("/{lead_id}", response_model=LeadResponse)
async def update_lead(
    lead_id: uuid.UUID,
    lead_data: LeadUpdate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Update a lead."""
    lead_service = LeadService(session)
    return await lead_service.update(principal, lead_id, lead_data)


@router.delete("/{lead_id}", response_model=MessageResponse)
async def delete_lead(
    lead_id: uuid.UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Delete a lead."""
    lead_service = LeadService(session)
    await lead_service.delete(principal, lead_id)
    return MessageResponse(message="Lead deleted successfully")


@router.post("/{lead_id}/convert", response_model=OpportunityResponse, status_code=201)
async def convert_lead(
    lead_id: uuid.UUID,
    convert_data: Optional[LeadConvertRequest] = None,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Qualify a lead and create an opportunity from it."""
    conversion_service = ConversionService(session)
    return await conversion_service.convert_lead(
        principal, lead_id, convert_data or LeadConvertRequest()
    )
