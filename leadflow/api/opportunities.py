"""
Opportunities API routes.
"""
import uuid
from typing import List
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.config import settings
from leadflow.database import get_session
from leadflow.services.opportunity_service import OpportunityService
from leadflow.schemas.auth import Principal
from leadflow.schemas.common import MessageResponse
from leadflow.schemas.opportunity import OpportunityCreate, OpportunityUpdate, OpportunityResponse
from leadflow.api.deps import get_current_principal

router = APIRouter(prefix=f"{settings.API_PREFIX}/opportunities", tags=["opportunities"])


@router.get("", response_model=List[OpportunityResponse])
async def list_opportunities(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """List opportunities visible to the caller."""
    opportunity_service = OpportunityService(session)
    return await opportunity_service.list(principal)


@router.post("", response_model=OpportunityResponse, status_code=201)
async def create_opportunity(
    opportunity_data: OpportunityCreate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Create a new opportunity assigned to the caller."""
    opportunity_service = OpportunityService(session)
    return await opportunity_service.create(principal, opportunity_data)


@router.get("/{opportunity_id}", response_model=OpportunityResponse)
async def get_opportunity(
    opportunity_id: uuid.UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Get an opportunity by ID."""
    opportunity_service = OpportunityService(session)
    return await opportunity_service.get(principal, opportunity_id)


@router.put("/{opportunity_id}", response_model=OpportunityResponse)
async def update_opportunity(
    opportunity_id: uuid.UUID,
    opportunity_data: OpportunityUpdate,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Update an opportunity."""
    opportunity_service = OpportunityService(session)
    return await opportunity_service.update(principal, opportunity_id, opportunity_data)


@router.delete("/{opportunity_id}", response_model=MessageResponse)
async def delete_opportunity(
    opportunity_id: uuid.UUID,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Delete an opportunity."""
    opportunity_service = OpportunityService(session)
    await opportunity_service.delete(principal, opportunity_id)
    return MessageResponse(message="Opportunity deleted successfully")
