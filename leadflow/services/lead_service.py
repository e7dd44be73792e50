"""
Lead service - role-scoped lead management.
"""
import logging
import uuid
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.exceptions import NotFoundError
from leadflow.core.policy import Operation, authorize, list_scope
from leadflow.repositories.lead_repo import LeadRepository
from leadflow.models.lead import Lead
from leadflow.schemas.auth import Principal
from leadflow.schemas.lead import LeadCreate, LeadUpdate

logger = logging.getLogger(__name__)


class LeadService:
    """Service for lead operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.lead_repo = LeadRepository(session)

    async def _get_for(self, principal: Principal, lead_id: uuid.UUID, operation: Operation) -> Lead:
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            raise NotFoundError("Lead", str(lead_id))
        authorize(principal, operation, lead, resource="lead")
        return lead

    async def list(self, principal: Principal) -> List[Lead]:
        """Leads visible to the principal."""
        return await self.lead_repo.list(owner_id=list_scope(principal))

    async def get(self, principal: Principal, lead_id: uuid.UUID) -> Lead:
        """Get a lead by ID."""
        return await self._get_for(principal, lead_id, Operation.READ)

    async def create(self, principal: Principal, lead_data: LeadCreate) -> Lead:
        """Create a lead owned by the principal."""
        authorize(principal, Operation.CREATE, resource="lead")

        data = lead_data.model_dump()
        data["assigned_to"] = principal.id

        lead = await self.lead_repo.create(data)
        logger.info("Lead %s created by %s", lead.id, principal.id)
        return lead

    async def update(
        self,
        principal: Principal,
        lead_id: uuid.UUID,
        lead_data: LeadUpdate
    ) -> Lead:
        """Update a lead; only supplied fields change."""
        await self._get_for(principal, lead_id, Operation.UPDATE)

        update_data = lead_data.model_dump(exclude_unset=True)
        return await self.lead_repo.update(lead_id, update_data)

    async def delete(self, principal: Principal, lead_id: uuid.UUID) -> bool:
        """Delete a lead. Opportunities converted from it keep their dangling lead_id."""
        await self._get_for(principal, lead_id, Operation.DELETE)

        success = await self.lead_repo.delete(lead_id)
        if success:
            logger.info("Lead %s deleted by %s", lead_id, principal.id)
        return success
