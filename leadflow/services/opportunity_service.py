"""
Opportunity service - role-scoped opportunity management.
"""
import logging
import uuid
from datetime import date, timedelta
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.config import settings
from leadflow.core.exceptions import NotFoundError
from leadflow.core.policy import Operation, authorize, list_scope
from leadflow.models.enums import default_probability
from leadflow.models.opportunity import Opportunity
from leadflow.repositories.opportunity_repo import OpportunityRepository
from leadflow.schemas.auth import Principal
from leadflow.schemas.opportunity import OpportunityCreate, OpportunityUpdate

logger = logging.getLogger(__name__)


def default_close_date() -> date:
    return date.today() + timedelta(days=settings.DEFAULT_CLOSE_DAYS)


class OpportunityService:
    """Service for opportunity operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.opportunity_repo = OpportunityRepository(session)

    async def _get_for(
        self,
        principal: Principal,
        opportunity_id: uuid.UUID,
        operation: Operation
    ) -> Opportunity:
        opportunity = await self.opportunity_repo.get(opportunity_id)
        if not opportunity:
            raise NotFoundError("Opportunity", str(opportunity_id))
        authorize(principal, operation, opportunity, resource="opportunity")
        return opportunity

    async def list(self, principal: Principal) -> List[Opportunity]:
        """Opportunities visible to the principal."""
        return await self.opportunity_repo.list(owner_id=list_scope(principal))

    async def get(self, principal: Principal, opportunity_id: uuid.UUID) -> Opportunity:
        """Get an opportunity by ID."""
        return await self._get_for(principal, opportunity_id, Operation.READ)

    async def create(self, principal: Principal, opportunity_data: OpportunityCreate) -> Opportunity:
        """Create an opportunity owned by the principal."""
        authorize(principal, Operation.CREATE, resource="opportunity")

        data = opportunity_data.model_dump()
        if data["probability"] is None:
            data["probability"] = default_probability(data["stage"])
        if data["expected_close_date"] is None:
            data["expected_close_date"] = default_close_date()
        data["assigned_to"] = principal.id
        data["lead_id"] = None

        opportunity = await self.opportunity_repo.create(data)
        logger.info("Opportunity %s created by %s", opportunity.id, principal.id)
        return opportunity

    async def update(
        self,
        principal: Principal,
        opportunity_id: uuid.UUID,
        opportunity_data: OpportunityUpdate
    ) -> Opportunity:
        """
        Update an opportunity; only supplied fields change.

        Moving to a different stage without an explicit probability applies its
        default probability. Re-sending the current stage keeps the stored
        probability, and an explicit probability always wins.
        """
        opportunity = await self._get_for(principal, opportunity_id, Operation.UPDATE)

        update_data = opportunity_data.model_dump(exclude_unset=True)
        new_stage = update_data.get("stage")
        stage_changed = new_stage is not None and new_stage != opportunity.stage
        if stage_changed and update_data.get("probability") is None:
            update_data["probability"] = default_probability(new_stage)

        return await self.opportunity_repo.update(opportunity_id, update_data)

    async def delete(self, principal: Principal, opportunity_id: uuid.UUID) -> bool:
        """Delete an opportunity."""
        await self._get_for(principal, opportunity_id, Operation.DELETE)

        success = await self.opportunity_repo.delete(opportunity_id)
        if success:
            logger.info("Opportunity %s deleted by %s", opportunity_id, principal.id)
        return success
