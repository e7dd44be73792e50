"""
Opportunity repository with pipeline aggregates.
"""
import uuid
from typing import Optional, Dict

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import func

from leadflow.models.opportunity import Opportunity
from leadflow.repositories.base import BaseRepository


class OpportunityRepository(BaseRepository[Opportunity]):
    """Repository for Opportunity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Opportunity, session)

    async def count_by_stage(self, owner_id: Optional[uuid.UUID] = None) -> Dict[str, int]:
        """Opportunity counts per stage within the owner scope."""
        return await self.count_by("stage", owner_id)

    async def total_value(self, owner_id: Optional[uuid.UUID] = None) -> float:
        """Sum of opportunity value within the owner scope."""
        query = self._scoped(select(func.coalesce(func.sum(Opportunity.value), 0)), owner_id)
        result = await self.session.exec(query)
        return float(result.one())
