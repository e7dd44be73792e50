"""
Lead repository.
"""
import uuid
from typing import Optional, Dict

from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.models.lead import Lead
from leadflow.repositories.base import BaseRepository


class LeadRepository(BaseRepository[Lead]):
    """Repository for Lead operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Lead, session)

    async def count_by_status(self, owner_id: Optional[uuid.UUID] = None) -> Dict[str, int]:
        """Lead counts per status within the owner scope."""
        return await self.count_by("status", owner_id)
