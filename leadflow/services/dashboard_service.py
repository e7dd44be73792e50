"""
Dashboard service - pipeline metrics over the caller's scoped records.
Read-only; computed fresh on every call.
"""
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.policy import list_scope
from leadflow.models.enums import CLOSED_STAGES
from leadflow.repositories.lead_repo import LeadRepository
from leadflow.repositories.opportunity_repo import OpportunityRepository
from leadflow.schemas.auth import Principal
from leadflow.schemas.dashboard import DashboardStats


def percentage(part: int, whole: int) -> int:
    """Rounded percentage; 0 when there is nothing to divide by."""
    if whole <= 0:
        return 0
    return round(part / whole * 100)


class DashboardService:
    """Service for dashboard aggregates."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.lead_repo = LeadRepository(session)
        self.opportunity_repo = OpportunityRepository(session)

    async def compute_stats(self, principal: Principal) -> DashboardStats:
        owner_id = list_scope(principal)

        leads_by_status = await self.lead_repo.count_by_status(owner_id)
        opportunities_by_stage = await self.opportunity_repo.count_by_stage(owner_id)
        total_value = await self.opportunity_repo.total_value(owner_id)

        total_leads = sum(leads_by_status.values())
        total_opportunities = sum(opportunities_by_stage.values())
        closed = sum(opportunities_by_stage.get(stage.value, 0) for stage in CLOSED_STAGES)

        return DashboardStats(
            total_leads=total_leads,
            total_opportunities=total_opportunities,
            open_opportunities=total_opportunities - closed,
            total_opportunity_value=total_value,
            leads_by_status=leads_by_status,
            opportunities_by_stage=opportunities_by_stage,
            conversion_rate=percentage(total_opportunities, total_leads)
        )
