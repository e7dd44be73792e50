"""
Lead conversion - qualifies a lead and spawns a linked opportunity.

Both writes go through one database transaction: the lead status change is
only flushed, the opportunity insert is flushed, and a single commit makes
them visible together. Any failure rolls both back.
"""
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.exceptions import NotFoundError
from leadflow.core.policy import Operation, authorize
from leadflow.models.enums import LeadStatus, OpportunityStage, default_probability
from leadflow.models.lead import Lead
from leadflow.models.opportunity import Opportunity
from leadflow.repositories.lead_repo import LeadRepository
from leadflow.repositories.opportunity_repo import OpportunityRepository
from leadflow.schemas.auth import Principal
from leadflow.schemas.lead import LeadConvertRequest
from leadflow.services.opportunity_service import default_close_date

logger = logging.getLogger(__name__)


def default_opportunity_name(lead: Lead) -> str:
    return f"{lead.company or lead.name} - Sales Opportunity"


class ConversionService:
    """Service for the lead -> opportunity workflow."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.lead_repo = LeadRepository(session)
        self.opportunity_repo = OpportunityRepository(session)

    async def convert_lead(
        self,
        principal: Principal,
        lead_id: uuid.UUID,
        convert_data: LeadConvertRequest
    ) -> Opportunity:
        """
        Mark the lead qualified and create an opportunity from it.

        Not idempotent: each call creates a new opportunity, whatever the
        lead's current status.
        """
        lead = await self.lead_repo.get(lead_id)
        if not lead:
            raise NotFoundError("Lead", str(lead_id))
        authorize(principal, Operation.UPDATE, lead, resource="lead")

        stage = OpportunityStage.DISCOVERY
        try:
            lead.status = LeadStatus.QUALIFIED.value
            lead.updated_at = datetime.now(timezone.utc)
            self.session.add(lead)
            await self.session.flush()

            opportunity = await self.opportunity_repo.create({
                "name": convert_data.opportunity_name or default_opportunity_name(lead),
                "company": lead.company,
                "value": convert_data.value or 0,
                "stage": stage.value,
                "probability": default_probability(stage),
                "expected_close_date": convert_data.expected_close_date or default_close_date(),
                "assigned_to": principal.id,
                "lead_id": lead.id
            }, commit=False)

            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Conversion of lead %s failed, rolled back", lead_id)
            raise

        await self.session.refresh(opportunity)
        logger.info("Lead %s converted to opportunity %s by %s", lead.id, opportunity.id, principal.id)
        return opportunity
