"""
Demo data for an empty database.
"""
import logging
from datetime import date

from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.security import get_password_hash
from leadflow.models.enums import Role, LeadStatus, OpportunityStage
from leadflow.models.lead import Lead
from leadflow.models.opportunity import Opportunity
from leadflow.models.user import User
from leadflow.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


async def seed_demo_data(session: AsyncSession) -> bool:
    """
    Insert a demo rep, a demo manager and a few records owned by the rep.
    Does nothing if any user already exists.
    """
    if await UserRepository(session).count() > 0:
        return False

    rep = User(
        email="rep@example.com",
        password_hash=get_password_hash(DEMO_PASSWORD),
        name="John Rep",
        role=Role.REP.value
    )
    manager = User(
        email="manager@example.com",
        password_hash=get_password_hash(DEMO_PASSWORD),
        name="Jane Manager",
        role=Role.MANAGER.value
    )
    session.add(rep)
    session.add(manager)
    await session.flush()

    session.add(Lead(
        name="Acme Corporation",
        email="contact@acme.com",
        phone="+1-555-0123",
        company="Acme Corporation",
        status=LeadStatus.NEW.value,
        assigned_to=rep.id
    ))
    session.add(Lead(
        name="Tech Solutions Inc",
        email="info@techsolutions.com",
        phone="+1-555-0456",
        company="Tech Solutions Inc",
        status=LeadStatus.CONTACTED.value,
        assigned_to=rep.id
    ))
    session.add(Opportunity(
        name="Acme Software License",
        company="Acme Corporation",
        value=50000,
        stage=OpportunityStage.PROPOSAL.value,
        probability=75,
        expected_close_date=date(2024, 3, 15),
        assigned_to=rep.id
    ))

    await session.commit()
    logger.info("Seeded demo users and pipeline records")
    return True
