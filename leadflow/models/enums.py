"""
Closed vocabularies shared by models, schemas and the authorization policy.
"""
from enum import Enum
from typing import Dict


class Role(str, Enum):
    REP = "rep"
    MANAGER = "manager"
    ADMIN = "admin"


class LeadStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    UNQUALIFIED = "unqualified"


class OpportunityStage(str, Enum):
    DISCOVERY = "discovery"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    WON = "won"
    LOST = "lost"


# Default probability applied when a stage is set without an explicit probability.
# Only a default: probability stays independently editable afterwards.
STAGE_PROBABILITY: Dict[OpportunityStage, int] = {
    OpportunityStage.DISCOVERY: 25,
    OpportunityStage.PROPOSAL: 50,
    OpportunityStage.NEGOTIATION: 75,
    OpportunityStage.WON: 100,
    OpportunityStage.LOST: 0,
}

CLOSED_STAGES = (OpportunityStage.WON, OpportunityStage.LOST)


def default_probability(stage: str) -> int:
    return STAGE_PROBABILITY[OpportunityStage(stage)]
