"""
Dashboard schemas.
"""
from typing import Dict

from leadflow.schemas.common import CamelModel


class DashboardStats(CamelModel):
    """Pipeline metrics over the caller's scoped records."""
    total_leads: int
    total_opportunities: int
    open_opportunities: int  # excludes won and lost
    total_opportunity_value: float
    leads_by_status: Dict[str, int]
    opportunities_by_stage: Dict[str, int]
    conversion_rate: int  # percent of leads that became opportunities

    class Config:
        json_schema_extra = {
            "example": {
                "totalLeads": 4,
                "totalOpportunities": 1,
                "openOpportunities": 1,
                "totalOpportunityValue": 50000,
                "leadsByStatus": {"new": 2, "contacted": 1, "qualified": 1},
                "opportunitiesByStage": {"discovery": 1},
                "conversionRate": 25
            }
        }
