"""
Dashboard API routes.
"""
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.config import settings
from leadflow.database import get_session
from leadflow.services.dashboard_service import DashboardService
from leadflow.schemas.auth import Principal
from leadflow.schemas.dashboard import DashboardStats
from leadflow.api.deps import get_current_principal

router = APIRouter(prefix=f"{settings.API_PREFIX}/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Get dashboard statistics."""
    dashboard_service = DashboardService(session)
    return await dashboard_service.compute_stats(principal)
