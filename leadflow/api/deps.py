"""
API dependencies - shared across all routes.
"""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.database import get_session
from leadflow.schemas.auth import Principal
from leadflow.services.auth_service import AuthService


# auto_error=False so a missing header reaches AuthService as a 401, not a 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_session)
) -> Principal:
    """Resolve the bearer token to the calling principal."""
    token = credentials.credentials if credentials else None
    return AuthService(session).verify_token(token)
