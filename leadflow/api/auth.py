"""
Authentication API routes.
"""
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.config import settings
from leadflow.database import get_session
from leadflow.services.auth_service import AuthService
from leadflow.schemas.auth import (
    RegisterRequest, LoginRequest, AuthResponse, ChangePasswordRequest, Principal
)
from leadflow.schemas.common import MessageResponse
from leadflow.schemas.user import UserResponse
from leadflow.api.deps import get_current_principal

router = APIRouter(prefix=f"{settings.API_PREFIX}/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_session)
):
    """Register a new user and get a session token."""
    auth_service = AuthService(session)
    return await auth_service.register(
        email=request.email,
        password=request.password,
        name=request.name,
        role=request.role
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_session)
):
    """Login and get a session token."""
    auth_service = AuthService(session)
    return await auth_service.login(request.email, request.password)


@router.get("/me", response_model=UserResponse)
async def me(
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Current user's profile."""
    auth_service = AuthService(session)
    return await auth_service.get_profile(principal)


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    principal: Principal = Depends(get_current_principal),
    session: AsyncSession = Depends(get_session)
):
    """Change password for logged-in user."""
    auth_service = AuthService(session)
    await auth_service.change_password(
        principal,
        request.current_password,
        request.new_password
    )
    return MessageResponse(message="Password changed successfully")
