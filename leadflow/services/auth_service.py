"""
Authentication service - registration, login and token verification.
"""
import logging
import uuid
from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    decode_token
)
from leadflow.core.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    TokenInvalidError,
    UnauthorizedError
)
from leadflow.models.enums import Role
from leadflow.models.user import User
from leadflow.repositories.user_repo import UserRepository
from leadflow.schemas.auth import Principal
from leadflow.schemas.user import UserResponse

logger = logging.getLogger(__name__)


def principal_for(user: User) -> Principal:
    """Principal claims for a stored user."""
    return Principal(id=user.id, email=user.email, name=user.name, role=Role(user.role))


def issue_token(principal: Principal) -> str:
    """Sign a session token bound to the principal's claims."""
    return create_access_token({
        "sub": str(principal.id),
        "email": principal.email,
        "name": principal.name,
        "role": principal.role.value
    })


class AuthService:
    """Service for authentication operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    def _auth_response(self, user: User) -> dict:
        return {
            "token": issue_token(principal_for(user)),
            "user": UserResponse.model_validate(user)
        }

    async def register(
        self,
        email: str,
        password: str,
        name: str,
        role: Role = Role.REP
    ) -> dict:
        """Register a new user and return a session token."""
        existing = await self.user_repo.get_by_email(email)
        if existing:
            raise AlreadyExistsError("User", "email", email)

        user = await self.user_repo.create({
            "email": email,
            "password_hash": get_password_hash(password),
            "name": name,
            "role": Role(role).value
        })
        logger.info("Registered user %s (role=%s)", user.id, user.role)

        return self._auth_response(user)

    async def login(self, email: str, password: str) -> dict:
        """Authenticate user and return a fresh token."""
        user = await self.user_repo.get_by_email(email)

        # Same error for unknown email and wrong password
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        return self._auth_response(user)

    def verify_token(self, token: Optional[str]) -> Principal:
        """Rebuild the principal from a bearer token. Stateless: no store lookup."""
        if not token:
            raise UnauthorizedError("Access token required")

        payload = decode_token(token)
        try:
            return Principal(
                id=uuid.UUID(payload["sub"]),
                email=payload["email"],
                name=payload.get("name"),
                role=Role(payload["role"])
            )
        except (KeyError, ValueError, TypeError):
            raise TokenInvalidError("Access token")

    async def get_profile(self, principal: Principal) -> User:
        """Current user's stored record."""
        user = await self.user_repo.get(principal.id)
        if not user:
            raise NotFoundError("User", str(principal.id))
        return user

    async def change_password(
        self,
        principal: Principal,
        current_password: str,
        new_password: str
    ) -> bool:
        """Change password for logged-in user."""
        user = await self.get_profile(principal)

        if not verify_password(current_password, user.password_hash):
            raise InvalidCredentialsError()

        await self.user_repo.update_password(user.id, get_password_hash(new_password))
        logger.info("Password changed for user %s", user.id)
        return True
