"""
User repository.
"""
import uuid
from typing import Optional
from datetime import datetime, timezone

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.models.user import User
from leadflow.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        query = select(User).where(User.email == email)
        result = await self.session.exec(query)
        return result.first()

    async def update_password(self, user_id: uuid.UUID, password_hash: str) -> bool:
        """Update user's password."""
        user = await self.get(user_id)
        if user:
            user.password_hash = password_hash
            user.updated_at = datetime.now(timezone.utc)
            self.session.add(user)
            await self.session.commit()
            return True
        return False
