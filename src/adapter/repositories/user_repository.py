from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.password_hasher import hash_password
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import PendingReset, User


class UnknownUserError(LookupError):
    """Raised when a write targets a user that does not exist"""


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str, for_update: bool = False) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def set_pending_reset(self, user_id: str, pending_reset: PendingReset) -> None:
        """Attach a pending reset to the user, replacing any previous one"""
        user = await self._get_existing(user_id)
        user.password_reset_token_hash = pending_reset.token_hash
        user.password_reset_expires_at = pending_reset.expiry_date
        await self._save(user)

    async def clear_pending_reset(self, user_id: str) -> None:
        """Remove the user's pending reset"""
        user = await self._get_existing(user_id)
        user.password_reset_token_hash = None
        user.password_reset_expires_at = None
        await self._save(user)

    async def commit_password(self, user_id: str, new_password: str) -> None:
        """Hash new_password with bcrypt and store it"""
        user = await self._get_existing(user_id)
        user.password_hash = hash_password(new_password)
        await self._save(user)

    async def _get_existing(self, user_id: str) -> User:
        user = await self.get_by_id(user_id)
        if user is None:
            raise UnknownUserError(user_id)
        return user

    async def _save(self, user: User) -> None:
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
