"""
User repository - data access for User entity.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def get_with_skills(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> Optional[User]:
        """Get user with their skills eagerly loaded."""
        result = await db.execute(
            select(User)
            .options(selectinload(User.skills))
            .where(User.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> bool:
        result = await db.execute(
            select(User.user_id).where(User.user_id == user_id)
        )
        return result.scalar_one_or_none() is not None
