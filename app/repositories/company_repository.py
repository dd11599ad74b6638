"""
Company repository - data access for Company entity.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.company import Company
from app.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    def __init__(self):
        super().__init__(Company)

    async def name_exists(
        self,
        db: AsyncSession,
        name: str,
    ) -> bool:
        """Check if a company name is already taken."""
        result = await db.execute(
            select(Company.company_id).where(Company.name == name)
        )
        return result.scalar_one_or_none() is not None

    async def get_owned(
        self,
        db: AsyncSession,
        company_id: int,
        recruiter_id: int,
    ) -> Optional[Company]:
        """Get a company only if ``recruiter_id`` owns it."""
        result = await db.execute(
            select(Company).where(
                Company.company_id == company_id,
                Company.recruiter_id == recruiter_id,
            )
        )
        return result.scalar_one_or_none()

    async def get_with_jobs(
        self,
        db: AsyncSession,
        company_id: int,
    ) -> Optional[Company]:
        """Get a company with its jobs eagerly loaded."""
        result = await db.execute(
            select(Company)
            .options(selectinload(Company.jobs))
            .where(Company.company_id == company_id)
        )
        return result.scalar_one_or_none()

    async def list_by_recruiter(
        self,
        db: AsyncSession,
        recruiter_id: int,
    ) -> List[Company]:
        """All companies owned by a recruiter."""
        return await self.get_many(
            db,
            Company.recruiter_id == recruiter_id,
            order_by=Company.created_at.desc(),
        )
