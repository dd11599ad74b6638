"""
Job repository - data access for Job entity.
"""
from typing import List, Optional, Tuple

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.job import Job
from app.models.company import Company
from app.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job)

    async def search_active(
        self,
        db: AsyncSession,
        *,
        title: Optional[str] = None,
        location: Optional[str] = None,
    ) -> List[Tuple[Job, str, Optional[str]]]:
        """
        Active jobs with their company's name and logo, newest first.

        Each given filter adds a case-insensitive literal substring match (``%`` and
        ``_`` are escaped); no filters means every active job.
        """
        query = (
            select(Job, Company.name, Company.logo)
            .join(Company, Job.company_id == Company.company_id)
        )

        filters = [Job.is_active.is_(True)]

        if title:
            filters.append(Job.title.icontains(title, autoescape=True))

        if location:
            filters.append(Job.location.icontains(location, autoescape=True))

        query = query.where(and_(*filters)).order_by(Job.created_at.desc(), Job.job_id.desc())

        result = await db.execute(query)
        return [tuple(row) for row in result.all()]
