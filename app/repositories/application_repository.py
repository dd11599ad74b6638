"""
Application repository - data access for Application entity.
"""
from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.application import Application
from app.models.job import Job
from app.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    def __init__(self):
        super().__init__(Application)

    async def list_for_job(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> List[Application]:
        """
        Applications for a job in review order.

        Subscribed applicants first, then earliest application first.
        """
        result = await db.execute(
            select(Application)
            .where(Application.job_id == job_id)
            .order_by(
                Application.subscribed.desc(),
                Application.applied_at.asc(),
                Application.application_id.asc(),
            )
        )
        return list(result.scalars().all())

    async def list_for_applicant(
        self,
        db: AsyncSession,
        applicant_id: int,
    ) -> List[Tuple[Application, Job]]:
        """An applicant's applications with the job each one targets."""
        result = await db.execute(
            select(Application, Job)
            .join(Job, Application.job_id == Job.job_id)
            .where(Application.applicant_id == applicant_id)
            .order_by(Application.applied_at.desc())
        )
        return [tuple(row) for row in result.all()]
