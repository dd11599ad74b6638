"""
Job service - business logic for posting, editing and searching jobs.
"""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import CompanyNotFoundException, JobNotFoundException
from app.core.logging import get_logger
from app.core.permissions import require_ownership
from app.models.job import Job
from app.models.user import User
from app.repositories.company_repository import CompanyRepository
from app.repositories.job_repository import JobRepository
from app.schemas.job import JobCreate, JobListItem, JobResponse, JobUpdate

logger = get_logger(__name__)


class JobService:
    """Handles job creation, updates and search."""

    def __init__(self):
        self.job_repo = JobRepository()
        self.company_repo = CompanyRepository()

    async def create_job(
        self,
        db: AsyncSession,
        user: User,
        data: JobCreate,
    ) -> Job:
        """
        Post a job under one of the caller's companies.

        Raises:
            CompanyNotFoundException: If the company doesn't exist or isn't the caller's.
        """
        company = await self.company_repo.get_owned(db, data.company_id, user.user_id)
        if not company:
            raise CompanyNotFoundException()

        job = await self.job_repo.create(
            db,
            **data.model_dump(),
            posted_by_recruiter_id=user.user_id,
        )
        await db.commit()

        logger.info("job_created", job_id=job.job_id, company_id=company.company_id)
        return job

    async def update_job(
        self,
        db: AsyncSession,
        user: User,
        job_id: int,
        data: JobUpdate,
    ) -> Job:
        """
        Update the fields present in ``data``.

        Raises:
            JobNotFoundException: If the job doesn't exist.
            ForbiddenException: If the caller didn't post the job.
        """
        job = await self.job_repo.get_by_id(db, job_id)
        require_ownership(
            job,
            "posted_by_recruiter_id",
            user.user_id,
            not_found=JobNotFoundException(),
        )

        updates = data.model_dump(exclude_unset=True, exclude_none=True)
        if updates:
            job = await self.job_repo.update(db, job, **updates)
            await db.commit()

        logger.info("job_updated", job_id=job_id, fields=sorted(updates))
        return job

    async def search_active_jobs(
        self,
        db: AsyncSession,
        *,
        title: Optional[str] = None,
        location: Optional[str] = None,
    ) -> List[JobListItem]:
        """Active jobs filtered by title and/or location, newest first."""
        rows = await self.job_repo.search_active(db, title=title, location=location)
        return [
            JobListItem(
                **JobResponse.model_validate(job).model_dump(),
                company_name=company_name,
                company_logo=company_logo,
            )
            for job, company_name, company_logo in rows
        ]

    async def get_job(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> Job:
        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException()
        return job
