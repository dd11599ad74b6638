"""
Application service - applying to jobs and reviewing applications.

Applicants with an active subscription are surfaced first to recruiters; the
``subscribed`` flag is frozen at apply time so a later renewal or expiry does
not reorder existing applications.
"""
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ApplicationNotFoundException,
    BadRequestException,
    JobNotFoundException,
)
from app.core.logging import get_logger
from app.core.permissions import require_ownership
from app.models.application import Application, ApplicationStatus
from app.models.base import as_utc, utcnow
from app.models.user import User
from app.repositories.application_repository import ApplicationRepository
from app.repositories.job_repository import JobRepository
from app.schemas.application import ApplicationResponse, MyApplicationItem

logger = get_logger(__name__)


def is_subscribed(subscription: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """True only while the subscription expiry is strictly in the future."""
    if subscription is None:
        return False
    return as_utc(subscription) > (now or utcnow())


class ApplicationService:
    """Handles applications from both sides: jobseekers and recruiters."""

    def __init__(self):
        self.application_repo = ApplicationRepository()
        self.job_repo = JobRepository()

    async def apply_for_job(
        self,
        db: AsyncSession,
        user: User,
        job_id: int,
    ) -> Application:
        """
        Apply the caller to an active job.

        Raises:
            BadRequestException: No resume on the profile, or the job is inactive.
            JobNotFoundException: If the job doesn't exist.
        """
        if not user.resume:
            raise BadRequestException(
                "You need to add resume in your profile to apply for this job"
            )

        job = await self.job_repo.get_by_id(db, job_id)
        if not job:
            raise JobNotFoundException("No jobs with this id")
        if not job.is_active:
            raise BadRequestException("Job is not active")

        application = await self.application_repo.create(
            db,
            job_id=job_id,
            applicant_id=user.user_id,
            applicant_email=user.email,
            resume=user.resume,
            subscribed=is_subscribed(user.subscription),
        )
        await db.commit()

        logger.info(
            "application_created",
            application_id=application.application_id,
            job_id=job_id,
            subscribed=application.subscribed,
        )
        return application

    async def list_my_applications(
        self,
        db: AsyncSession,
        user: User,
    ) -> List[MyApplicationItem]:
        rows = await self.application_repo.list_for_applicant(db, user.user_id)
        return [
            MyApplicationItem(
                **ApplicationResponse.model_validate(application).model_dump(),
                job_title=job.title,
                job_salary=job.salary,
                job_location=job.location,
            )
            for application, job in rows
        ]

    async def list_applications_for_job(
        self,
        db: AsyncSession,
        user: User,
        job_id: int,
    ) -> List[Application]:
        """
        Applications for one of the caller's jobs, subscribed applicants first.

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
        return await self.application_repo.list_for_job(db, job_id)

    async def update_status(
        self,
        db: AsyncSession,
        user: User,
        application_id: int,
        status: ApplicationStatus,
    ) -> Tuple[Application, str]:
        """
        Set an application's status.

        Any value of ``ApplicationStatus`` may follow any other; there is no
        transition graph. Returns the application and its job title so the
        caller can notify the applicant.

        Raises:
            ApplicationNotFoundException: If the application doesn't exist.
            ForbiddenException: If the caller didn't post the job.
        """
        application = await self.application_repo.get_by_id(db, application_id)
        if not application:
            raise ApplicationNotFoundException()

        job = await self.job_repo.get_by_id(db, application.job_id)
        require_ownership(
            job,
            "posted_by_recruiter_id",
            user.user_id,
            not_found=JobNotFoundException(),
        )

        application = await self.application_repo.update(
            db, application, status=status.value
        )
        await db.commit()

        logger.info(
            "application_status_updated",
            application_id=application_id,
            status=status.value,
        )
        return application, job.title
