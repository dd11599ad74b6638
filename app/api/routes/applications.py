"""
Application routes.
"""
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends, Request, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.rate_limit import limiter, RATE_APPLY
from app.api.deps import get_current_user, require_role
from app.models.user import User, UserRole
from app.services.application_service import ApplicationService
from app.services.notification_service import NotificationPublisher, get_publisher
from app.schemas.base import INT32_MAX
from app.schemas.application import (
    ApplicationMessageResponse,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplyRequest,
    MyApplicationItem,
)

router = APIRouter(prefix="/applications", tags=["applications"])

application_service = ApplicationService()


@router.post("/", response_model=ApplicationMessageResponse)
@limiter.limit(RATE_APPLY)
async def apply_for_job(
    request: Request,
    data: ApplyRequest,
    current_user: User = Depends(require_role(UserRole.JOBSEEKER, "apply for a job")),
    db: AsyncSession = Depends(get_db),
):
    """Apply to an active job with the resume on the caller's profile."""
    application = await application_service.apply_for_job(db, current_user, data.job_id)
    return ApplicationMessageResponse(
        message="Applied for job successfully",
        application=ApplicationResponse.model_validate(application),
    )


@router.get("/me", response_model=List[MyApplicationItem])
async def list_my_applications(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """The caller's applications with a summary of each job."""
    return await application_service.list_my_applications(db, current_user)


@router.put("/{application_id}", response_model=ApplicationMessageResponse)
async def update_application_status(
    data: ApplicationStatusUpdate,
    background_tasks: BackgroundTasks,
    application_id: int = Path(..., gt=0, le=INT32_MAX),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    publisher: NotificationPublisher = Depends(get_publisher),
):
    """
    Change an application's status and email the applicant.

    The email is queued after the response; a broker failure is only logged.
    """
    application, job_title = await application_service.update_status(
        db, current_user, application_id, data.status
    )
    background_tasks.add_task(
        publisher.notify_application_status,
        application.applicant_email,
        job_title,
    )
    return ApplicationMessageResponse(
        message="Application updated",
        application=ApplicationResponse.model_validate(application),
    )
