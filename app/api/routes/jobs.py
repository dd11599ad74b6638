"""
Job routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.api.deps import get_current_user, require_role
from app.models.user import User, UserRole
from app.services.application_service import ApplicationService
from app.services.job_service import JobService
from app.schemas.base import INT32_MAX
from app.schemas.application import ApplicationResponse
from app.schemas.job import (
    JobCreate,
    JobListItem,
    JobMessageResponse,
    JobResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()
application_service = ApplicationService()


@router.post("/", response_model=JobMessageResponse)
async def create_job(
    data: JobCreate,
    current_user: User = Depends(require_role(UserRole.RECRUITER, "create a job")),
    db: AsyncSession = Depends(get_db),
):
    """Post a job under one of the caller's companies."""
    job = await job_service.create_job(db, current_user, data)
    return JobMessageResponse(
        message="Job posted successfully",
        job=JobResponse.model_validate(job),
    )


@router.get("/", response_model=List[JobListItem])
async def search_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    location: Optional[str] = Query(None, description="Case-insensitive location substring"),
    db: AsyncSession = Depends(get_db),
):
    """
    List active jobs, newest first.
    """
    return await job_service.search_active_jobs(db, title=title, location=location)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int = Path(..., gt=0, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    """
    Get job details by ID.
    """
    return await job_service.get_job(db, job_id)


@router.put("/{job_id}", response_model=JobMessageResponse)
async def update_job(
    data: JobUpdate,
    job_id: int = Path(..., gt=0, le=INT32_MAX),
    current_user: User = Depends(require_role(UserRole.RECRUITER, "update a job")),
    db: AsyncSession = Depends(get_db),
):
    """Update a job the caller posted."""
    job = await job_service.update_job(db, current_user, job_id, data)
    return JobMessageResponse(
        message="Job updated successfully",
        job=JobResponse.model_validate(job),
    )


@router.get("/{job_id}/applications", response_model=List[ApplicationResponse])
async def list_applications_for_job(
    job_id: int = Path(..., gt=0, le=INT32_MAX),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Applications for one of the caller's jobs, subscribed applicants first."""
    return await application_service.list_applications_for_job(db, current_user, job_id)
