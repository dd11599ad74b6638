"""
Application schemas.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from app.models.application import ApplicationStatus
from app.schemas.base import INT32_MAX, BaseSchema


class ApplyRequest(BaseSchema):
    job_id: int = Field(..., gt=0, le=INT32_MAX)


class ApplicationStatusUpdate(BaseSchema):
    status: ApplicationStatus


class ApplicationResponse(BaseSchema):
    """Application row."""

    application_id: int
    job_id: int
    applicant_id: int
    applicant_email: str
    resume: Optional[str] = None
    status: str
    subscribed: bool
    applied_at: datetime


class MyApplicationItem(ApplicationResponse):
    """Applicant's view, with a summary of the job."""

    job_title: str
    job_salary: int
    job_location: str


class ApplicationMessageResponse(BaseSchema):
    message: str
    application: ApplicationResponse
