"""
Job schemas.
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from app.schemas.base import INT32_MAX, BaseSchema


class JobCreate(BaseSchema):
    """Job creation request body."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    salary: int = Field(..., gt=0, le=INT32_MAX)
    location: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    job_type: Optional[str] = Field(None, max_length=50)
    work_location: Optional[str] = Field(None, max_length=50)
    company_id: int = Field(..., gt=0, le=INT32_MAX)
    openings: int = Field(..., gt=0, le=INT32_MAX)


class JobUpdate(BaseSchema):
    """Job update request body. Only the fields sent are changed."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, gt=0, le=INT32_MAX)
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    role: Optional[str] = Field(None, min_length=1, max_length=255)
    job_type: Optional[str] = Field(None, max_length=50)
    work_location: Optional[str] = Field(None, max_length=50)
    openings: Optional[int] = Field(None, ge=0, le=INT32_MAX)
    is_active: Optional[bool] = None


class JobResponse(BaseSchema):
    """Job row."""

    job_id: int
    title: str
    description: str
    salary: int
    location: str
    role: str
    job_type: Optional[str] = None
    work_location: Optional[str] = None
    company_id: int
    posted_by_recruiter_id: int
    openings: int
    is_active: bool
    created_at: datetime


class JobListItem(JobResponse):
    """Job in search results, with its company's name and logo."""

    company_name: str
    company_logo: Optional[str] = None


class JobMessageResponse(BaseSchema):
    message: str
    job: JobResponse
