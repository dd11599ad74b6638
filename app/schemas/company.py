"""
Company schemas.

Creation arrives as multipart form data (fields + logo file), so there is no
request model here; see ``app.api.routes.companies``.
"""
from datetime import datetime
from typing import List

from app.schemas.base import BaseSchema
from app.schemas.job import JobResponse


class CompanyResponse(BaseSchema):
    """Company row."""

    company_id: int
    name: str
    description: str
    website: str
    logo: str
    logo_public_id: str
    recruiter_id: int
    created_at: datetime


class CompanyDetail(CompanyResponse):
    """Company with all of its jobs (empty list when it has none)."""

    jobs: List[JobResponse] = []


class CompanyCreatedResponse(BaseSchema):
    message: str
    company: CompanyResponse
