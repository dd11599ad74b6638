"""
Company routes.

Thin controllers - CompanyService owns the ownership rules and the logo upload.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.rate_limit import limiter, RATE_UPLOAD
from app.api.deps import get_current_user, require_role
from app.models.user import User, UserRole
from app.services.company_service import CompanyService
from app.services.upload_service import UploadClient, get_upload_client
from app.schemas.company import CompanyCreatedResponse, CompanyDetail, CompanyResponse
from app.schemas.base import INT32_MAX, MessageResponse

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.post("/", response_model=CompanyCreatedResponse)
@limiter.limit(RATE_UPLOAD)
async def create_company(
    request: Request,
    name: str = Form(..., min_length=1, max_length=255),
    description: str = Form(..., min_length=1),
    website: str = Form(..., min_length=1),
    file: Optional[UploadFile] = File(None, description="Company logo"),
    current_user: User = Depends(require_role(UserRole.RECRUITER, "create a company")),
    db: AsyncSession = Depends(get_db),
    uploader: UploadClient = Depends(get_upload_client),
):
    """Create a company owned by the calling recruiter."""
    company = await company_service.create_company(
        db,
        current_user,
        name=name,
        description=description,
        website=website,
        logo=file,
        uploader=uploader,
    )
    return CompanyCreatedResponse(
        message="Company created successfully",
        company=CompanyResponse.model_validate(company),
    )


@router.get("/", response_model=List[CompanyResponse])
async def list_my_companies(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List the companies owned by the caller."""
    return await company_service.list_my_companies(db, current_user)


@router.get("/{company_id}", response_model=CompanyDetail)
async def get_company_details(
    company_id: int = Path(..., gt=0, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    """Get a company with all of its jobs."""
    return await company_service.get_company_details(db, company_id)


@router.delete("/{company_id}", response_model=MessageResponse)
async def delete_company(
    company_id: int = Path(..., gt=0, le=INT32_MAX),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the caller's companies together with its jobs."""
    await company_service.delete_company(db, current_user, company_id)
    return MessageResponse(message="Company and all associated jobs have been deleted")
