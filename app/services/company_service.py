"""
Company service - business logic for recruiter-owned companies.

Routes only resolve the caller and parse the request; every rule about who may
create, see or delete a company lives here.
"""
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    BadRequestException,
    CompanyNameExistsException,
    CompanyNotFoundException,
)
from app.core.logging import get_logger
from app.core.permissions import require_ownership
from app.models.company import Company
from app.models.user import User
from app.repositories.company_repository import CompanyRepository
from app.services.upload_service import UploadClient, file_to_buffer

logger = get_logger(__name__)


class CompanyService:
    """Handles company creation, lookup and deletion."""

    def __init__(self):
        self.company_repo = CompanyRepository()

    async def create_company(
        self,
        db: AsyncSession,
        user: User,
        *,
        name: str,
        description: str,
        website: str,
        logo: Optional[UploadFile],
        uploader: UploadClient,
    ) -> Company:
        """
        Create a company owned by ``user`` with an uploaded logo.

        Raises:
            CompanyNameExistsException: If the name is taken, checked up front and
                again by the unique constraint on insert.
            BadRequestException: If no logo file was sent.
            InternalServerException: If the logo could not be read.
        """
        if await self.company_repo.name_exists(db, name):
            raise CompanyNameExistsException(name)

        if logo is None:
            raise BadRequestException("Company Logo file is required")

        buffer = await file_to_buffer(logo)
        uploaded = await uploader.upload(buffer)

        try:
            company = await self.company_repo.create(
                db,
                name=name,
                description=description,
                website=website,
                logo=uploaded.url,
                logo_public_id=uploaded.public_id,
                recruiter_id=user.user_id,
            )
            await db.commit()
        except IntegrityError:
            # Lost a race for the name after the existence check
            await db.rollback()
            logger.warning(
                "company_name_conflict",
                name=name,
                orphaned_logo_public_id=uploaded.public_id,
            )
            raise CompanyNameExistsException(name)

        logger.info("company_created", company_id=company.company_id, recruiter_id=user.user_id)
        return company

    async def delete_company(
        self,
        db: AsyncSession,
        user: User,
        company_id: int,
    ) -> None:
        """
        Delete a company and, through the foreign key cascade, its jobs.

        A company owned by someone else is reported exactly like a missing one.
        """
        not_found = CompanyNotFoundException(
            "Company not found or you're not authorized to delete it."
        )
        company = await self.company_repo.get_by_id(db, company_id)
        require_ownership(
            company,
            "recruiter_id",
            user.user_id,
            not_found=not_found,
            forbidden=not_found,
        )

        await self.company_repo.delete(db, company_id)
        await db.commit()

        logger.info("company_deleted", company_id=company_id, recruiter_id=user.user_id)

    async def list_my_companies(
        self,
        db: AsyncSession,
        user: User,
    ) -> List[Company]:
        return await self.company_repo.list_by_recruiter(db, user.user_id)

    async def get_company_details(
        self,
        db: AsyncSession,
        company_id: int,
    ) -> Company:
        """
        Get a company with all of its jobs.

        Raises:
            CompanyNotFoundException: If the company doesn't exist.
        """
        company = await self.company_repo.get_with_jobs(db, company_id)
        if not company:
            raise CompanyNotFoundException()
        return company
