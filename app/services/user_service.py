"""
User service - profile reads and updates, profile assets and skills.

This service owns ALL user profile operations. Routes never touch
the database directly - they call methods here.
"""
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    BadRequestException,
    SkillNotFoundException,
    UserNotFoundException,
)
from app.core.logging import get_logger
from app.models.user import User
from app.repositories.skill_repository import SkillRepository
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserProfileResponse
from app.services.upload_service import UploadClient, file_to_buffer

logger = get_logger(__name__)


class UserService:
    """Handles user profile operations."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.skill_repo = SkillRepository()

    async def get_profile(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> UserProfileResponse:
        """
        Get a user's profile with skill names (empty list when none).

        Raises:
            UserNotFoundException: If the user doesn't exist.
        """
        user = await self.user_repo.get_with_skills(db, user_id)
        if not user:
            raise UserNotFoundException()
        return self._to_profile(user)

    async def update_profile(
        self,
        db: AsyncSession,
        user: User,
        *,
        name: Optional[str] = None,
        phone_number: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> User:
        """Update profile fields; empty values keep what is stored."""
        user = await self.user_repo.update(
            db,
            user,
            name=name or user.name,
            phone_number=phone_number or user.phone_number,
            bio=bio or user.bio,
        )
        await db.commit()
        return user

    async def update_profile_pic(
        self,
        db: AsyncSession,
        user: User,
        file: Optional[UploadFile],
        uploader: UploadClient,
    ) -> User:
        """Upload a new profile picture, replacing the previous asset."""
        if file is None:
            raise BadRequestException("No image file provided")

        uploaded = await uploader.upload(
            await file_to_buffer(file),
            public_id=user.profile_pic_public_id,
        )
        user = await self.user_repo.update(
            db,
            user,
            profile_pic=uploaded.url,
            profile_pic_public_id=uploaded.public_id,
        )
        await db.commit()
        return user

    async def update_resume(
        self,
        db: AsyncSession,
        user: User,
        file: Optional[UploadFile],
        uploader: UploadClient,
    ) -> User:
        """Upload a new resume, replacing the previous asset."""
        if file is None:
            raise BadRequestException("No pdf file provided")

        uploaded = await uploader.upload(
            await file_to_buffer(file),
            public_id=user.resume_public_id,
        )
        user = await self.user_repo.update(
            db,
            user,
            resume=uploaded.url,
            resume_public_id=uploaded.public_id,
        )
        await db.commit()
        return user

    async def add_skill(
        self,
        db: AsyncSession,
        user_id: int,
        skill_name: str,
    ) -> str:
        """
        Attach a skill to the user, creating the skill if needed.

        Skill creation and linking commit together or not at all. Adding a
        skill the user already has is not an error.

        Returns:
            The response message.
        """
        name = self._clean_skill_name(skill_name)

        try:
            if not await self.user_repo.exists(db, user_id):
                raise UserNotFoundException("User not found.")

            skill_id = await self.skill_repo.upsert(db, name)
            added = await self.skill_repo.link_to_user(db, user_id, skill_id)

            await db.commit()
        except Exception:
            await db.rollback()
            raise

        if not added:
            return "User already possesses this skill"

        logger.info("skill_added", user_id=user_id, skill=name)
        return f"Skill {name} is added successfully"

    async def remove_skill(
        self,
        db: AsyncSession,
        user_id: int,
        skill_name: str,
    ) -> str:
        """
        Detach a skill from the user. The shared skill row is kept.

        Raises:
            SkillNotFoundException: If the user doesn't have the skill.
        """
        name = self._clean_skill_name(skill_name)

        removed = await self.skill_repo.unlink_from_user(db, user_id, name)
        if not removed:
            raise SkillNotFoundException(name)
        await db.commit()

        logger.info("skill_removed", user_id=user_id, skill=name)
        return f"Skill {name} was deleted successfully"

    @staticmethod
    def _clean_skill_name(skill_name: Optional[str]) -> str:
        name = (skill_name or "").strip()
        if not name:
            raise BadRequestException("Please provide a skill name")
        return name

    def _to_profile(self, user: User) -> UserProfileResponse:
        return UserProfileResponse(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            phone_number=user.phone_number,
            role=user.role,
            bio=user.bio,
            resume=user.resume,
            resume_public_id=user.resume_public_id,
            profile_pic=user.profile_pic,
            profile_pic_public_id=user.profile_pic_public_id,
            subscription=user.subscription,
            skills=[skill.name for skill in user.skills],
        )
