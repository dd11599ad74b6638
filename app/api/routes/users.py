"""
User routes.

Thin controllers - all business logic lives in UserService.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.rate_limit import limiter, RATE_UPLOAD
from app.api.deps import get_current_user
from app.models.user import User
from app.services.upload_service import UploadClient, get_upload_client
from app.services.user_service import UserService
from app.schemas.user import (
    SkillRequest,
    UserMessageResponse,
    UserProfileResponse,
    UserSummary,
    UserUpdate,
)
from app.schemas.base import INT32_MAX, MessageResponse

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()


@router.get("/me", response_model=UserProfileResponse)
async def my_profile(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get current user's profile with skills."""
    return await user_service.get_profile(db, current_user.user_id)


@router.put("/me", response_model=UserMessageResponse)
async def update_my_profile(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update current user's name, phone number or bio."""
    user = await user_service.update_profile(
        db,
        current_user,
        name=data.name,
        phone_number=data.phone_number,
        bio=data.bio,
    )
    return UserMessageResponse(
        message="Profile Updated successfully",
        user=UserSummary.model_validate(user),
    )


@router.put("/me/profile-pic", response_model=UserMessageResponse)
@limiter.limit(RATE_UPLOAD)
async def update_profile_pic(
    request: Request,
    file: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    uploader: UploadClient = Depends(get_upload_client),
):
    """Replace the current user's profile picture."""
    user = await user_service.update_profile_pic(db, current_user, file, uploader)
    return UserMessageResponse(
        message="profile pic updated",
        user=UserSummary.model_validate(user),
    )


@router.put("/me/resume", response_model=UserMessageResponse)
@limiter.limit(RATE_UPLOAD)
async def update_resume(
    request: Request,
    file: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    uploader: UploadClient = Depends(get_upload_client),
):
    """Replace the current user's resume."""
    user = await user_service.update_resume(db, current_user, file, uploader)
    return UserMessageResponse(
        message="Resume updated",
        user=UserSummary.model_validate(user),
    )


# ── Skills ────────────────────────────────────────────────────────────────────

@router.post("/me/skills", response_model=MessageResponse)
async def add_skill(
    req: SkillRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Add a skill to the current user. Adding a held skill is a no-op."""
    message = await user_service.add_skill(db, current_user.user_id, req.skill_name)
    return MessageResponse(message=message)


@router.delete("/me/skills", response_model=MessageResponse)
async def remove_skill(
    req: SkillRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Remove a skill from the current user."""
    message = await user_service.remove_skill(db, current_user.user_id, req.skill_name)
    return MessageResponse(message=message)


# ── Public profile ───────────────────────────────────────────────────────────

@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: int = Path(..., gt=0, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    """Get any user's public profile with skills."""
    return await user_service.get_profile(db, user_id)
