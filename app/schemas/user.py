"""
User profile and skill schemas.
"""
from datetime import datetime
from typing import Optional, List
from pydantic import Field
from app.schemas.base import BaseSchema


class UserProfileResponse(BaseSchema):
    """Full user profile with skill names."""

    user_id: int
    name: str
    email: str
    phone_number: Optional[str] = None
    role: str
    bio: Optional[str] = None
    resume: Optional[str] = None
    resume_public_id: Optional[str] = None
    profile_pic: Optional[str] = None
    profile_pic_public_id: Optional[str] = None
    subscription: Optional[datetime] = None
    skills: List[str] = []


class UserUpdate(BaseSchema):
    """Profile update. Missing or empty values keep the current value."""

    name: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=20)
    bio: Optional[str] = None


class UserSummary(BaseSchema):
    """Subset of the user row returned after an update."""

    user_id: int
    name: str
    email: str
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_pic: Optional[str] = None
    resume: Optional[str] = None


class UserMessageResponse(BaseSchema):
    message: str
    user: UserSummary


class SkillRequest(BaseSchema):
    skill_name: str = Field(..., max_length=100)
