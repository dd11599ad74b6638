"""
User model - recruiters and jobseekers.
"""
import enum
from datetime import datetime
from typing import TYPE_CHECKING, Optional, List
from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel, TimestampMixin

if TYPE_CHECKING:
    from app.models.skill import Skill
    from app.models.company import Company


class UserRole(str, enum.Enum):
    RECRUITER = "recruiter"
    JOBSEEKER = "jobseeker"


class User(BaseModel, TimestampMixin):
    """
    User entity.

    Accounts are created by the auth service; this service reads the identity
    and owns the profile fields (bio, resume, profile picture, skills).
    """

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Identity
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    phone_number: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)  # UserRole value

    # Profile
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resume: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    resume_public_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    profile_pic: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    profile_pic_public_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Paid plan expiry; null means never subscribed
    subscription: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # Relationships
    skills: Mapped[List["Skill"]] = relationship(
        "Skill",
        secondary="user_skills",
        order_by="Skill.name",
        viewonly=True,
    )
    companies: Mapped[List["Company"]] = relationship(
        "Company",
        back_populates="recruiter",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User {self.email}>"
