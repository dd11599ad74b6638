"""
Company model - employers owned by a recruiter.
"""
from typing import TYPE_CHECKING, List
from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel, TimestampMixin

if TYPE_CHECKING:
    from app.models.job import Job
    from app.models.user import User


class Company(BaseModel, TimestampMixin):
    """
    Company entity.

    The logo url and its upload public id are always written together so the
    asset can be replaced or deleted later.
    """

    __tablename__ = "companies"

    company_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    website: Mapped[str] = mapped_column(Text, nullable=False)
    logo: Mapped[str] = mapped_column(Text, nullable=False)
    logo_public_id: Mapped[str] = mapped_column(String(255), nullable=False)

    recruiter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    recruiter: Mapped["User"] = relationship("User", back_populates="companies")
    jobs: Mapped[List["Job"]] = relationship(
        "Job",
        back_populates="company",
        order_by="Job.created_at.desc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Company {self.name}>"
