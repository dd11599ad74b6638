"""
Job model - a posting that belongs to a company.
"""
from typing import TYPE_CHECKING, Optional, List
from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel, TimestampMixin

if TYPE_CHECKING:
    from app.models.company import Company
    from app.models.application import Application


class Job(BaseModel, TimestampMixin):
    """
    Job posting entity.

    ``posted_by_recruiter_id`` always equals the owning company's recruiter;
    it is denormalised so ownership checks need a single lookup.
    """

    __tablename__ = "jobs"

    job_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    company_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("companies.company_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    posted_by_recruiter_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Core fields
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[int] = mapped_column(Integer, nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    job_type: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )  # 'Full-time', 'Part-time', 'Contract', 'Internship'
    work_location: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )  # 'On-site', 'Remote', 'Hybrid'
    openings: Mapped[int] = mapped_column(Integer, nullable=False)

    # Status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    # Relationships
    company: Mapped["Company"] = relationship("Company", back_populates="jobs")
    applications: Mapped[List["Application"]] = relationship(
        "Application",
        back_populates="job",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Job {self.title} at {self.company_id}>"
