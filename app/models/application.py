"""
Application model - a jobseeker's application to a job.
"""
import enum
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import BaseModel, utcnow

if TYPE_CHECKING:
    from app.models.job import Job


class ApplicationStatus(str, enum.Enum):
    SUBMITTED = "Submitted"
    REVIEWED = "Reviewed"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class Application(BaseModel):
    """
    Application entity.

    Email, resume and ``subscribed`` are snapshots taken at apply time, so later
    profile changes don't alter what the recruiter sees.
    """

    __tablename__ = "applications"

    application_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    job_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("jobs.job_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    applicant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    applicant_email: Mapped[str] = mapped_column(String(255), nullable=False)
    resume: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20),
        default=ApplicationStatus.SUBMITTED.value,
        nullable=False,
    )
    subscribed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    job: Mapped["Job"] = relationship("Job", back_populates="applications")

    def __repr__(self) -> str:
        return f"<Application {self.application_id} job_id={self.job_id}>"
