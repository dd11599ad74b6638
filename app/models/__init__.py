"""
Database models for the job board.

Primary keys are integers; timestamps are timezone-aware.
"""
from app.models.base import BaseModel, TimestampMixin
from app.models.user import User, UserRole
from app.models.company import Company
from app.models.job import Job
from app.models.application import Application, ApplicationStatus
from app.models.skill import Skill, UserSkill

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "User",
    "UserRole",
    "Company",
    "Job",
    "Application",
    "ApplicationStatus",
    "Skill",
    "UserSkill",
]
