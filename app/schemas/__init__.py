"""
Pydantic schemas for API validation and serialization.
"""
from app.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
)
from app.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    JobListItem,
    JobMessageResponse,
)
from app.schemas.company import (
    CompanyResponse,
    CompanyDetail,
    CompanyCreatedResponse,
)
from app.schemas.application import (
    ApplyRequest,
    ApplicationStatusUpdate,
    ApplicationResponse,
    MyApplicationItem,
    ApplicationMessageResponse,
)
from app.schemas.user import (
    UserProfileResponse,
    UserUpdate,
    UserSummary,
    UserMessageResponse,
    SkillRequest,
)
from app.schemas.upload import UploadResult

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "JobListItem",
    "JobMessageResponse",
    # Company
    "CompanyResponse",
    "CompanyDetail",
    "CompanyCreatedResponse",
    # Application
    "ApplyRequest",
    "ApplicationStatusUpdate",
    "ApplicationResponse",
    "MyApplicationItem",
    "ApplicationMessageResponse",
    # User
    "UserProfileResponse",
    "UserUpdate",
    "UserSummary",
    "UserMessageResponse",
    "SkillRequest",
    # Upload
    "UploadResult",
]
