"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and handle cross-cutting concerns.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from app.services.company_service import CompanyService
from app.services.job_service import JobService
from app.services.application_service import ApplicationService
from app.services.user_service import UserService
from app.services.upload_service import UploadClient
from app.services.notification_service import NotificationPublisher

__all__ = [
    "CompanyService",
    "JobService",
    "ApplicationService",
    "UserService",
    "UploadClient",
    "NotificationPublisher",
]
