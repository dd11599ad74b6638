"""
Notification publisher - pushes email requests onto the mail topic.

The mail consumer is a separate service. Publishing is best-effort: it runs
as a background task after the response and a failure is logged, never
raised, so it can't undo or fail the change that triggered it.
"""
from typing import Any, Dict

from celery import Celery
from fastapi import Request

from app.core.config import settings
from app.core.logging import get_logger
from app.services.email_templates import application_status_update_template

logger = get_logger(__name__)

APPLICATION_UPDATE_SUBJECT = "Application Update - Job portal"


class NotificationPublisher:
    """Publishes ``{to, subject, html}`` messages to a broker topic."""

    def __init__(self, celery_app: Celery, task_name: str = settings.mail_task_name):
        self.celery_app = celery_app
        self.task_name = task_name

    def publish(self, topic: str, payload: Dict[str, Any]) -> bool:
        """Send one message; returns False instead of raising on failure."""
        try:
            self.celery_app.send_task(
                self.task_name,
                kwargs=payload,
                queue=topic,
                retry=False,
            )
        except Exception as exc:
            logger.warning(
                "notification_publish_failed",
                topic=topic,
                to=payload.get("to"),
                exc_type=type(exc).__name__,
                exc_message=str(exc),
            )
            return False

        logger.info("notification_published", topic=topic, to=payload.get("to"))
        return True

    def notify_application_status(self, to: str, job_title: str) -> bool:
        return self.publish(
            settings.mail_topic,
            {
                "to": to,
                "subject": APPLICATION_UPDATE_SUBJECT,
                "html": application_status_update_template(job_title),
            },
        )


def get_publisher(request: Request) -> NotificationPublisher:
    """FastAPI dependency: the publisher created at startup."""
    return request.app.state.publisher
