"""
Celery application used as a message producer.

This service never consumes: the mail worker lives in its own deployment and
listens on the mail topic. We only need the broker connection to send tasks.
"""
from celery import Celery

from app.core.config import settings

celery_app = Celery(
    "job_board",
    broker=settings.redis_url,
)

celery_app.conf.update(
    # Serialization
    task_serializer="json",
    accept_content=["json"],

    # Timezone
    timezone="UTC",
    enable_utc=True,

    # Fail fast instead of blocking a request thread on a dead broker
    broker_connection_timeout=5,
    broker_connection_retry=False,
    broker_connection_max_retries=0,

    # Fire-and-forget: results are never read
    task_ignore_result=True,
)
