"""
Broker integration (producer side only).
"""
from app.workers.celery_app import celery_app

__all__ = ["celery_app"]
