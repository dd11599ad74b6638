"""
Rate limiting configuration using slowapi.

Storage defaults to in-process memory; point RATE_LIMIT_STORAGE_URI at Redis
to share limits across workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import settings


def _get_user_or_ip(request: Request) -> str:
    """
    Rate-limit key: authenticated user ID if available, otherwise client IP.
    """
    # Set by the get_current_user dependency
    user = getattr(request.state, "current_user", None)
    if user is not None and getattr(user, "user_id", None) is not None:
        return f"user:{user.user_id}"
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_UPLOAD)
RATE_UPLOAD = "20/hour"          # logo, profile picture, resume uploads
RATE_APPLY = "30/hour"           # job applications
