"""
Upload service response schema.
"""
from app.schemas.base import BaseSchema


class UploadResult(BaseSchema):
    """The upload service always returns both; they are stored together."""

    url: str
    public_id: str
