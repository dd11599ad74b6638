"""
Base schemas and common response models.
"""
from pydantic import BaseModel, ConfigDict

# Ids and counters are PostgreSQL INTEGER (int4) columns
INT32_MAX = 2**31 - 1


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class ErrorResponse(BaseSchema):
    """Error response format."""

    error: str
    message: str
