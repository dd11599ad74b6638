"""Core module exports."""
from app.core.config import settings, get_settings
from app.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from app.core.security import create_access_token, decode_token, user_id_from_token, verify_token_type
from app.core.permissions import require_ownership
from app.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
    InvalidTokenException,
    UserNotFoundException,
    JobNotFoundException,
    CompanyNotFoundException,
    ApplicationNotFoundException,
    SkillNotFoundException,
    CompanyNameExistsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "create_access_token",
    "decode_token",
    "verify_token_type",
    "user_id_from_token",
    "require_ownership",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "InvalidTokenException",
    "UserNotFoundException",
    "JobNotFoundException",
    "CompanyNotFoundException",
    "ApplicationNotFoundException",
    "SkillNotFoundException",
    "CompanyNameExistsException",
]
