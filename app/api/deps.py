"""
API dependencies for dependency injection.

Every protected route resolves the caller with ``get_current_user``; role
restricted routes compose ``require_role`` on top of it. Both run before the
route body, so no handler reaches the database unauthenticated.
"""
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import user_id_from_token
from app.core.exceptions import (
    UnauthorizedException,
    InvalidTokenException,
    ForbiddenException,
)
from app.models.user import User, UserRole
from app.repositories.user_repository import UserRepository


# Security scheme
security = HTTPBearer(auto_error=False)

user_repo = UserRepository()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the current authenticated user.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If the token is invalid, expired or names no user
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    user_id = user_id_from_token(credentials.credentials)
    if user_id is None:
        raise InvalidTokenException()

    user = await user_repo.get_by_id(db, user_id)
    if not user:
        raise InvalidTokenException()

    # Rate-limit key
    request.state.current_user = user
    return user


def require_role(role: UserRole, action: str) -> Callable:
    """
    Build a dependency that admits only users with ``role``.

    Usage:
        user: User = Depends(require_role(UserRole.RECRUITER, "create a job"))
    """

    async def _dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role.value:
            raise ForbiddenException(f"Forbidden: Only {role.value} can {action}")
        return current_user

    return _dependency
