"""
Ownership checks shared by the service layer.

Role checks live in ``app.api.deps.require_role`` because they only need the
caller; ownership needs the looked-up row, so it runs inside services.
"""
from typing import Optional, TypeVar

from app.core.exceptions import APIException, ForbiddenException

T = TypeVar("T")


def require_ownership(
    resource: Optional[T],
    owner_field: str,
    owner_id: int,
    *,
    not_found: APIException,
    forbidden: Optional[APIException] = None,
) -> T:
    """
    Return ``resource`` if ``owner_id`` owns it.

    Raises ``not_found`` for a missing row and ``forbidden`` (a plain 403 by
    default) when ``resource.<owner_field>`` belongs to someone else. Pass the
    not-found error as ``forbidden`` to hide the existence of other users'
    rows.
    """
    if resource is None:
        raise not_found
    if getattr(resource, owner_field) != owner_id:
        raise forbidden if forbidden is not None else ForbiddenException()
    return resource
