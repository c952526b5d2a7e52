# storefront/domain/permissions.py
from enum import Enum
from typing import Iterable

from storefront.domain.errors import AuthenticationRequired, AuthorizationDenied


class Permission(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"
    ITEMCREATE = "ITEMCREATE"
    ITEMUPDATE = "ITEMUPDATE"
    ITEMDELETE = "ITEMDELETE"
    PERMISSIONUPDATE = "PERMISSIONUPDATE"


def _tags(permissions: Iterable) -> set[str]:
    return {p.value if isinstance(p, Permission) else str(p) for p in permissions or ()}


def permissions_intersect(held: Iterable, required: Iterable) -> bool:
    return bool(_tags(held) & _tags(required))


def has_permission(user, required: Iterable) -> None:
    """Rzuca AuthorizationDenied jesli user nie ma zadnego z wymaganych uprawnien."""
    required = sorted(_tags(required))
    held = sorted(_tags(user.permissions))
    if not permissions_intersect(held, required):
        raise AuthorizationDenied(
            f"You do not have sufficient permissions: {required}. You have: {held}"
        )


def require_viewer(viewer, message: str = "You must be logged in!"):
    if viewer is None:
        raise AuthenticationRequired(message)
    return viewer
