"""
Permission vocabulary and user status values.

The vocabulary is closed: a role can only carry labels defined here.
Roles themselves are data held in the role store, so there is no
role-to-permission mapping in this module.

NOTE: Permissions are labels only. Nothing in the service enforces them.
"""
from __future__ import annotations

from enum import Enum
from typing import Final


class Permission(str, Enum):
    """Capability labels assignable to a role."""
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    MANAGE_USERS = "manage_users"
    MANAGE_ROLES = "manage_roles"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


# Canonical order, as shown on the role checklist
ALL_PERMISSIONS: Final[tuple[Permission, ...]] = tuple(Permission)

ALL_STATUSES: Final[tuple[UserStatus, ...]] = tuple(UserStatus)

# Role preselected on a new user draft
DEFAULT_USER_ROLE: Final[str] = "intern"


def parse_permission(value: str | Permission) -> Permission:
    """Resolve a label to a vocabulary member.

    Raises:
        ValueError: If the label is not part of the vocabulary
    """
    if isinstance(value, Permission):
        return value
    try:
        return Permission(value)
    except ValueError:
        raise ValueError(
            f"Unknown permission '{value}'. "
            f"Must be one of: {', '.join(p.value for p in ALL_PERMISSIONS)}"
        ) from None
