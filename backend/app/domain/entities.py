"""
Domain records and drafts for the admin panel.

Records (``User``, ``Role``) are what the stores hold. Drafts (``UserDraft``,
``RoleDraft``) are the uncommitted copies a form edits; they carry no
identifier and only reach a store on submission. All of them are immutable
value objects: an edit produces a new instance.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from app.admin.permissions import (
    DEFAULT_USER_ROLE,
    Permission,
    UserStatus,
    parse_permission,
)


def normalize_permissions(permissions) -> tuple[Permission, ...]:
    """Deduplicate while keeping first-seen order."""
    ordered: list[Permission] = []
    for value in permissions:
        permission = parse_permission(value)
        if permission not in ordered:
            ordered.append(permission)
    return tuple(ordered)


@dataclass(frozen=True)
class UserDraft:
    name: str = ""
    email: str = ""
    role: str = DEFAULT_USER_ROLE
    status: UserStatus = UserStatus.ACTIVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", UserStatus(self.status))


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    role: str
    status: UserStatus

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", UserStatus(self.status))

    @classmethod
    def from_draft(cls, user_id: int, draft: UserDraft) -> "User":
        return cls(
            id=user_id,
            name=draft.name,
            email=draft.email,
            role=draft.role,
            status=draft.status,
        )

    def to_draft(self) -> UserDraft:
        return UserDraft(
            name=self.name,
            email=self.email,
            role=self.role,
            status=self.status,
        )


@dataclass(frozen=True)
class RoleDraft:
    name: str = ""
    permissions: tuple[Permission, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "permissions", normalize_permissions(self.permissions))


@dataclass(frozen=True)
class Role:
    id: int
    name: str
    permissions: tuple[Permission, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "permissions", normalize_permissions(self.permissions))

    @classmethod
    def from_draft(cls, role_id: int, draft: RoleDraft) -> "Role":
        return cls(id=role_id, name=draft.name, permissions=draft.permissions)

    def to_draft(self) -> RoleDraft:
        return RoleDraft(name=self.name, permissions=self.permissions)
