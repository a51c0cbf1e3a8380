"""
Pure update functions over drafts.

Every function takes a draft and returns a new one; the input is never
modified and no store is touched.
"""
from __future__ import annotations

from dataclasses import replace

from app.admin.permissions import Permission, parse_permission
from app.domain.entities import RoleDraft, UserDraft

USER_DRAFT_FIELDS = frozenset({"name", "email", "role", "status"})
ROLE_DRAFT_FIELDS = frozenset({"name", "permissions"})


def _check_fields(changes: dict, allowed: frozenset[str], kind: str) -> None:
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Unknown {kind} draft field(s): {', '.join(sorted(unknown))}")


def edit_user_draft(draft: UserDraft, **changes) -> UserDraft:
    _check_fields(changes, USER_DRAFT_FIELDS, "user")
    return replace(draft, **changes)


def edit_role_draft(draft: RoleDraft, **changes) -> RoleDraft:
    _check_fields(changes, ROLE_DRAFT_FIELDS, "role")
    return replace(draft, **changes)


def toggle_permission(draft: RoleDraft, permission: str | Permission) -> RoleDraft:
    """Add the permission if absent (appended last), remove it if present."""
    permission = parse_permission(permission)
    if permission in draft.permissions:
        permissions = tuple(p for p in draft.permissions if p != permission)
    else:
        permissions = draft.permissions + (permission,)
    return replace(draft, permissions=permissions)
