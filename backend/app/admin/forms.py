"""
Form sessions modelling the add/edit dialogs.

A session is either closed or holds a staged draft, plus the identifier of
the record it was opened from when editing. Field edits go through the pure
draft functions; only ``submit`` touches a store.
"""
from __future__ import annotations

from typing import Generic, TypeVar

from app.admin.permissions import Permission
from app.crud.role import RoleStore
from app.crud.user import UserStore
from app.domain import drafts
from app.domain.entities import Role, RoleDraft, User, UserDraft
from app.errors import NotFoundError, ValidationError
from app.use_cases.admin.submit_role import submit_role
from app.use_cases.admin.submit_user import submit_user

DraftT = TypeVar("DraftT", UserDraft, RoleDraft)


class _FormSession(Generic[DraftT]):
    entity_name = "record"

    def __init__(self) -> None:
        self.draft: DraftT | None = None
        self.editing_id: int | None = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def _require_draft(self) -> DraftT:
        if self.draft is None:
            raise ValidationError(f"No {self.entity_name} form is open")
        return self.draft

    def _open(self, store, record_id: int | None, blank: DraftT) -> DraftT:
        if record_id is None:
            self.draft = blank
            self.editing_id = None
            return self.draft

        record = store.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.entity_name.capitalize()} not found")
        self.draft = record.to_draft()
        self.editing_id = record.id
        return self.draft

    def close(self) -> None:
        self.draft = None
        self.editing_id = None


class UserFormSession(_FormSession[UserDraft]):
    entity_name = "user"

    def __init__(self, user_store: UserStore) -> None:
        super().__init__()
        self._store = user_store

    def open(self, user_id: int | None = None) -> UserDraft:
        return self._open(self._store, user_id, UserDraft())

    def change(self, **fields) -> UserDraft:
        self.draft = drafts.edit_user_draft(self._require_draft(), **fields)
        return self.draft

    def submit(self) -> User:
        user = submit_user(self._store, self._require_draft(), self.editing_id)
        self.close()
        return user


class RoleFormSession(_FormSession[RoleDraft]):
    entity_name = "role"

    def __init__(self, role_store: RoleStore) -> None:
        super().__init__()
        self._store = role_store

    def open(self, role_id: int | None = None) -> RoleDraft:
        return self._open(self._store, role_id, RoleDraft())

    def change(self, **fields) -> RoleDraft:
        self.draft = drafts.edit_role_draft(self._require_draft(), **fields)
        return self.draft

    def toggle_permission(self, permission: str | Permission) -> RoleDraft:
        self.draft = self._store.toggle_permission(self._require_draft(), permission)
        return self.draft

    def submit(self) -> Role:
        role = submit_role(self._store, self._require_draft(), self.editing_id)
        self.close()
        return role
