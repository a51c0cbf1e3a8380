from __future__ import annotations

from app.admin.permissions import Permission
from app.crud.base import InMemoryStore
from app.domain import drafts
from app.domain.entities import Role, RoleDraft


class RoleStore(InMemoryStore[Role]):
    entity_name = "role"

    def add(self, draft: RoleDraft) -> Role:
        """Append a role built from the draft. Names may repeat and permissions may be empty."""
        return self._insert(lambda role_id: Role.from_draft(role_id, draft))

    def names(self) -> list[str]:
        return [role.name for role in self._records]

    @staticmethod
    def toggle_permission(draft: RoleDraft, permission: str | Permission) -> RoleDraft:
        return drafts.toggle_permission(draft, permission)
