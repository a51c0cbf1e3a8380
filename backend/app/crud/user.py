from __future__ import annotations

from app.crud.base import InMemoryStore
from app.domain.entities import User, UserDraft


class UserStore(InMemoryStore[User]):
    entity_name = "user"

    def add(self, draft: UserDraft) -> User:
        """Append a user built from the draft. Emails are not checked for uniqueness."""
        return self._insert(lambda user_id: User.from_draft(user_id, draft))

    def count_with_role(self, role_name: str) -> int:
        return sum(1 for user in self._records if user.role == role_name)
