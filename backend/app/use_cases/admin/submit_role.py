from ...crud.role import RoleStore
from ...domain.entities import Role, RoleDraft


def submit_role(
    role_store: RoleStore,
    draft: RoleDraft,
    editing_id: int | None = None,
) -> Role:
    if editing_id is None:
        return role_store.add(draft)

    role = Role.from_draft(editing_id, draft)
    role_store.update(role)
    return role
