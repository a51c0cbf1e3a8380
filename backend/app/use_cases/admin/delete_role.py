import logging

from ...crud.role import RoleStore
from ...crud.user import UserStore

logger = logging.getLogger(__name__)


def delete_role(role_store: RoleStore, user_store: UserStore, role_id: int) -> None:
    """
    Delete a role without touching the users that name it.

    ``User.role`` is free text, so users keep the deleted role's name. The
    dangling references are only reported in the log.
    """
    role = role_store.get(role_id)
    role_store.delete(role_id)
    if role is None or role.name in role_store.names():
        return

    referencing = user_store.count_with_role(role.name)
    if referencing:
        logger.warning(
            "dangling_role_reference role=%s role_id=%s users=%s",
            role.name,
            role_id,
            referencing,
        )
