from __future__ import annotations

import logging
from dataclasses import dataclass

from app.admin.seed import default_roles, default_users
from app.crud.role import RoleStore
from app.crud.user import UserStore
from app.domain.ids import build_id_allocator

logger = logging.getLogger(__name__)


@dataclass
class AdminState:
    users: UserStore
    roles: RoleStore


def build_admin_state(*, seed_demo_data: bool = True, id_strategy: str = "sequence") -> AdminState:
    """Create fresh stores, each with its own identifier allocator."""
    users = default_users() if seed_demo_data else []
    roles = default_roles() if seed_demo_data else []
    state = AdminState(
        users=UserStore(users, id_allocator=build_id_allocator(id_strategy)),
        roles=RoleStore(roles, id_allocator=build_id_allocator(id_strategy)),
    )
    logger.info(
        "Admin state ready users=%s roles=%s id_strategy=%s",
        len(state.users),
        len(state.roles),
        id_strategy,
    )
    return state
