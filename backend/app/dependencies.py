from fastapi import Depends, Request

from .admin.state import AdminState
from .crud.role import RoleStore
from .crud.user import UserStore
from .errors import InternalError


def get_admin_state(request: Request) -> AdminState:
    state = getattr(request.app.state, "admin", None)
    if state is None:
        raise InternalError("Admin state is not initialized")
    return state


def get_user_store(state: AdminState = Depends(get_admin_state)) -> UserStore:
    return state.users


def get_role_store(state: AdminState = Depends(get_admin_state)) -> RoleStore:
    return state.roles
