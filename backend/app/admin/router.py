"""
Admin router for the users and roles panel.

Endpoints mirror the single admin page:
- Users tab: list, add, edit, delete
- Roles tab: list, add, edit, delete, permission checklist
- Form options: role selector values, statuses, permission vocabulary

All state is in memory. Updates and deletes of missing records succeed
silently with 204, matching the store semantics.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from app.admin.permissions import ALL_PERMISSIONS, ALL_STATUSES, Permission
from app.crud.role import RoleStore
from app.crud.user import UserStore
from app.dependencies import get_role_store, get_user_store
from app.domain.entities import RoleDraft, UserDraft
from app.errors import NotFoundError
from app.schemas.dashboard import DashboardRead, FormOptions
from app.schemas.role import (
    RoleCreate,
    RoleDraftPayload,
    RoleList,
    RoleRead,
    RoleUpdate,
    TogglePermissionRequest,
)
from app.schemas.user import UserCreate, UserDraftPayload, UserList, UserRead, UserUpdate
from app.use_cases.admin import delete_role, submit_role, submit_user

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
)


def _form_options(role_store: RoleStore) -> FormOptions:
    return FormOptions(
        roles=role_store.names(),
        statuses=list(ALL_STATUSES),
        permissions=list(ALL_PERMISSIONS),
    )


@router.get("/dashboard", response_model=DashboardRead)
async def get_dashboard(
    user_store: UserStore = Depends(get_user_store),
    role_store: RoleStore = Depends(get_role_store),
) -> DashboardRead:
    """Everything the admin page renders, in one payload."""
    return DashboardRead(
        users=[UserRead.model_validate(user) for user in user_store.list_all()],
        roles=[RoleRead.model_validate(role) for role in role_store.list_all()],
        options=_form_options(role_store),
    )


@router.get("/form-options", response_model=FormOptions)
async def get_form_options(
    role_store: RoleStore = Depends(get_role_store),
) -> FormOptions:
    return _form_options(role_store)


@router.get("/permissions", response_model=list[Permission])
async def list_permissions() -> list[Permission]:
    """Return the closed permission vocabulary in checklist order."""
    return list(ALL_PERMISSIONS)


# ============================================================================
# USERS
# ============================================================================


@router.get("/users", response_model=UserList)
async def list_users(
    user_store: UserStore = Depends(get_user_store),
) -> UserList:
    users = [UserRead.model_validate(user) for user in user_store.list_all()]
    return UserList(users=users, total=len(users))


@router.get("/users/draft", response_model=UserDraftPayload)
async def get_user_draft() -> UserDraftPayload:
    """Blank draft used by the "Add User" form."""
    draft = UserDraft()
    return UserDraftPayload(
        name=draft.name,
        email=draft.email,
        role=draft.role,
        status=draft.status,
    )


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    user_store: UserStore = Depends(get_user_store),
) -> UserRead:
    user = submit_user(user_store, request.to_draft())
    return UserRead.model_validate(user)


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    user_store: UserStore = Depends(get_user_store),
) -> UserRead:
    user = user_store.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserRead.model_validate(user)


@router.put("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: int,
    request: UserUpdate,
    user_store: UserStore = Depends(get_user_store),
) -> Response:
    submit_user(user_store, request.to_draft(), editing_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    user_store: UserStore = Depends(get_user_store),
) -> Response:
    user_store.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================================
# ROLES
# ============================================================================


@router.get("/roles", response_model=RoleList)
async def list_roles(
    role_store: RoleStore = Depends(get_role_store),
) -> RoleList:
    roles = [RoleRead.model_validate(role) for role in role_store.list_all()]
    return RoleList(roles=roles, total=len(roles))


@router.get("/roles/names", response_model=list[str])
async def list_role_names(
    role_store: RoleStore = Depends(get_role_store),
) -> list[str]:
    """Values for the role selector on the user form."""
    return role_store.names()


@router.get("/roles/draft", response_model=RoleDraftPayload)
async def get_role_draft() -> RoleDraftPayload:
    return RoleDraftPayload.from_draft(RoleDraft())


@router.post("/roles/draft/toggle", response_model=RoleDraftPayload)
async def toggle_role_draft_permission(
    request: TogglePermissionRequest,
) -> RoleDraftPayload:
    """
    Toggle one permission on a draft and return the new draft.

    Pure: the role store is not read or written.
    """
    draft = RoleStore.toggle_permission(request.draft.to_draft(), request.permission)
    return RoleDraftPayload.from_draft(draft)


@router.post("/roles", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
async def create_role(
    request: RoleCreate,
    role_store: RoleStore = Depends(get_role_store),
) -> RoleRead:
    role = submit_role(role_store, request.to_draft())
    return RoleRead.model_validate(role)


@router.get("/roles/{role_id}", response_model=RoleRead)
async def get_role(
    role_id: int,
    role_store: RoleStore = Depends(get_role_store),
) -> RoleRead:
    role = role_store.get(role_id)
    if role is None:
        raise NotFoundError("Role not found")
    return RoleRead.model_validate(role)


@router.put("/roles/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_role(
    role_id: int,
    request: RoleUpdate,
    role_store: RoleStore = Depends(get_role_store),
) -> Response:
    submit_role(role_store, request.to_draft(), editing_id=role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/roles/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_role(
    role_id: int,
    role_store: RoleStore = Depends(get_role_store),
    user_store: UserStore = Depends(get_user_store),
) -> Response:
    """Delete a role. Users naming it keep the name (no cascade)."""
    delete_role(role_store, user_store, role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
