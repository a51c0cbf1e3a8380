from pydantic import BaseModel

from ..admin.permissions import Permission, UserStatus
from .role import RoleRead
from .user import UserRead


class FormOptions(BaseModel):
    roles: list[str]
    statuses: list[UserStatus]
    permissions: list[Permission]


class DashboardRead(BaseModel):
    users: list[UserRead]
    roles: list[RoleRead]
    options: FormOptions
