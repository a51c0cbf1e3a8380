from pydantic import BaseModel, Field

from ..admin.permissions import Permission
from ..domain.entities import RoleDraft


class RoleBase(BaseModel):
    name: str
    permissions: list[Permission]


class RoleCreate(RoleBase):
    def to_draft(self) -> RoleDraft:
        return RoleDraft(name=self.name, permissions=tuple(self.permissions))


class RoleUpdate(RoleCreate):
    pass


class RoleRead(RoleBase):
    id: int

    class Config:
        from_attributes = True


class RoleList(BaseModel):
    roles: list[RoleRead] = Field(default_factory=list)
    total: int


class RoleDraftPayload(BaseModel):
    """Response shape for role drafts; the defaults describe a blank draft."""
    name: str = ""
    permissions: list[Permission] = Field(default_factory=list)

    @classmethod
    def from_draft(cls, draft: RoleDraft) -> "RoleDraftPayload":
        return cls(name=draft.name, permissions=list(draft.permissions))


class TogglePermissionRequest(BaseModel):
    """Request body for toggling one permission on an unsaved role draft."""
    draft: RoleCreate
    permission: Permission
