from pydantic import BaseModel, Field

from ..admin.permissions import DEFAULT_USER_ROLE, UserStatus
from ..domain.entities import UserDraft


class UserBase(BaseModel):
    # Presence only; empty strings are accepted
    name: str
    email: str
    role: str
    status: UserStatus


class UserDraftPayload(BaseModel):
    name: str = ""
    email: str = ""
    role: str = DEFAULT_USER_ROLE
    status: UserStatus = UserStatus.ACTIVE


class UserCreate(UserBase):
    def to_draft(self) -> UserDraft:
        return UserDraft(
            name=self.name,
            email=self.email,
            role=self.role,
            status=self.status,
        )


class UserUpdate(UserCreate):
    pass


class UserRead(UserBase):
    id: int

    class Config:
        from_attributes = True


class UserList(BaseModel):
    users: list[UserRead] = Field(default_factory=list)
    total: int
