"""
Mock data loaded into the stores at startup (``SEED_DEMO_DATA=true``).

Everything here lives in memory and is lost on restart.
"""
from app.admin.permissions import Permission, UserStatus
from app.domain.entities import Role, User


DEFAULT_USERS = [
    {
        "id": 1,
        "name": "Sarah Chen",
        "email": "sarah@example.com",
        "role": "supervisor",
        "status": UserStatus.ACTIVE,
    },
    {
        "id": 2,
        "name": "Miguel Rodriguez",
        "email": "miguel@example.com",
        "role": "manager",
        "status": UserStatus.ACTIVE,
    },
]

DEFAULT_ROLES = [
    {
        "id": 1,
        "name": "supervisor",
        "permissions": [
            Permission.READ,
            Permission.WRITE,
            Permission.DELETE,
            Permission.MANAGE_USERS,
            Permission.MANAGE_ROLES,
        ],
    },
    {
        "id": 2,
        "name": "manager",
        "permissions": [
            Permission.READ,
            Permission.WRITE,
            Permission.DELETE,
            Permission.MANAGE_USERS,
        ],
    },
    {
        "id": 3,
        "name": "associate",
        "permissions": [Permission.READ, Permission.WRITE],
    },
    {
        "id": 4,
        "name": "intern",
        "permissions": [Permission.READ],
    },
]


def default_users() -> list[User]:
    return [User(**data) for data in DEFAULT_USERS]


def default_roles() -> list[Role]:
    return [Role(**data) for data in DEFAULT_ROLES]
