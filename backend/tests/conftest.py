"""Shared test fixtures and configuration."""
import os

# Defaults used only if not already set; read when app.main is first imported
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
os.environ.setdefault("SEED_DEMO_DATA", "true")
os.environ.setdefault("ID_STRATEGY", "sequence")

import pytest  # noqa: E402

from app.admin.seed import default_roles, default_users  # noqa: E402
from app.crud.role import RoleStore  # noqa: E402
from app.crud.user import UserStore  # noqa: E402
from app.domain.ids import LengthIdAllocator  # noqa: E402


@pytest.fixture
def user_store() -> UserStore:
    return UserStore(default_users())


@pytest.fixture
def role_store() -> RoleStore:
    return RoleStore(default_roles())


@pytest.fixture
def legacy_user_store() -> UserStore:
    """User store numbering new records with the collection length plus one."""
    return UserStore(default_users(), id_allocator=LengthIdAllocator())


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import app

    with TestClient(app) as test_client:
        yield test_client
