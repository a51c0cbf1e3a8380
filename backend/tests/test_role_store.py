"""
Tests for the in-memory role store and permission toggling.
"""
import pytest

from app.admin.permissions import Permission
from app.crud.role import RoleStore
from app.domain.entities import Role, RoleDraft


class TestRoleCrud:
    """Create, update and delete roles."""

    def test_add_role_with_empty_permissions(self, role_store: RoleStore):
        """An empty permission set is stored as is."""
        created = role_store.add(RoleDraft(name="auditor", permissions=()))

        assert len(role_store) == 5
        assert created.name == "auditor"
        assert created.permissions == ()
        assert role_store.get(created.id) == created

    def test_add_allows_duplicate_names(self, role_store: RoleStore):
        """Role names are not required to be unique."""
        role_store.add(RoleDraft(name="intern"))

        assert role_store.names().count("intern") == 2

    def test_update_replaces_only_matching_role(self, role_store: RoleStore):
        before = role_store.list_all()

        role_store.update(Role(id=3, name="associate", permissions=(Permission.READ,)))

        after = role_store.list_all()
        assert after[2].permissions == (Permission.READ,)
        assert [r for r in after if r.id != 3] == [r for r in before if r.id != 3]

    def test_update_missing_role_is_noop(self, role_store: RoleStore):
        before = role_store.list_all()

        role_store.update(Role(id=10, name="ghost"))

        assert role_store.list_all() == before

    def test_delete_role(self, role_store: RoleStore):
        role_store.delete(4)

        assert role_store.names() == ["supervisor", "manager", "associate"]

    def test_delete_missing_role_is_noop(self, role_store: RoleStore):
        role_store.delete(99)

        assert len(role_store) == 4


class TestRoleNames:
    """Role selector values."""

    def test_names_follow_store_order(self, role_store: RoleStore):
        assert role_store.names() == ["supervisor", "manager", "associate", "intern"]

    def test_names_reflect_new_roles(self, role_store: RoleStore):
        role_store.add(RoleDraft(name="auditor"))

        assert role_store.names()[-1] == "auditor"


class TestTogglePermission:
    """Permission toggling on drafts."""

    def test_toggle_adds_absent_permission(self):
        draft = RoleDraft(name="auditor")

        toggled = RoleStore.toggle_permission(draft, "read")

        assert toggled.permissions == (Permission.READ,)

    def test_toggle_removes_present_permission(self):
        draft = RoleDraft(name="x", permissions=(Permission.READ, Permission.WRITE))

        toggled = RoleStore.toggle_permission(draft, Permission.READ)

        assert toggled.permissions == (Permission.WRITE,)

    def test_toggle_twice_restores_original(self):
        """Double application returns the original permission set."""
        draft = RoleDraft(name="x", permissions=(Permission.DELETE,))

        once = RoleStore.toggle_permission(draft, Permission.MANAGE_ROLES)
        twice = RoleStore.toggle_permission(once, Permission.MANAGE_ROLES)

        assert twice == draft

    def test_toggle_keeps_insertion_order(self, role_store: RoleStore):
        """Toggling read then write on a new role yields [read, write]."""
        created = role_store.add(RoleDraft(name="auditor", permissions=()))
        draft = created.to_draft()

        draft = role_store.toggle_permission(draft, "read")
        draft = role_store.toggle_permission(draft, "write")

        assert draft.permissions == (Permission.READ, Permission.WRITE)

    def test_toggle_does_not_touch_store(self, role_store: RoleStore):
        """The store only changes on submission."""
        intern = role_store.get(4)

        role_store.toggle_permission(intern.to_draft(), Permission.WRITE)

        assert role_store.get(4).permissions == (Permission.READ,)

    def test_toggle_rejects_unknown_permission(self):
        """Labels outside the vocabulary are rejected."""
        with pytest.raises(ValueError, match="Unknown permission 'admin'"):
            RoleStore.toggle_permission(RoleDraft(), "admin")
