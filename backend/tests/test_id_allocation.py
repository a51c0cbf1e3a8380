"""
Tests for identifier allocation.

The default allocator never reuses an identifier. The legacy allocator
numbers records with the collection length plus one, which can collide
with a surviving record after a deletion.
"""
import pytest

from app.admin.state import build_admin_state
from app.crud.user import UserStore
from app.domain.entities import User, UserDraft
from app.domain.ids import (
    LengthIdAllocator,
    SequentialIdAllocator,
    build_id_allocator,
)


class TestSequentialAllocator:
    def test_delete_then_add_does_not_reuse_identifier(self, user_store: UserStore):
        """Users 1 and 2, delete 1, add: the new user gets 3."""
        user_store.delete(1)

        created = user_store.add(UserDraft(name="New", email="new@example.com"))

        assert created.id == 3
        assert sorted(user.id for user in user_store.list_all()) == [2, 3]

    def test_deleting_the_newest_record_does_not_free_its_identifier(self, user_store: UserStore):
        """Even the highest identifier is not handed out again."""
        created = user_store.add(UserDraft())
        user_store.delete(created.id)

        assert user_store.add(UserDraft()).id == created.id + 1

    def test_moves_past_highest_seeded_identifier(self):
        store = UserStore([User(id=10, name="a", email="a", role="intern", status="active")])

        assert store.add(UserDraft()).id == 11

    def test_allocator_is_monotonic(self):
        allocator = SequentialIdAllocator()

        issued = [allocator.next_id([]) for _ in range(3)]

        assert issued == [1, 2, 3]


class TestLengthAllocator:
    def test_delete_then_add_collides(self, legacy_user_store: UserStore):
        """Users 1 and 2, delete 1, add: length + 1 = 2 collides with user 2."""
        legacy_user_store.delete(1)

        created = legacy_user_store.add(UserDraft(name="New", email="new@example.com"))

        assert created.id == 2
        assert [user.id for user in legacy_user_store.list_all()] == [2, 2]

    def test_without_deletions_matches_sequence(self, legacy_user_store: UserStore):
        assert legacy_user_store.add(UserDraft()).id == 3

    def test_length_allocator_ignores_history(self):
        allocator = LengthIdAllocator()

        assert allocator.next_id([]) == 1
        assert allocator.next_id([]) == 1


class TestBuildAllocator:
    def test_known_strategies(self):
        assert isinstance(build_id_allocator("sequence"), SequentialIdAllocator)
        assert isinstance(build_id_allocator("length"), LengthIdAllocator)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown id strategy"):
            build_id_allocator("uuid")

    def test_stores_do_not_share_allocators(self):
        """Users and roles are numbered independently."""
        state = build_admin_state(seed_demo_data=False)

        assert state.users.add(UserDraft()).id == 1
        assert state.users.add(UserDraft()).id == 2
        assert state.roles.list_all() == []
