from ...crud.user import UserStore
from ...domain.entities import User, UserDraft


def submit_user(
    user_store: UserStore,
    draft: UserDraft,
    editing_id: int | None = None,
) -> User:
    """Merge a submitted draft into the store.

    A new draft is inserted. A draft opened from an existing user replaces
    the record with ``editing_id``; if that record is gone the replacement is
    silently skipped and the submitted user is still returned.
    """
    if editing_id is None:
        return user_store.add(draft)

    user = User.from_draft(editing_id, draft)
    user_store.update(user)
    return user
