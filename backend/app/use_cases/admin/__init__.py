from .delete_role import delete_role
from .submit_role import submit_role
from .submit_user import submit_user

__all__ = ["delete_role", "submit_role", "submit_user"]
