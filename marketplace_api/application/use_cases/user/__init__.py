from .list_users import ListUsersUseCase
from .get_user import GetUserUseCase
from .update_user import UpdateUserUseCase
from .delete_user import DeleteUserUseCase

__all__ = ["ListUsersUseCase", "GetUserUseCase", "UpdateUserUseCase", "DeleteUserUseCase"]
