# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import DeleteUserResponse
from ...exceptions import UserNotFoundError
from ...services.user_deletion_service import UserDeletionService


class DeleteUserUseCase:
    """Use case for deleting a user together with the records it owns"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        deletion_service: UserDeletionService,
    ) -> None:
        self.user_repository = user_repository
        self.deletion_service = deletion_service
    
    async def execute(self, user_id: str) -> DeleteUserResponse:
        """
        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        summary = await self.deletion_service.delete_user_cascade(user)
        return DeleteUserResponse(message="User deleted with cascade", summary=summary)
