# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import hash_password
from ...dto.user_dto import UserUpdateRequest, UserResponse
from ...dto.mappers import user_to_response
from ...exceptions import DuplicateEmailError, UserNotFoundError

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user profile"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Overwrite only the fields present in the request
        
        Args:
            user_id: Application ID of the user
            request: Partial update; unset fields keep their stored values
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            UserNotFoundError: If the user does not exist
            DuplicateEmailError: If the new email belongs to another user
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        changes = request.model_dump(exclude_unset=True)
        logger.info(f"Updating user {user_id} fields: {sorted(changes)}")
        
        new_email = changes.get("email")
        if new_email and new_email != user.email:
            owner = await self.user_repository.find_by_email(new_email)
            if owner is not None and owner.mongo_id != user.mongo_id:
                raise DuplicateEmailError("Email is already registered")
        
        for field_name, value in changes.items():
            if field_name == "password":
                if value is not None:
                    user.hashed_password = hash_password(value)
            elif field_name == "transacciones":
                user.transacciones = list(value or [])
            elif field_name == "mostrar_contacto":
                user.mostrar_contacto = bool(value)
            elif field_name == "email":
                if value:
                    user.email = value
            else:
                setattr(user, field_name, value)
        
        updated_user = await self.user_repository.save(user)
        return user_to_response(updated_user)
