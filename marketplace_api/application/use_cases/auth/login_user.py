# Standard library imports
import logging
import uuid

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.security import verify_password, create_access_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.mappers import user_to_response
from ...exceptions import InvalidCredentialsError, UserNotFoundError

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token
        
        Accounts stored without an application ID get one assigned on their
        first login, so the token always carries a usable ``id`` claim.
        
        Args:
            request: Login request with email and password
            
        Returns:
            AuthResponse with the user (no password) and a bearer token
            
        Raises:
            UserNotFoundError: If no user has this email
            InvalidCredentialsError: If the password does not match
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            raise UserNotFoundError()
        
        if not verify_password(request.password, user.hashed_password):
            raise InvalidCredentialsError("Incorrect password")
        
        if not user.id:
            user.id = str(uuid.uuid4())
            user = await self.user_repository.save(user)
            logger.info(f"Assigned application ID {user.id} to user {user.mongo_id}")
        
        token = create_access_token(user.id, user.email)
        return AuthResponse(user=user_to_response(user), token=token)
