# Standard library imports
import logging
import uuid

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.security import hash_password, create_access_token
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.mappers import user_to_response
from ...exceptions import DuplicateEmailError

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and issuing their first token"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details
            
        Returns:
            AuthResponse with the created user (no password) and a bearer token
            
        Raises:
            DuplicateEmailError: If a user with the email already exists
        """
        # Uniqueness is checked here, not left to a storage index
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.warning(f"Registration rejected, email already registered: {request.email}")
            raise DuplicateEmailError("Email is already registered")
        
        new_user = User(
            id=request.id or str(uuid.uuid4()),
            email=request.email,
            hashed_password=hash_password(request.password),
            username=request.username,
            nombre=request.nombre,
            apellido=request.apellido,
            imagen=request.imagen,
            zona=request.provincia or request.zona,
            ubicacion=request.provincia or request.ubicacion,
        )
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")
        
        token = create_access_token(saved_user.id or "", saved_user.email)
        return AuthResponse(user=user_to_response(saved_user), token=token)
