# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.donation_repository import DonationRepository
from ...dto.user_dto import UserDetailResponse
from ...dto.mappers import user_to_detail_response
from ...exceptions import UserNotFoundError


class GetUserUseCase:
    """Use case for reading a public user profile"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        donation_repository: DonationRepository,
    ) -> None:
        self.user_repository = user_repository
        self.donation_repository = donation_repository
    
    async def execute(self, user_id: str) -> UserDetailResponse:
        """
        Get a user by application ID, falling back to the MongoDB _id
        
        Args:
            user_id: Application ID or MongoDB _id
            
        Returns:
            UserDetailResponse with active transactions and delivered donation count
            
        Raises:
            UserNotFoundError: If neither identity matches
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            user = await self.user_repository.find_by_mongo_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        donaciones_count = await self.donation_repository.count_delivered_by_donor(user.mongo_id or "")
        return user_to_detail_response(user, donaciones_count)
