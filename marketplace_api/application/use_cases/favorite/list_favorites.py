# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.product_repository import ProductRepository
from ...dto.favorite_dto import ProductResponse
from ...dto.mappers import product_to_response
from ...exceptions import UserNotFoundError


class ListFavoritesUseCase:
    """Use case for listing a user's favorite products"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.user_repository = user_repository
        self.product_repository = product_repository
    
    async def execute(self, user_id: str) -> List[ProductResponse]:
        """
        Returns:
            Favorite products in the order they were added; references to
            products that no longer exist are skipped
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        products = await self.product_repository.find_by_ids(user.favoritos)
        return [product_to_response(product) for product in products]
