# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.product_repository import ProductRepository
from ...dto.favorite_dto import FavoritesResponse
from ...exceptions import (
    DuplicateFavoriteError,
    ProductNotFoundError,
    UserNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AddFavoriteUseCase:
    """Use case for adding a product to a user's favorites"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.user_repository = user_repository
        self.product_repository = product_repository
    
    async def execute(self, user_id: str, product_id: Optional[str]) -> FavoritesResponse:
        """
        Add a product to favorites
        
        Args:
            user_id: Application ID of the user
            product_id: MongoDB _id of the product
            
        Returns:
            FavoritesResponse with the updated favorite IDs
            
        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If product_id is missing
            ProductNotFoundError: If the product does not exist
            DuplicateFavoriteError: If the product is already a favorite
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        
        if not product_id:
            raise ValidationError("Missing productId")
        
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError()
        
        added = await self.user_repository.add_favorite(user_id, product.id or "")
        if not added:
            logger.warning(f"Product {product.id} already in favorites of user {user_id}")
            raise DuplicateFavoriteError("Product is already in favorites")
        
        favoritos = await self.user_repository.list_favorites(user_id)
        logger.info(f"User {user_id} added product {product.id} to favorites")
        return FavoritesResponse(message="Product added to favorites", favoritos=favoritos)
